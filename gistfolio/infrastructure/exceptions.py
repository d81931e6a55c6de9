"""
Infrastructure exceptions for gistfolio.

This module defines exceptions raised at the boundary of the remote
document store and the video metadata providers. Raw httpx errors are
converted into these before they reach the application layer.
"""

from typing import Any

from gistfolio.domain.exceptions import GistfolioException


class UnauthorizedError(GistfolioException):
    """A write was attempted without a credential."""

    def __init__(self, message: str = "Unauthorized: admin token required"):
        super().__init__(message, "UNAUTHORIZED")


class PermissionDeniedError(GistfolioException):
    """Credential is valid but does not own the document."""

    def __init__(self, message: str = "Permission denied", resource: str | None = None):
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        super().__init__(message, "PERMISSION_DENIED", details)


class DocumentNotFoundError(GistfolioException):
    """The expected file is absent from the gist payload."""

    def __init__(self, gist_id: str, file_name: str):
        super().__init__(
            f"Config file not found in gist: {file_name}",
            "DOCUMENT_NOT_FOUND",
            {"gist_id": gist_id, "file_name": file_name},
        )


class DocumentFormatError(GistfolioException):
    """The stored file content is not a valid document."""

    def __init__(self, file_name: str, reason: str):
        super().__init__(
            f"Invalid document content in {file_name}",
            "DOCUMENT_FORMAT_ERROR",
            {"file_name": file_name, "reason": reason},
        )


class TransportError(GistfolioException):
    """Network failure or non-2xx response from a remote API."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        details: dict[str, Any] = {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, "TRANSPORT_ERROR", details)

    @property
    def status_code(self) -> int | None:
        return self.details.get("status_code")


class PrivacyRestrictedError(GistfolioException):
    """The video exists but its owner restricts metadata access."""

    def __init__(self, provider: str, video_ref: str):
        super().__init__(
            f"{provider} video is private or restricted: {video_ref}",
            "PRIVACY_RESTRICTED",
            {"provider": provider, "video_ref": video_ref},
        )
