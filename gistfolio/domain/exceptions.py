"""
Domain exceptions for gistfolio.

This module defines domain-level exceptions that represent business rule violations.
These exceptions are independent of the remote document protocol.
"""

from typing import Any


class GistfolioException(Exception):
    """
    Base exception for all gistfolio errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationError(GistfolioException):
    """Raised when a login or session restore fails."""

    def __init__(self, message: str = "Invalid access token"):
        super().__init__(message, "AUTHENTICATION_ERROR")


class NotAuthenticatedError(GistfolioException):
    """Raised when an operation requires an authenticated session."""

    def __init__(self, action: str):
        super().__init__(
            f"Authentication required: {action}",
            "NOT_AUTHENTICATED",
            {"action": action},
        )


class NotFoundError(GistfolioException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any, error_code: str = "NOT_FOUND"):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            error_code,
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class EntryNotFoundError(NotFoundError):
    """Raised when no portfolio entry has the given id."""

    def __init__(self, entry_id: int):
        super().__init__("Entry", entry_id, "ENTRY_NOT_FOUND")


class VideoNotFoundError(NotFoundError):
    """Raised when a video reference cannot be resolved by its provider."""

    def __init__(self, provider: str, video_ref: str):
        super().__init__(f"{provider} video", video_ref, "VIDEO_NOT_FOUND")


class UserCancelledError(GistfolioException):
    """Raised when a destructive action is not confirmed."""

    def __init__(self, action: str):
        super().__init__(
            f"Cancelled by user: {action}",
            "USER_CANCELLED",
            {"action": action},
        )
