"""
Service interfaces (ports) for the application layer.

The admin and portfolio stores depend only on these protocols; the
concrete gist, session and video provider implementations live in the
infrastructure layer and are injected at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gistfolio.domain.entities import Document


@dataclass(frozen=True)
class PersistAck:
    """Acknowledgement of a successful document write"""

    gist_id: str
    file_name: str
    updated_at: datetime
    html_url: str | None = None


@dataclass(frozen=True)
class VideoMetadata:
    """Provider-agnostic video metadata used to prefill an entry"""

    id: str
    title: str
    thumbnail_url: str
    provider: str = ""


class IDocumentStore(Protocol):
    """Protocol for the remote document store"""

    async def verify_permission(self, token: str) -> bool:
        """True when the token's principal owns the document"""
        ...

    async def fetch_document(self, token: str | None = None) -> Document:
        """Read and parse the document (unauthenticated when token is None)"""
        ...

    async def persist_document(self, document: Document, token: str | None) -> PersistAck:
        """Overwrite the remote document with the full local copy"""
        ...


class ISessionHolder(Protocol):
    """Protocol for session-scoped credential storage"""

    def save(self, token: str) -> None: ...

    def load(self) -> str | None: ...

    def clear(self) -> None: ...


class IVideoMetadataProvider(Protocol):
    """Protocol for video metadata lookups"""

    name: str

    def extract_video_id(self, video_ref: str) -> str:
        """Canonical id from a raw URL or id, '' when unrecognised"""
        ...

    async def fetch_metadata(self, video_ref: str) -> VideoMetadata:
        """
        Look up title and thumbnail for a video.

        Raises:
            VideoNotFoundError: Unknown or malformed reference
            PrivacyRestrictedError: Video is private or embedding is disabled
        """
        ...


class IColorExtractor(Protocol):
    """Protocol for dominant-colour extraction from an image URL"""

    async def extract_dominant_color(self, image_url: str) -> str: ...
