"""YouTube metadata provider using the public oEmbed endpoint"""
import re
from typing import Literal

import httpx

from gistfolio.application.interfaces import VideoMetadata
from gistfolio.domain.exceptions import VideoNotFoundError
from gistfolio.infrastructure.exceptions import PrivacyRestrictedError
from gistfolio.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

VIDEO_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{11}$")
VIDEO_URL_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?|shorts)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})",
    re.IGNORECASE,
)


class YouTubeProvider:
    """YouTube lookups: id extraction, oEmbed title, static thumbnails"""

    name = "youtube"

    def __init__(
        self,
        oembed_url: str = "https://www.youtube.com/oembed",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._oembed_url = oembed_url
        self._timeout = timeout
        self._transport = transport

    def extract_video_id(self, video_ref: str) -> str:
        if not video_ref:
            return ""
        clean = video_ref.strip()

        if VIDEO_ID_PATTERN.match(clean):
            return clean

        match = VIDEO_URL_PATTERN.search(clean)
        if match:
            return match.group(1)
        return ""

    def get_thumbnail_url(self, video_id: str, quality: Literal["maxres", "hq"] = "maxres") -> str:
        return f"https://img.youtube.com/vi/{video_id}/{quality}default.jpg"

    async def fetch_metadata(self, video_ref: str) -> VideoMetadata:
        """
        Resolve title and thumbnail for a YouTube video.

        Thumbnails are derived from the id, so a lookup that fails for
        transport reasons still returns usable metadata with an empty title.

        Raises:
            VideoNotFoundError: Malformed reference, or oEmbed reports 400/404
            PrivacyRestrictedError: oEmbed reports 401/403 (private or not embeddable)
        """
        video_id = self.extract_video_id(video_ref)
        if not video_id:
            raise VideoNotFoundError(self.name, video_ref)

        title = ""
        params = {"url": f"https://www.youtube.com/watch?v={video_id}", "format": "json"}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(self._oembed_url, params=params)
        except httpx.TransportError as e:
            logger.warning(f"Could not fetch YouTube title via oEmbed: {e}")
        else:
            if response.status_code in (400, 404):
                raise VideoNotFoundError(self.name, video_id)
            if response.status_code in (401, 403):
                raise PrivacyRestrictedError(self.name, video_id)
            if response.is_success:
                try:
                    title = response.json().get("title") or ""
                except ValueError:
                    logger.warning("YouTube oEmbed returned non-JSON body for %s", video_id)
            else:
                logger.warning(
                    "YouTube oEmbed returned HTTP %s for %s", response.status_code, video_id
                )

        return VideoMetadata(
            id=video_id,
            title=title,
            thumbnail_url=self.get_thumbnail_url(video_id, "hq"),
            provider=self.name,
        )
