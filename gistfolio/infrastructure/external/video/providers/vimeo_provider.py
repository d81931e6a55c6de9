"""Vimeo metadata provider using the simple v2 JSON API"""
import re

import httpx

from gistfolio.application.interfaces import VideoMetadata
from gistfolio.domain.exceptions import VideoNotFoundError
from gistfolio.infrastructure.exceptions import PrivacyRestrictedError, TransportError
from gistfolio.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

VIDEO_ID_PATTERN = re.compile(r"^\d+$")
VIDEO_URL_PATTERN = re.compile(r"vimeo\.com/(?:.*?/)?(\d+)(?:[/?#]|$)", re.IGNORECASE)
THUMBNAIL_SIZE_PATTERN = re.compile(r"_\d+\.")


class VimeoProvider:
    """Vimeo lookups via https://vimeo.com/api/v2/video/{id}.json"""

    name = "vimeo"

    def __init__(
        self,
        api_base: str = "https://vimeo.com/api/v2",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_base = api_base.rstrip("/")
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

    @staticmethod
    def hd_thumbnail(thumbnail_large: str) -> str:
        """Rewrite the size suffix of a Vimeo thumbnail to 1280px"""
        return THUMBNAIL_SIZE_PATTERN.sub("_1280.", thumbnail_large, count=1)

    async def fetch_metadata(self, video_ref: str) -> VideoMetadata:
        """
        Resolve title and HD thumbnail for a Vimeo video.

        Raises:
            VideoNotFoundError: Malformed reference, 404, or no video object in the payload
            PrivacyRestrictedError: 403 (private video)
            TransportError: Any other failure reaching the API
        """
        video_id = self.extract_video_id(video_ref)
        if not video_id:
            raise VideoNotFoundError(self.name, video_ref)

        url = f"{self._api_base}/video/{video_id}.json"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.TransportError as e:
            logger.error(f"Vimeo fetch error: {e}")
            raise TransportError(f"Vimeo request failed: {e}", url=url) from e

        if response.status_code == 404:
            raise VideoNotFoundError(self.name, video_id)
        if response.status_code == 403:
            raise PrivacyRestrictedError(self.name, video_id)
        if not response.is_success:
            raise TransportError(
                f"Vimeo Error: {response.status_code}", url=url, status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Vimeo returned non-JSON body: {e}", url=url) from e
        if not data or not isinstance(data, list):
            raise VideoNotFoundError(self.name, video_id)

        video = data[0]
        if not isinstance(video, dict):
            raise VideoNotFoundError(self.name, video_id)
        thumbnail_large = video.get("thumbnail_large") or ""
        thumbnail = self.hd_thumbnail(thumbnail_large) if thumbnail_large else ""

        return VideoMetadata(
            id=str(video.get("id", video_id)),
            title=video.get("title") or "",
            thumbnail_url=thumbnail,
            provider=self.name,
        )
