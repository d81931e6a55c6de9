"""Latest-request-wins video metadata preview"""

from gistfolio.application.interfaces import IVideoMetadataProvider, VideoMetadata
from gistfolio.domain.exceptions import GistfolioException
from gistfolio.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class VideoPreview:
    """
    Holds metadata for the video reference currently shown in an edit form.

    The presentation layer calls ``request`` whenever the reference changes.
    Each call takes a new sequence number and only the response of the
    latest call is applied; earlier responses arriving late are dropped.
    """

    def __init__(self, provider: IVideoMetadataProvider) -> None:
        self.provider = provider
        self.data: VideoMetadata | None = None
        self.error: str | None = None
        self.is_loading = False
        self._sequence = 0
        self._last_ref = ""

    async def request(self, video_ref: str | None) -> VideoMetadata | None:
        self._sequence += 1
        sequence = self._sequence
        self._last_ref = video_ref or ""

        if not video_ref:
            self.data = None
            self.error = None
            self.is_loading = False
            return None

        self.is_loading = True
        self.error = None
        try:
            data = await self.provider.fetch_metadata(video_ref)
        except GistfolioException as e:
            if sequence != self._sequence:
                return None
            self.data = None
            self.error = e.message
            self.is_loading = False
            return None

        if sequence != self._sequence:
            logger.debug("Dropping stale preview response for %s", video_ref)
            return None

        self.data = data
        self.is_loading = False
        return data

    async def refetch(self) -> VideoMetadata | None:
        return await self.request(self._last_ref)
