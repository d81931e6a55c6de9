"""Video metadata provider implementations"""

from gistfolio.infrastructure.external.video.providers.vimeo_provider import VimeoProvider
from gistfolio.infrastructure.external.video.providers.youtube_provider import YouTubeProvider

__all__ = ["VimeoProvider", "YouTubeProvider"]
