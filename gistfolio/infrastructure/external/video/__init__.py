"""Video metadata lookups (YouTube, Vimeo)"""

from gistfolio.infrastructure.external.video.factory import VideoProviderFactory
from gistfolio.infrastructure.external.video.providers import VimeoProvider, YouTubeProvider

__all__ = ["VideoProviderFactory", "VimeoProvider", "YouTubeProvider"]
