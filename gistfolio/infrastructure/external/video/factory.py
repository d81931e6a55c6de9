"""Video provider factory for instantiating providers"""

from typing import Any, ClassVar

from gistfolio.application.interfaces import IVideoMetadataProvider
from gistfolio.infrastructure.external.video.providers import VimeoProvider, YouTubeProvider
from gistfolio.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class VideoProviderFactory:
    """Factory for creating video metadata provider instances"""

    _providers: ClassVar[dict[str, type]] = {
        "youtube": YouTubeProvider,
        "vimeo": VimeoProvider,
    }

    @classmethod
    def create_provider(cls, provider_type: str, **kwargs: Any) -> IVideoMetadataProvider:
        """
        Create provider instance by name.

        Args:
            provider_type: Provider identifier ('youtube', 'vimeo', or a registered name)
            **kwargs: Passed to the provider constructor

        Returns:
            Provider instance

        Raises:
            ValueError: If provider_type is not supported
        """
        provider_class = cls._providers.get(provider_type.lower())

        if not provider_class:
            raise ValueError(
                f"Unsupported video provider: {provider_type}. "
                f"Supported: {cls.list_supported_providers()}"
            )

        logger.info("Creating %s", provider_class.__name__)
        return provider_class(**kwargs)

    @classmethod
    def register_provider(cls, provider_type: str, provider_class: type) -> None:
        """
        Register a custom video provider.

        Args:
            provider_type: Provider type identifier
            provider_class: Class implementing IVideoMetadataProvider
        """
        cls._providers[provider_type.lower()] = provider_class
        logger.info("Registered custom video provider: %s", provider_type)

    @classmethod
    def list_supported_providers(cls) -> list[str]:
        return list(cls._providers.keys())
