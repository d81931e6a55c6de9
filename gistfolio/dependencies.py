"""Wiring of concrete collaborators from settings"""
from collections.abc import Callable

from gistfolio.application.interfaces import IColorExtractor, IVideoMetadataProvider
from gistfolio.application.services import AdminStore, PortfolioStore
from gistfolio.infrastructure.config.settings import Settings, get_settings
from gistfolio.infrastructure.external.gist import GistDocumentStore
from gistfolio.infrastructure.external.video import VideoProviderFactory
from gistfolio.infrastructure.session import FileSessionHolder, default_session_path


def get_document_store(settings: Settings | None = None) -> GistDocumentStore:
    settings = settings or get_settings()
    return GistDocumentStore(
        gist_id=settings.gist_id,
        file_name=settings.gist_file_name,
        api_base=settings.github_api_base,
        accept=settings.github_accept_header,
        timeout=settings.http_timeout,
    )


def get_session_holder(settings: Settings | None = None) -> FileSessionHolder:
    settings = settings or get_settings()
    return FileSessionHolder(settings.session_file or default_session_path(settings.app_name))


def get_video_provider(settings: Settings | None = None) -> IVideoMetadataProvider:
    settings = settings or get_settings()
    provider_type = settings.video_provider.lower()
    kwargs: dict = {"timeout": settings.http_timeout}
    if provider_type == "youtube":
        kwargs["oembed_url"] = settings.youtube_oembed_url
    elif provider_type == "vimeo":
        kwargs["api_base"] = settings.vimeo_api_base
    return VideoProviderFactory.create_provider(provider_type, **kwargs)


def build_admin_store(
    settings: Settings | None = None,
    on_logout: Callable[[], None] | None = None,
) -> AdminStore:
    """AdminStore backed by the configured gist, session file and video provider"""
    settings = settings or get_settings()
    return AdminStore(
        document_store=get_document_store(settings),
        session_holder=get_session_holder(settings),
        video_provider=get_video_provider(settings),
        on_logout=on_logout,
    )


def build_portfolio_store(
    settings: Settings | None = None,
    color_extractor: IColorExtractor | None = None,
) -> PortfolioStore:
    settings = settings or get_settings()
    return PortfolioStore(get_document_store(settings), color_extractor=color_extractor)
