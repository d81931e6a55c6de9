"""Tests for VideoProviderFactory"""

import pytest

from gistfolio.infrastructure.external.video import (
    VideoProviderFactory,
    VimeoProvider,
    YouTubeProvider,
)


def test_create_known_providers():
    assert isinstance(VideoProviderFactory.create_provider("youtube"), YouTubeProvider)
    assert isinstance(VideoProviderFactory.create_provider("Vimeo"), VimeoProvider)


def test_create_passes_kwargs():
    provider = VideoProviderFactory.create_provider("vimeo", api_base="http://vimeo.test/api/")

    assert provider._api_base == "http://vimeo.test/api"


def test_unknown_provider_raises():
    with pytest.raises(ValueError, match="Unsupported video provider"):
        VideoProviderFactory.create_provider("dailymotion")


def test_register_custom_provider():
    class StubProvider:
        name = "stub"

    VideoProviderFactory.register_provider("stub", StubProvider)
    try:
        assert "stub" in VideoProviderFactory.list_supported_providers()
        assert isinstance(VideoProviderFactory.create_provider("stub"), StubProvider)
    finally:
        VideoProviderFactory._providers.pop("stub")
