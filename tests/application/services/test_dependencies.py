"""Tests for wiring stores from settings"""

import pytest

from gistfolio.application.services import AdminStore, PortfolioStore
from gistfolio.dependencies import (
    build_admin_store,
    build_portfolio_store,
    get_session_holder,
    get_video_provider,
)
from gistfolio.infrastructure.config.settings import Settings
from gistfolio.infrastructure.external.gist import GistDocumentStore
from gistfolio.infrastructure.external.video import VimeoProvider, YouTubeProvider


@pytest.fixture
def settings(tmp_path):
    return Settings(
        gist_id="abc123",
        gist_file_name="portfolio.json",
        session_file=str(tmp_path / "session"),
        _env_file=None,
    )


def test_build_admin_store(settings):
    store = build_admin_store(settings)

    assert isinstance(store, AdminStore)
    assert isinstance(store.document_store, GistDocumentStore)
    assert store.document_store.gist_id == "abc123"
    assert store.document_store.file_name == "portfolio.json"
    assert isinstance(store.video_provider, YouTubeProvider)
    assert str(store.session_holder.path) == settings.session_file


def test_build_portfolio_store(settings):
    store = build_portfolio_store(settings)

    assert isinstance(store, PortfolioStore)
    assert store.document_store.gist_url == "https://api.github.com/gists/abc123"


def test_vimeo_provider_from_settings(settings):
    settings.video_provider = "vimeo"

    assert isinstance(get_video_provider(settings), VimeoProvider)


def test_session_holder_default_path(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
    settings = Settings(gist_id="abc123", _env_file=None)

    assert get_session_holder(settings).path == tmp_path / "gistfolio" / "session"
