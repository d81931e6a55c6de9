"""Tests for environment-driven settings"""

import pytest
from pydantic import ValidationError

from gistfolio.infrastructure.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run without a .env file and with a clean GIST_* environment"""
    monkeypatch.chdir(tmp_path)
    for name in ("GIST_ID", "GIST_FILE_NAME", "VIDEO_PROVIDER", "HTTP_TIMEOUT", "DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_loads_from_environment(monkeypatch):
    monkeypatch.setenv("GIST_ID", "abc123")
    monkeypatch.setenv("VIDEO_PROVIDER", "vimeo")

    settings = Settings()

    assert settings.gist_id == "abc123"
    assert settings.gist_file_name == "projects-config.json"
    assert settings.video_provider == "vimeo"
    assert settings.http_timeout is None


def test_gist_id_is_required():
    with pytest.raises(ValidationError, match="GIST_ID is required"):
        Settings()


def test_unknown_video_provider_rejected(monkeypatch):
    monkeypatch.setenv("GIST_ID", "abc123")
    monkeypatch.setenv("VIDEO_PROVIDER", "dailymotion")

    with pytest.raises(ValidationError, match="Invalid video_provider"):
        Settings()


def test_non_positive_timeout_rejected(monkeypatch):
    monkeypatch.setenv("GIST_ID", "abc123")
    monkeypatch.setenv("HTTP_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        Settings()
