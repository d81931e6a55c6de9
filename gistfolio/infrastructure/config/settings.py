from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "gistfolio"
    app_version: str = "1.0.0"
    debug: bool = False

    # Remote document (gist)
    gist_id: str = ""  # Injected at deploy time, validated in model_validator
    gist_file_name: str = "projects-config.json"
    github_api_base: str = "https://api.github.com"
    github_accept_header: str = "application/vnd.github.v3+json"
    http_timeout: float | None = None  # None = no client-side timeout

    # Session
    session_file: str | None = None  # Defaults to $XDG_RUNTIME_DIR/gistfolio/session

    # Video metadata providers
    video_provider: str = "youtube"  # Options: "youtube", "vimeo"
    youtube_oembed_url: str = "https://www.youtube.com/oembed"
    vimeo_api_base: str = "https://vimeo.com/api/v2"

    @model_validator(mode="after")
    def validate_remote_config(self) -> "Settings":
        """Validate remote document and provider configuration"""
        if not self.gist_id:
            raise ValueError("GIST_ID is required. Set in environment or .env file.")
        if not self.gist_file_name:
            raise ValueError("GIST_FILE_NAME must not be empty")

        if self.video_provider.lower() not in ("youtube", "vimeo"):
            raise ValueError(
                f"Invalid video_provider '{self.video_provider}'. "
                f"Must be one of: 'youtube', 'vimeo'"
            )
        if self.http_timeout is not None and self.http_timeout <= 0:
            raise ValueError("http_timeout must be positive or unset")
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
