"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GALLERY_PICTURES_DIRECTORY = "gallery_pictures"

DAILYFRATZE_IMAGE_URL_FORMAT = "https://dailyfratze.de/api/images/{size}/{id}.jpg"
DAILYFRATZE_RSS_URL = "https://dailyfratze.de/michael/tags/Theme/Radtour?format=rss&dir=d"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # App Info
    app_name: str = "biking2"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    workers: int = 1

    # Datastore
    datastore_base_directory: str = Field(
        default="./var/biking2",
        alias="BIKING2_DATASTORE_BASE_DIRECTORY",
    )
    db_file: str = "biking2.db"

    @property
    def database_url(self) -> str:
        """SQLite database URL."""
        db_path = Path(self.datastore_base_directory) / self.db_file
        return f"sqlite+aiosqlite:///{db_path}"

    @property
    def gallery_pictures_directory(self) -> Path:
        """Directory holding the uploaded gallery pictures."""
        return Path(self.datastore_base_directory) / GALLERY_PICTURES_DIRECTORY

    # DailyFratze (remote photo blog)
    dailyfratze_access_token: str | None = Field(
        default=None,
        alias="BIKING2_DAILYFRATZE_ACCESS_TOKEN",
    )
    dailyfratze_image_url_format: str = Field(
        default=DAILYFRATZE_IMAGE_URL_FORMAT,
        alias="BIKING2_DAILYFRATZE_IMAGE_URL_FORMAT",
    )
    dailyfratze_rss_url: str = Field(
        default=DAILYFRATZE_RSS_URL,
        alias="BIKING2_DAILYFRATZE_RSS_URL",
    )
    dailyfratze_timeout: float = 30.0

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    @field_validator("dailyfratze_access_token", mode="before")
    @classmethod
    def blank_token_is_none(cls, v: str | None) -> str | None:
        """Treat a blank access token like a missing one."""
        if v is None or not str(v).strip():
            return None
        return v

    @property
    def dailyfratze_enabled(self) -> bool:
        """Whether the DailyFratze integration is configured."""
        return self.dailyfratze_access_token is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
