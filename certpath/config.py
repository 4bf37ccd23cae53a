"""Configuration settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "certs.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CERTPATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Catalog
    data_path: Optional[Path] = Field(
        default=None,
        description="JSON certification catalog; the bundled dataset when unset",
    )

    # HTTP
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Application
    debug: bool = False
    log_level: str = "INFO"

    @property
    def catalog_path(self) -> Path:
        """Resolved path of the catalog file."""
        return self.data_path or DEFAULT_DATA_PATH


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
