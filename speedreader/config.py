"""Application configuration settings."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPEEDREADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "SpeedReader"

    # Reading rate
    default_wpm: int = 300
    display_default_wpm: int = 300
    min_wpm: int = 100
    max_wpm: int = 1000
    absolute_min_wpm: float = 1.0
    strict_rate_validation: bool = False

    # Settings collaborator storage
    settings_path: Path = Path.home() / ".config" / "speedreader" / "settings.json"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
