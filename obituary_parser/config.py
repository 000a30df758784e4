"""Configuration management for the obituary parser.

Loads settings from environment variables and provides validated configuration.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists
load_dotenv()

# Bounds on the obituary text accepted by the extractor
MIN_TEXT_LENGTH = 1
MAX_TEXT_LENGTH = 5000


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OBITUARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Geocoding is a network call, so it stays off unless asked for
    geocode_enabled: bool = False
    geocoder_user_agent: str = "obituary-parser"
    geocode_timeout: float = 10.0

    # Persistent geocode cache; in-memory only when unset
    geocode_cache_db: Path | None = None


# Global settings instance
settings = Settings()
