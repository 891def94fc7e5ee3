"""
Sugoroku - Application Settings

Loads configuration from environment variables (prefix ``SUGOROKU_``) and
an optional ``.env`` file using Pydantic Settings.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from sugoroku.engine.locale import DEFAULT_LOCALE, Locale


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    locale: Locale = DEFAULT_LOCALE
    min_dice: int = 1

    # Default files for the Streamlit app
    player_list_file: Path | None = None
    world_file: Path | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "SUGOROKU_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("min_dice")
    @classmethod
    def _check_min_dice(cls, value: int) -> int:
        if value not in (0, 1):
            raise ValueError("min_dice must be 0 or 1")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
