"""
Runtime settings, read from environment variables.

    NUMBER_TRANSLATOR_STRICT_CHARACTERS   boolean (default: true)
    NUMBER_TRANSLATOR_LOG_LEVEL           logging level name (default: WARNING)

Entry points call load_dotenv() first, so a .env file works too.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Translator configuration with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="NUMBER_TRANSLATOR_")

    strict_characters: bool = True  # Reject (True) or drop (False) non-letters
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level
