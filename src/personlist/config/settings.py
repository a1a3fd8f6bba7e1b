"""Configuration settings using Pydantic Settings.

Usage:
    from personlist.config import ConsoleSettings

    # Load from environment variables (PERSONLIST_*) or .env
    settings = ConsoleSettings()

    # Or override with explicit values
    settings = ConsoleSettings(pause=False, seed=7)
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConsoleSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the console demo.

    Attributes:
        pause: Wait for ENTER between demo steps.
        seed: Seed for the random person generator (None for nondeterministic).
        log_level: Root logger level name, one of LOG_LEVELS (case-insensitive).

    Environment Variables:
        PERSONLIST_PAUSE
        PERSONLIST_SEED
        PERSONLIST_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="PERSONLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    pause: bool = True
    seed: int | None = None
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            choices = ", ".join(LOG_LEVELS)
            raise ValueError(f"log_level must be one of {choices}, got {value!r}")
        return level
