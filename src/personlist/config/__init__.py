"""Configuration module using Pydantic Settings.

Usage:
    from personlist.config import ConsoleSettings

    settings = ConsoleSettings(pause=False)
"""

from personlist.config.settings import LOG_LEVELS, ConsoleSettings

__all__ = [
    "ConsoleSettings",
    "LOG_LEVELS",
]
