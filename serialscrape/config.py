"""Runtime settings for serialscrape using Pydantic Settings.

Environment variables:
    SERIALSCRAPE_LOG_LEVEL: Level applied to the ``serialscrape`` logger
    SERIALSCRAPE_TRACE: Emit debug records for scope entry and window building
    SERIALSCRAPE_STRICT_REPETITION: Raise when ``many`` stops making progress
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class SerialSettings(BaseSettings):
    """Settings shared by every traversal in the process.

    Example:
        >>> import os
        >>> os.environ['SERIALSCRAPE_TRACE'] = '1'
        >>> SerialSettings().trace
        True
    """

    model_config = SettingsConfigDict(
        env_prefix='SERIALSCRAPE_',
        case_sensitive=False,
        extra='ignore',
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the serialscrape logger"
    )

    trace: bool = Field(
        default=False,
        description="Log scope entry and window construction at DEBUG"
    )

    strict_repetition: bool = Field(
        default=False,
        description="Raise instead of stopping when many() does not advance"
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _VALID_LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return level


_SETTINGS: Optional[SerialSettings] = None


def get_settings() -> SerialSettings:
    """Return the process-wide settings, loading them on first use."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = SerialSettings()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings so the next lookup re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None


__all__ = ["SerialSettings", "get_settings", "reset_settings"]
