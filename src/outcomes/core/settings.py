"""Environment-driven settings for hosts that embed outcomes.

The containers have no configuration of their own; these settings only
control how :mod:`outcomes.core.logging` is wired up.

Examples:
    >>> import os
    >>> os.environ["OUTCOMES_LOG_LEVEL"] = "DEBUG"
    >>> get_settings.cache_clear()
    >>> get_settings().log_level
    'DEBUG'
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from outcomes.core.logging import configure_logging

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class OutcomesSettings(BaseSettings):
    """Logging settings read from ``OUTCOMES_*`` variables and ``.env``.

    Fields
    ──────
    log_level    : Level applied to the ``outcomes`` logger
    log_json     : JSON output (True), console (False), auto-detect (None)
    service_name : Value of ``service.name`` in every record
    """

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_json: bool | None = None
    service_name: str = Field(default="outcomes", min_length=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LEVELS)}, got {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> OutcomesSettings:
    return OutcomesSettings()


def configure_logging_from_settings(settings: OutcomesSettings | None = None) -> OutcomesSettings:
    """Apply ``settings`` (or the cached environment settings) to logging."""
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service=settings.service_name,
    )
    return settings


__all__ = [
    "OutcomesSettings",
    "get_settings",
    "configure_logging_from_settings",
]
