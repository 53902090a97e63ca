"""Environment-based configuration using pydantic-settings.

Selects the renderer and the threshold level at runtime, in place of
compile-time feature flags.

Example:
    >>> from simple_log_formatter.foundation.config import get_settings
    >>> get_settings().format
    'simple'

    # Or with environment variables:
    # SIMPLE_LOG_FORMAT=json
    # SIMPLE_LOG_LEVEL=debug
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["TRACE", "DEBUG", "INFO", "WARN", "ERROR"]

# stdlib spellings accepted on input
_LEVEL_ALIASES: dict[str, str] = {"WARNING": "WARN", "CRITICAL": "ERROR", "FATAL": "ERROR"}


class LogFormatSettings(BaseSettings):
    """Renderer selection and level threshold.

    Example environment variables:
        SIMPLE_LOG_FORMAT=json
        SIMPLE_LOG_LEVEL=WARNING
    """

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    format: str = Field(default="simple", description="Renderer name: 'simple', 'json' or a registered one")
    level: LevelName = Field(default="INFO", description="Minimum level handed to the renderer")

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        if not isinstance(v, str):
            return v
        name = v.strip().upper()
        return _LEVEL_ALIASES.get(name, name)


@lru_cache(maxsize=1)
def get_settings() -> LogFormatSettings:
    """Process-wide settings instance (cached)."""
    return LogFormatSettings()


def clear_settings_cache() -> None:
    """Forget cached settings so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
