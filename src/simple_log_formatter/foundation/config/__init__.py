"""Configuration management using pydantic-settings."""

from .settings import LevelName, LogFormatSettings, clear_settings_cache, get_settings

__all__ = [
    "LevelName",
    "LogFormatSettings",
    "clear_settings_cache",
    "get_settings",
]
