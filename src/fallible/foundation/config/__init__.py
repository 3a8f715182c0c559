"""Configuration for fallible via pydantic-settings."""

from .settings import (
    FallibleSettings,
    LoggingSettings,
    RetrySettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

__all__ = [
    "FallibleSettings",
    "LoggingSettings",
    "RetrySettings",
    "get_settings",
    "clear_settings_cache",
    "configure_logging",
]
