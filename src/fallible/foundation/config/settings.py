"""Environment-based configuration using pydantic-settings.

Provides the defaults that retry() and the package logger fall back to when
callers leave them unspecified.

Example:
    >>> from fallible.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.max_attempts
    3

    # Or with environment variables:
    # FALLIBLE_RETRY_MAX_ATTEMPTS=5
    # FALLIBLE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, NonNegativeInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrySettings(BaseSettings):
    """Default retry configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_RETRY_",
        extra="ignore",
    )

    max_attempts: int = Field(default=3, description="Attempts made by retry() when none are given")
    delay_ms: NonNegativeInt = Field(default=0, description="Delay between attempts in milliseconds")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class FallibleSettings(BaseSettings):
    """Root settings for fallible.

    Loads configuration from environment variables with FALLIBLE_ prefix.

    Example environment variables:
        FALLIBLE_RETRY_MAX_ATTEMPTS=5
        FALLIBLE_RETRY_DELAY_MS=250
        FALLIBLE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Get the global settings instance (cached)."""
    return FallibleSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply a level to the ``fallible`` logger hierarchy.

    Args:
        level: Explicit level; defaults to ``settings.logging.level``

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("fallible")
    logger.setLevel(level if level is not None else get_settings().logging.level)
    return logger
