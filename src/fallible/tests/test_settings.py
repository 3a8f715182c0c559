"""Tests for environment-driven settings."""

import logging

import pytest

from fallible import RetryPolicy, configure_logging, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FALLIBLE_RETRY_MAX_ATTEMPTS", "FALLIBLE_RETRY_DELAY_MS", "FALLIBLE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.retry.max_attempts == 3
    assert settings.retry.delay_ms == 0
    assert settings.logging.level == "WARNING"


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_RETRY_DELAY_MS", "150")
    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.retry.delay_ms == 150
    assert settings.logging.level == "DEBUG"


def test_policy_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_RETRY_MAX_ATTEMPTS", "7")
    monkeypatch.setenv("FALLIBLE_RETRY_DELAY_MS", "20")

    policy = RetryPolicy.from_settings(delay_ms=None)
    assert (policy.max_attempts, policy.delay_ms) == (7, 20)

    policy = RetryPolicy.from_settings(max_attempts=2)
    assert policy.max_attempts == 2


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "ERROR")
    logger = logging.getLogger("fallible")
    previous = logger.level
    try:
        assert configure_logging().level == logging.ERROR
        assert configure_logging("DEBUG").level == logging.DEBUG
    finally:
        logger.setLevel(previous)
