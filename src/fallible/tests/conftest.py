"""Shared fixtures for the fallible test suite."""

import pytest

from fallible import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reset cached settings around each test so env changes take effect."""
    clear_settings_cache()
    yield
    clear_settings_cache()


class Flaky:
    """Callable that raises for its first ``failures`` calls, then returns ``value``."""

    def __init__(self, failures: int, value: object = "done", exc_type: type[Exception] = ValueError) -> None:
        self.failures = failures
        self.value = value
        self.exc_type = exc_type
        self.calls = 0
        self.raised: list[Exception] = []

    def __call__(self) -> object:
        self.calls += 1
        if self.calls <= self.failures:
            exc = self.exc_type(f"failure {self.calls}")
            self.raised.append(exc)
            raise exc
        return self.value


@pytest.fixture
def flaky() -> type[Flaky]:
    """Factory for Flaky callables."""
    return Flaky
