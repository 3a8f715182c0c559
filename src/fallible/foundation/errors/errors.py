"""Exception types raised by fallible itself.

Combinators never raise on their own: errors travel as Err payloads until an
explicit extraction (get_or_raise, unwrap, expect) forces them out.
"""

from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """Root of the fallible exception hierarchy."""


class UnwrapError(FallibleError, RuntimeError):
    """Raised when a value is extracted from the wrong Result variant.

    Carries the offending payload so handlers can inspect it without parsing
    the message.

    Attributes:
        error: The payload that could not be unwrapped
    """

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


class NoAttemptsError(FallibleError, ValueError):
    """Err payload returned by retry() when it was asked to make no attempts."""

    def __init__(self, max_attempts: int) -> None:
        super().__init__(f"retry() made no attempts (max_attempts={max_attempts})")
        self.max_attempts = max_attempts
