"""Boundary adapters: build Results from exceptions, None, Options and booleans.

run_catching() and retry() are the only places where raised exceptions are
turned into Err values. Everything past this boundary treats errors as data.
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar

from fallible.foundation.errors import NoAttemptsError
from fallible.retry import Backoff, RetryPolicy

from .result import Result

if TYPE_CHECKING:
    from .option import Option

P = ParamSpec("P")
T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger("fallible.retry")


# ═════════════════════════════════════════════════════════════════════════════
# Exception Capture
# ═════════════════════════════════════════════════════════════════════════════


def run_catching(fn: Callable[[], T]) -> Result[T, Exception]:
    """Call fn, returning Ok(return value) or Err(the raised exception).

    The exception object itself becomes the payload. KeyboardInterrupt and
    SystemExit are not captured.

    Example:
        >>> run_catching(lambda: 1 // 0).get_error_or_none().__class__.__name__
        'ZeroDivisionError'
    """
    try:
        return Result(fn(), True)
    except Exception as e:
        return Result(e, False)


def run_catching_with(fn: Callable[[T], U], argument: T) -> Result[U, Exception]:
    """Like run_catching(), passing argument to fn."""
    try:
        return Result(fn(argument), True)
    except Exception as e:
        return Result(e, False)


def catching(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Decorator making fn return Ok/Err instead of raising.

    Example:
        >>> @catching
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("42")
        Ok(42)
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return run_catching(lambda: fn(*args, **kwargs))

    return wrapper


# ═════════════════════════════════════════════════════════════════════════════
# Retry
# ═════════════════════════════════════════════════════════════════════════════


def retry(
    fn: Callable[[], T],
    max_attempts: int | None = None,
    delay_ms: int | None = None,
    *,
    backoff: Backoff | None = None,
    sleep: Callable[[float], object] | None = None,
    on_retry: Callable[[int, Any, float], None] | None = None,
    policy: RetryPolicy | None = None,
) -> Result[T, Exception]:
    """Call fn up to max_attempts times, returning its first success.

    Every Exception counts as retryable. Between attempts the call blocks
    for the policy's delay (skipped when it is zero); there is no delay
    after the last attempt.

    Args:
        fn: Zero-argument callable to attempt
        max_attempts: Total attempts; defaults to FALLIBLE_RETRY_MAX_ATTEMPTS (3)
        delay_ms: Fixed delay between attempts; defaults to FALLIBLE_RETRY_DELAY_MS (0)
        backoff: Delay strategy used instead of delay_ms
        sleep: Blocking delay function taking seconds (default: time.sleep)
        on_retry: Called as on_retry(attempt, error, delay_seconds) before each re-attempt
        policy: Base RetryPolicy; explicit max_attempts, delay_ms, backoff and
            on_retry arguments override its fields

    Returns:
        Ok of the first successful return value, Err of the last exception,
        or Err(NoAttemptsError) when max_attempts <= 0 (fn is never called)

    Example:
        >>> calls = iter([ValueError("a"), ValueError("b"), "done"])
        >>> def flaky() -> str:
        ...     item = next(calls)
        ...     if isinstance(item, Exception):
        ...         raise item
        ...     return item
        >>> retry(flaky, max_attempts=5)
        Ok('done')
    """
    overrides = {"max_attempts": max_attempts, "delay_ms": delay_ms, "backoff": backoff, "on_retry": on_retry}
    if policy is None:
        policy = RetryPolicy.from_settings(**overrides)
    else:
        policy = policy.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    if policy.max_attempts <= 0:
        logger.warning(f"retry() called with max_attempts={policy.max_attempts}, no attempt made")
        return Result(NoAttemptsError(policy.max_attempts), False)

    sleep = sleep or time.sleep
    last: Result[T, Exception] | None = None
    for attempt in range(1, policy.max_attempts + 1):
        last = run_catching(fn)
        if last.is_ok():
            return last

        error = last.get_error_or_none()
        if not policy.should_retry(attempt):
            break

        delay = policy.delay_for(attempt - 1)
        logger.info(
            f"Attempt {attempt}/{policy.max_attempts} failed ({type(error).__name__}): {error}. "
            f"Retrying in {delay:.3f}s"
        )
        if policy.on_retry is not None:
            policy.on_retry(attempt, error, delay)
        if delay > 0:
            sleep(delay)

    logger.warning(f"All {policy.max_attempts} attempts failed, last error: {error!r}")
    return last  # type: ignore[return-value]


# ═════════════════════════════════════════════════════════════════════════════
# Conversions
# ═════════════════════════════════════════════════════════════════════════════


def from_nullable(value: T | None, error_value: Any = "Value is null") -> Result[T, Any]:
    """Ok(value) unless value is None."""
    return Result.from_nullable(value, error_value)


def from_option(option: Option[T], error_value: Any = "Option was None") -> Result[T, Any]:
    """Ok with the Option's value, or Err(error_value) when it is empty."""
    return Result.from_option(option, error_value)


def from_boolean(condition: bool, success_value: Any = True, error_value: Any = "Condition failed") -> Result[Any, Any]:
    """Ok(success_value) if condition holds, else Err(error_value)."""
    return Result(success_value, True) if condition else Result(error_value, False)
