"""Retry policy driving retry().

A frozen pydantic model holding how many attempts to make and how long to
wait between them. Unset fields fall back to FallibleSettings.
"""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from fallible.foundation.config import get_settings

from .backoff import Backoff, ConstantBackoff


class RetryPolicy(BaseModel):
    """How retry() re-attempts a failing callable.

    Attributes:
        max_attempts: Total attempts, including the first (<= 0 means none)
        delay_ms: Fixed delay between attempts in milliseconds (<= 0 means no wait)
        backoff: Strategy computing the delay; overrides delay_ms when set
        on_retry: Called as on_retry(attempt, error, delay_seconds) before each re-attempt

    Example:
        >>> policy = RetryPolicy(max_attempts=5, backoff=ExponentialBackoff(initial_ms=100))
        >>> policy.delay_for(2)
        0.4
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # For Backoff protocol
        validate_default=True,
        extra="forbid",
    )

    max_attempts: int = 3
    delay_ms: int = 0
    backoff: Backoff | None = Field(default=None, repr=False)
    on_retry: Callable[[int, Any, float], None] | None = Field(default=None, exclude=True, repr=False)

    @classmethod
    def from_settings(cls, **overrides: Any) -> RetryPolicy:
        """Build a policy from FALLIBLE_RETRY_* settings; None overrides are ignored."""
        defaults = get_settings().retry
        fields = {"max_attempts": defaults.max_attempts, "delay_ms": defaults.delay_ms}
        fields.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**fields)

    @property
    def strategy(self) -> Backoff:
        """The backoff in effect: the explicit one, or delay_ms as a ConstantBackoff."""
        return self.backoff if self.backoff is not None else ConstantBackoff(self.delay_ms)

    def delay_for(self, failed: int) -> float:
        """Seconds to wait after the 0-indexed failed attempt."""
        return self.strategy.seconds_after(failed)

    def should_retry(self, attempt: int) -> bool:
        """Whether another attempt follows the given 1-indexed attempt."""
        return attempt < self.max_attempts
