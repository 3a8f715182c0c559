"""Delay strategies for retry().

Strategies are configured in milliseconds, the same unit as retry()'s
``delay_ms``, and answer in seconds, the unit sleep() takes. retry() asks for
a delay only between attempts, passing the 0-indexed number of the attempt
that just failed: 0 after the first call, 1 after the second, and so on.
Negative configured values never produce a negative delay.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Backoff(Protocol):
    """Anything that can say how long to wait after a failed attempt."""

    def seconds_after(self, failed: int) -> float:
        """Seconds to wait after the 0-indexed attempt ``failed``."""
        ...


def _seconds(ms: float) -> float:
    return max(ms, 0) / 1000


@dataclass(frozen=True, slots=True)
class ConstantBackoff:
    """The same wait after every failure. This is what a plain ``delay_ms`` becomes."""

    delay_ms: float = 0

    def seconds_after(self, failed: int) -> float:
        return _seconds(self.delay_ms)


@dataclass(frozen=True, slots=True)
class LinearBackoff:
    """Waits ``initial_ms``, then grows by ``step_ms`` per further failure, up to ``cap_ms``."""

    initial_ms: float = 100
    step_ms: float = 100
    cap_ms: float = 30_000

    def seconds_after(self, failed: int) -> float:
        return _seconds(min(self.initial_ms + self.step_ms * failed, self.cap_ms))


@dataclass(frozen=True, slots=True)
class ExponentialBackoff:
    """Waits ``initial_ms * factor**failed``, capped at ``cap_ms``.

    With ``jitter`` the capped wait is scaled by a random 0.5-1.5x, so many
    callers retrying the same resource spread out.
    """

    initial_ms: float = 100
    factor: float = 2.0
    cap_ms: float = 30_000
    jitter: bool = False

    def seconds_after(self, failed: int) -> float:
        wait = _seconds(min(self.initial_ms * self.factor ** failed, self.cap_ms))
        return wait * random.uniform(0.5, 1.5) if self.jitter else wait
