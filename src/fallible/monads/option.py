"""Option/Maybe type: the presence container shared by Result.

A value is either present (Some) or absent (Nothing). Result converts to and
from Option, and the collection helpers use it for every presence check so
both algebras stay consistent.

Examples:
    >>> some_of(2).map(lambda x: x + 1).get_or_else(0)
    3
    >>> none_value().map(lambda x: x + 1).get_or_else(0)
    0
    >>> from_value(None).is_empty()
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Single-value container that is either Some(value) or Nothing.

    Immutable: every operation returns an Option, never mutates one.
    """

    __slots__ = ("_value", "_defined")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, defined: bool) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_defined", defined)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─── Type Checking ───────────────────────────────────────────────

    def is_defined(self) -> bool:
        """Check if a value is present."""
        return self._defined

    def is_empty(self) -> bool:
        """Check if no value is present."""
        return not self._defined

    # ─── Value Extraction ──────────────────────────────────────────────

    def get(self) -> T:
        """Extract the value. Raises ValueError on Nothing."""
        if self._defined:
            return self._value  # type: ignore[return-value]
        raise ValueError("get() on Nothing")

    def get_or_else(self, default: U) -> T | U:
        """Extract the value or return default."""
        return self._value if self._defined else default  # type: ignore[return-value]

    # ─── Functor / Monad ───────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to the value. Nothing passes through."""
        return Option(f(self._value), True) if self._defined else self  # type: ignore[arg-type,return-value]

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function. Nothing passes through."""
        return f(self._value) if self._defined else self  # type: ignore[arg-type,return-value]

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate holds."""
        return self if self._defined and predicate(self._value) else Nothing  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._defined

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._defined else "Nothing"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._defined == other._defined and (not self._defined or self._value == other._value)

    def __hash__(self) -> int:
        return hash((self._defined, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yields the value if Some, nothing otherwise."""
        if self._defined:
            yield self._value  # type: ignore[misc]


Nothing: Option[Any] = Option(None, False)


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option."""
    return Option(value, True)


some_of = Some


def none_value() -> Option[Any]:
    """Factory for the empty Option."""
    return Nothing


def from_value(value: T | None, none_marker: object = None) -> Option[T]:
    """Some(value) unless value equals none_marker (None by default)."""
    absent = value is None if none_marker is None else value == none_marker
    return Nothing if absent else Option(value, True)
