"""Result/Either monad for type-safe error handling.

Implements a discriminated union for success/failure with full monadic operations:
- Functor: map, map_error
- Applicative: apply
- Monad: flat_map (bind)
- Bifunctor: bimap
- Recovery: recover, recover_with
- Conversions to and from Option
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    TypeVar,
    cast,
)

from fallible.foundation.errors import UnwrapError

from .option import Option, from_value, none_value, some_of

if TYPE_CHECKING:
    from collections.abc import Iterator

# Type variables for generic Result
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Every transformation returns a Result. When an operation does not apply
    to the variant it is called on, the receiver itself is returned.

    Examples:
        >>> result: Result[int, str] = Ok(42)
        >>> result.map(lambda x: x * 2).get_or_raise()
        84

        >>> error: Result[int, str] = Err("failed")
        >>> error.map(lambda x: x * 2).get_error_or_none()
        'failed'

        Railway-oriented programming:
        >>> def validate_positive(x: int) -> Result[int, str]:
        ...     return Ok(x) if x > 0 else Err("must be positive")
        >>>
        >>> result = (
        ...     Ok(5)
        ...     .flat_map(validate_positive)
        ...     .map(lambda x: x * 2)
        ... )
        >>> assert result.get_or_raise() == 10

    Notes:
        - Uses __slots__ and refuses attribute assignment after construction
        - Pattern matching via is_ok()/is_err(), fold() or match()
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Result is immutable")

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def ok(value: U) -> Result[U, Any]:
        """Create a successful Result."""
        return Result(value, True)

    @staticmethod
    def err(error: F) -> Result[Any, F]:
        """Create a failed Result."""
        return Result(error, False)

    @staticmethod
    def from_option(option: Option[U], error_value: F = "Option was None") -> Result[U, F]:  # type: ignore[assignment]
        """Ok with the Option's value, or Err(error_value) if it is empty."""
        return Result(option.get(), True) if option.is_defined() else Result(error_value, False)

    @staticmethod
    def from_nullable(value: U | None, error_value: F = "Value is null") -> Result[U, F]:  # type: ignore[assignment]
        """Ok(value) unless value is None, in which case Err(error_value)."""
        return Result.from_option(from_value(value), error_value)

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def get_or_none(self) -> T | None:
        """Ok value, or None on Err."""
        return cast(T, self._value) if self._is_ok else None

    def get_error_or_none(self) -> E | None:
        """Err value, or None on Ok."""
        return cast(E, self._value) if not self._is_ok else None

    def get_or_else(self, default: U) -> T | U:
        """Ok value, or default on Err."""
        return cast(T, self._value) if self._is_ok else default

    def get_or_else_get(self, supplier: Callable[[], U]) -> T | U:
        """Ok value, or supplier() on Err. supplier is not called for Ok."""
        return cast(T, self._value) if self._is_ok else supplier()

    def get_or_raise(self) -> T:
        """Extract Ok value, raise on Err.

        An exception stored in the Err is re-raised as-is, keeping its type
        and traceback. Any other payload is wrapped.

        Raises:
            BaseException: The stored exception, if the payload is one
            UnwrapError: ``"Result contains error: <payload>"`` otherwise
        """
        if self._is_ok:
            return cast(T, self._value)
        if isinstance(self._value, BaseException):
            raise self._value
        raise UnwrapError(f"Result contains error: {self._value}", self._value)

    def unwrap(self) -> T:
        """Extract Ok value, panic on Err.

        Raises:
            UnwrapError: If Result is Err
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(f"Called unwrap() on Err value: {self._value}", self._value)

    def unwrap_err(self) -> E:
        """Extract Err value, panic on Ok.

        Raises:
            UnwrapError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError(f"Called unwrap_err() on Ok value: {self._value}", self._value)

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute from error."""
        return cast(T, self._value) if self._is_ok else f(cast(E, self._value))

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom panic message.

        Raises:
            UnwrapError: If Result is Err with custom message
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(f"{msg}: {self._value}", self._value)

    def expect_err(self, msg: str) -> E:
        """Extract Err value with custom panic message.

        Raises:
            UnwrapError: If Result is Ok with custom message
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError(f"{msg}: {self._value}", self._value)

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map function over Ok value (Functor).

        Applies f only if Ok; an Err is returned unchanged.

        Type signature: Result[T, E] -> (T -> U) -> Result[U, E]
        """
        if self._is_ok:
            return Result(f(cast(T, self._value)), True)
        return cast(Result[U, E], self)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map function over Err value (Error Functor).

        Useful for transforming error types while preserving Ok values.

        Type signature: Result[T, E] -> (E -> F) -> Result[T, F]
        """
        if not self._is_ok:
            return Result(f(cast(E, self._value)), False)
        return cast(Result[T, F], self)

    map_err = map_error

    def filter(self, predicate: Callable[[T], bool], error_value: Any = "Filter predicate failed") -> Result[T, Any]:
        """Turn an Ok whose value fails predicate into Err(error_value).

        Ok values that satisfy predicate, and every Err, are returned unchanged.
        """
        if self._is_ok and not predicate(cast(T, self._value)):
            return Result(error_value, False)
        return self

    # ─────────────────────────────────────────────────────────────────
    # Bifunctor Operations
    # ─────────────────────────────────────────────────────────────────

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Map both Ok and Err values (Bifunctor).

        Type signature: Result[T, E] -> (T -> U, E -> F) -> Result[U, F]
        """
        if self._is_ok:
            return Result(ok_fn(cast(T, self._value)), True)
        return Result(err_fn(cast(E, self._value)), False)

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=) - chain operations that can fail.

        f is never called for an Err, which is returned unchanged.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     try:
            ...         return Ok(int(s))
            ...     except ValueError:
            ...         return Err(f"invalid int: {s}")
            >>>
            >>> Ok("42").flat_map(parse_int).get_or_raise()
            42
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast(Result[U, E], self)

    and_then = flat_map

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Flatten nested Result (join in monad terms).

        Result[Result[T, E], E] -> Result[T, E]
        """
        if self._is_ok:
            return cast(Result[T, E], self._value)
        return cast(Result[T, E], self)

    # ─────────────────────────────────────────────────────────────────
    # Applicative Operations
    # ─────────────────────────────────────────────────────────────────

    def apply(self, f_result: Result[Callable[[T], U], E]) -> Result[U, E]:
        """Apply wrapped function to wrapped value (Applicative).

        The function's Err wins over the value's Err.

        Type signature: Result[T, E] -> Result[T -> U, E] -> Result[U, E]
        """
        if not f_result._is_ok:
            return cast(Result[U, E], f_result)
        if not self._is_ok:
            return cast(Result[U, E], self)
        return Result(cast(Callable[[T], U], f_result._value)(cast(T, self._value)), True)

    # ─────────────────────────────────────────────────────────────────
    # Recovery
    # ─────────────────────────────────────────────────────────────────

    def recover(self, f: Callable[[E], T]) -> Result[T, E]:
        """Turn Err(e) into Ok(f(e)). Ok passes through."""
        if not self._is_ok:
            return Result(f(cast(E, self._value)), True)
        return self

    def recover_with(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Chain alternative on Err.

        If Err, f's Result replaces it. If Ok, passes through.

        Type signature: Result[T, E] -> (E -> Result[T, F]) -> Result[T, F]
        """
        if not self._is_ok:
            return f(cast(E, self._value))
        return cast(Result[T, F], self)

    or_else = recover_with

    # ─────────────────────────────────────────────────────────────────
    # Logical Combinators
    # ─────────────────────────────────────────────────────────────────

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return other if self is Ok, otherwise self's Err."""
        return other if self._is_ok else cast(Result[U, E], self)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return self if Ok, otherwise other."""
        return cast(Result[T, F], self) if self._is_ok else other

    # ─────────────────────────────────────────────────────────────────
    # Side Effects
    # ─────────────────────────────────────────────────────────────────

    def on_success(self, callback: Callable[[T], object]) -> Result[T, E]:
        """Call callback with Ok value for side effects, return self."""
        if self._is_ok:
            callback(cast(T, self._value))
        return self

    def on_failure(self, callback: Callable[[E], object]) -> Result[T, E]:
        """Call callback with Err value for side effects, return self."""
        if not self._is_ok:
            callback(cast(E, self._value))
        return self

    inspect = on_success
    inspect_err = on_failure

    # ─────────────────────────────────────────────────────────────────
    # Folding & Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def fold(self, on_error: Callable[[E], U], on_success: Callable[[T], U]) -> U:
        """Collapse into a single value. Exactly one branch runs."""
        if self._is_ok:
            return on_success(cast(T, self._value))
        return on_error(cast(E, self._value))

    def match(
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[E], U],
    ) -> U:
        """Keyword form of fold().

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        return self.fold(err, ok)

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_option(self) -> Option[T]:
        """Some(value) if Ok, Nothing if Err."""
        return some_of(cast(T, self._value)) if self._is_ok else none_value()

    def to_error_option(self) -> Option[E]:
        """Some(error) if Err, Nothing if Ok."""
        return some_of(cast(E, self._value)) if not self._is_ok else none_value()

    def map_to_option(self, f: Callable[[T], U]) -> Option[U]:
        return self.to_option().map(f)

    def flat_map_to_option(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return self.to_option().flat_map(f)

    def filter_to_option(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self.to_option().filter(predicate)

    def map_error_to_option(self, f: Callable[[E], F]) -> Option[F]:
        """Some(f(error)) if Err, Nothing if Ok."""
        return self.to_error_option().map(f)

    def recover_to_option(self, f: Callable[[E], T]) -> Option[T]:
        """Some(f(error)) if Err, Nothing if Ok.

        Unlike recover(), an Ok is not carried over: only the recovered value
        is present.
        """
        return self.to_error_option().map(f)

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (ok_value, err_value) tuple."""
        if self._is_ok:
            return (cast(T, self._value), None)
        return (None, cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Enable truthiness checking (True if Ok)."""
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Iterate over Ok value (yields 0 or 1 element)."""
        if self._is_ok:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, Any]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, True)


def Err(error: E) -> Result[Any, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, False)
