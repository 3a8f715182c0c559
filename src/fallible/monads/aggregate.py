"""Operations over many Results at once.

Fail-fast helpers (combine, fold, sequence, traverse, map2/map3) return the
first Err they meet as the very same instance, so the original error value
and type survive untouched. Presence checks go through Option via
``to_option()`` rather than peeking at variant flags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar, cast

from .result import Result

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
V = TypeVar("V")
W = TypeVar("W")

__all__ = [
    "combine",
    "zip",
    "map2",
    "map3",
    "fold",
    "sequence",
    "traverse",
    "first_ok",
    "all_ok",
    "any_ok",
    "partition",
    "collect_results",
    "lift",
    "lift2",
]


# ═════════════════════════════════════════════════════════════════════════════
# Fail-Fast Combination
# ═════════════════════════════════════════════════════════════════════════════


def fold(results: Iterable[Result[T, E]], initial: U, f: Callable[[U, T], U]) -> Result[U, E]:
    """Left fold over Ok values, aborting on the first Err.

    Type signature: [Result[T, E]] -> U -> (U -> T -> U) -> Result[U, E]

    Example:
        >>> fold([Ok(1), Ok(2), Ok(3)], 0, lambda acc, x: acc + x)
        Ok(6)
        >>> fold([Ok(1), Err("e"), Ok(3)], 0, lambda acc, x: acc + x)
        Err('e')
    """
    acc = initial
    for result in results:
        option = result.to_option()
        if option.is_empty():
            return cast(Result[U, E], result)
        acc = f(acc, option.get())
    return Result(acc, True)


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert list of Results to Result of list.

    Fails fast on first Err, returns Ok with all values if all succeed.

    Type signature: [Result[T, E]] -> Result[[T], E]

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> sequence([Ok(1), Err("fail"), Ok(3)])
        Err('fail')
    """
    values: list[T] = []

    def append(acc: list[T], value: T) -> list[T]:
        acc.append(value)
        return acc

    return fold(results, values, append)


def combine(*results: Result[Any, E]) -> Result[list[Any], E]:
    """Variadic sequence(): Ok of all values in argument order, or the first Err."""
    return sequence(results)


def zip(*results: Result[Any, E]) -> Result[list[Any], E]:  # noqa: A001
    """Alias of combine()."""
    return sequence(results)


def traverse(
    items: Iterable[T],
    f: Callable[[T], Result[U, E]],
) -> Result[list[U], E]:
    """Map function returning Result over items, collect into Result of list.

    Every item is mapped before the results are sequenced, so f runs for all
    items even when an early one fails.

    Type signature: [T] -> (T -> Result[U, E]) -> Result[[U], E]

    Example:
        >>> def parse_int(s: str) -> Result[int, str]:
        ...     try:
        ...         return Ok(int(s))
        ...     except ValueError:
        ...         return Err(f"invalid: {s}")
        >>>
        >>> traverse(["1", "2", "3"], parse_int)
        Ok([1, 2, 3])
        >>> traverse(["1", "bad", "3"], parse_int)
        Err('invalid: bad')
    """
    return sequence([f(item) for item in items])


def map2(f: Callable[[T, U], V], r1: Result[T, E], r2: Result[U, E]) -> Result[V, E]:
    """Apply f to two Ok values. r1's Err is checked before r2's."""
    o1, o2 = r1.to_option(), r2.to_option()
    if o1.is_empty():
        return cast(Result[V, E], r1)
    if o2.is_empty():
        return cast(Result[V, E], r2)
    return Result(f(o1.get(), o2.get()), True)


def map3(
    f: Callable[[T, U, V], W],
    r1: Result[T, E],
    r2: Result[U, E],
    r3: Result[V, E],
) -> Result[W, E]:
    """Apply f to three Ok values, or return the first Err in parameter order."""
    return combine(r1, r2, r3).map(lambda values: f(values[0], values[1], values[2]))


# ═════════════════════════════════════════════════════════════════════════════
# Selection & Inspection
# ═════════════════════════════════════════════════════════════════════════════


def first_ok(results: Iterable[Result[T, E]], default_error: Any = "All results failed") -> Result[T, Any]:
    """Return the first Ok, or Err(default_error) when there is none."""
    for result in results:
        if result.to_option().is_defined():
            return result
    return Result(default_error, False)


def all_ok(results: Iterable[Result[T, E]], predicate: Callable[[T], bool] | None = None) -> bool:
    """True if every Result is Ok (and its value satisfies predicate, if given).

    An empty input is vacuously True.
    """
    for result in results:
        option = result.to_option()
        if option.is_empty():
            return False
        if predicate is not None and not predicate(option.get()):
            return False
    return True


def any_ok(results: Iterable[Result[T, E]], predicate: Callable[[T], bool] | None = None) -> bool:
    """True if some Result is Ok (and its value satisfies predicate, if given).

    An empty input is False.
    """
    for result in results:
        option = result.to_option()
        if option.is_defined() and (predicate is None or predicate(option.get())):
            return True
    return False


# ═════════════════════════════════════════════════════════════════════════════
# Accumulating Operations
# ═════════════════════════════════════════════════════════════════════════════


def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split into (ok values, err values), each in original order.

    Example:
        >>> partition([Ok(1), Err("e1"), Ok(2)])
        ([1, 2], ['e1'])
    """
    oks: list[T] = []
    errs: list[E] = []
    for result in results:
        option = result.to_option()
        if option.is_defined():
            oks.append(option.get())
        else:
            errs.extend(result.to_error_option())
    return oks, errs


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast).

    Type signature: [Result[T, E]] -> Result[[T], [E]]

    Example:
        >>> collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")])
        Err(['e1', 'e2'])
    """
    values, errors = partition(results)
    return Result(errors, False) if errors else Result(values, True)


# ═════════════════════════════════════════════════════════════════════════════
# Lifting
# ═════════════════════════════════════════════════════════════════════════════


def lift(f: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:
    """Turn ``T -> U`` into ``Result[T, E] -> Result[U, E]``."""

    def lifted(result: Result[T, E]) -> Result[U, E]:
        return result.map(f)

    return lifted


def lift2(f: Callable[[T, U], V]) -> Callable[[Result[T, E], Result[U, E]], Result[V, E]]:
    """Turn ``(T, U) -> V`` into a function over two Results (see map2)."""

    def lifted(r1: Result[T, E], r2: Result[U, E]) -> Result[V, E]:
        return map2(f, r1, r2)

    return lifted
