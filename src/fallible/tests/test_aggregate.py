"""Tests for operations over many Results."""

from __future__ import annotations

from fallible import (
    Err,
    Ok,
    Result,
    all_ok,
    any_ok,
    collect_results,
    combine,
    first_ok,
    fold,
    lift,
    lift2,
    map2,
    map3,
    partition,
    sequence,
    traverse,
    zip,
)


def _parse_int(s: str) -> Result[int, str]:
    try:
        return Ok(int(s))
    except ValueError:
        return Err(f"invalid: {s}")


# ═════════════════════════════════════════════════════════════════════════════
# Fail-Fast Combination
# ═════════════════════════════════════════════════════════════════════════════


def test_combine_all_ok() -> None:
    assert combine(Ok(1), Ok(2), Ok(3)) == Ok([1, 2, 3])
    assert combine() == Ok([])


def test_combine_returns_first_err_instance() -> None:
    """The first Err is returned as-is, not rebuilt."""
    first = Err(KeyError("a"))
    second = Err("second")

    assert combine(Ok(1), first, second) is first
    assert combine(Ok(1), Err("e"), Ok(3)) == Err("e")


def test_zip_is_combine() -> None:
    assert zip(Ok("a"), Ok("b")) == Ok(["a", "b"])
    assert zip(Ok("a"), Err("x")) == Err("x")


def test_map2() -> None:
    assert map2(lambda a, b: a + b, Ok(10), Ok(5)) == Ok(15)
    assert map2(lambda a, b: a + b, Err("e1"), Err("e2")) == Err("e1")
    assert map2(lambda a, b: a + b, Ok(1), Err("e2")) == Err("e2")


def test_map3() -> None:
    assert map3(lambda a, b, c: a * b * c, Ok(2), Ok(3), Ok(4)) == Ok(24)
    assert map3(lambda a, b, c: a, Ok(1), Err("e2"), Err("e3")) == Err("e2")


def test_fold() -> None:
    assert fold([Ok(1), Ok(2), Ok(3)], 0, lambda acc, x: acc + x) == Ok(6)
    assert fold([], "init", lambda acc, x: acc + x) == Ok("init")


def test_fold_stops_at_first_err() -> None:
    seen: list[int] = []

    def add(acc: int, x: int) -> int:
        seen.append(x)
        return acc + x

    assert fold([Ok(1), Err("e"), Ok(3)], 0, add) == Err("e")
    assert seen == [1]


def test_sequence() -> None:
    assert sequence([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
    assert sequence([Ok(1), Err("e"), Ok(3)]) == Err("e")
    assert sequence([]) == Ok([])


def test_sequence_accepts_iterables() -> None:
    assert sequence(Ok(n) for n in range(3)) == Ok([0, 1, 2])


def test_sequence_matches_fold_with_append() -> None:
    results = [Ok(1), Ok(2)]
    assert sequence(results) == fold(results, [], lambda acc, x: [*acc, x])


def test_traverse() -> None:
    assert traverse(["1", "2", "3"], _parse_int) == Ok([1, 2, 3])
    assert traverse(["1", "bad", "3"], _parse_int) == Err("invalid: bad")


def test_traverse_maps_every_item() -> None:
    """f runs for all items even after a failure."""
    seen: list[str] = []

    def parse(s: str) -> Result[int, str]:
        seen.append(s)
        return _parse_int(s)

    traverse(["bad", "2", "worse"], parse)
    assert seen == ["bad", "2", "worse"]


# ═════════════════════════════════════════════════════════════════════════════
# Selection & Inspection
# ═════════════════════════════════════════════════════════════════════════════


def test_first_ok() -> None:
    assert first_ok([Err("a"), Ok(2), Ok(3)]) == Ok(2)
    assert first_ok([Err("a"), Err("b")]) == Err("All results failed")
    assert first_ok([], "nothing") == Err("nothing")


def test_all_ok() -> None:
    assert all_ok([Ok(1), Ok(2)])
    assert not all_ok([Ok(1), Err("e")])
    assert all_ok([Ok(2), Ok(4)], lambda x: x % 2 == 0)
    assert not all_ok([Ok(2), Ok(3)], lambda x: x % 2 == 0)
    assert all_ok([])


def test_any_ok() -> None:
    assert any_ok([Err("e"), Ok(1)])
    assert not any_ok([Err("e"), Err("f")])
    assert any_ok([Ok(1), Ok(4)], lambda x: x > 3)
    assert not any_ok([Ok(1), Err("e")], lambda x: x > 3)
    assert not any_ok([])


# ═════════════════════════════════════════════════════════════════════════════
# Accumulating Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_partition() -> None:
    results = [Ok(1), Err("e1"), Ok(2), Err("e2"), Ok(3)]
    assert partition(results) == ([1, 2, 3], ["e1", "e2"])
    assert partition([]) == ([], [])


def test_partition_keeps_none_payloads() -> None:
    assert partition([Ok(None), Err(None)]) == ([None], [None])


def test_collect_results() -> None:
    """Test collect_results accumulates all errors."""
    assert collect_results([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
    assert collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")]) == Err(["e1", "e2"])


# ═════════════════════════════════════════════════════════════════════════════
# Lifting
# ═════════════════════════════════════════════════════════════════════════════


def test_lift() -> None:
    double = lift(lambda x: x * 2)
    assert double(Ok(4)) == Ok(8)
    assert double(Err("e")) == Err("e")


def test_lift2() -> None:
    add = lift2(lambda a, b: a + b)
    assert add(Ok(1), Ok(2)) == Ok(3)
    assert add(Ok(1), Err("e")) == Err("e")
