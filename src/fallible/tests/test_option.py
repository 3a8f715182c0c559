"""Tests for the Option presence container."""

import pytest

from fallible import Nothing, Some, from_value, none_value, some_of


def test_some_and_nothing_queries() -> None:
    assert some_of(1).is_defined()
    assert not some_of(1).is_empty()
    assert none_value().is_empty()
    assert none_value() is Nothing


def test_map_flat_map_filter() -> None:
    assert Some(2).map(lambda x: x * 3) == Some(6)
    assert Nothing.map(lambda x: x * 3) is Nothing
    assert Some(2).flat_map(lambda x: Some(x + 1)) == Some(3)
    assert Some(2).flat_map(lambda x: Nothing) is Nothing
    assert Some(10).filter(lambda x: x > 5) == Some(10)
    assert Some(1).filter(lambda x: x > 5) is Nothing
    assert Nothing.filter(lambda x: True) is Nothing


def test_extraction() -> None:
    assert Some(1).get() == 1
    assert Some(1).get_or_else(0) == 1
    assert Nothing.get_or_else(0) == 0
    with pytest.raises(ValueError):
        Nothing.get()


def test_from_value() -> None:
    assert from_value(None) is Nothing
    assert from_value(0) == Some(0)
    assert from_value("", none_marker="") is Nothing
    assert from_value("x", none_marker="") == Some("x")


def test_equality_and_repr() -> None:
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Some(None) != Nothing
    assert repr(Some("a")) == "Some('a')"
    assert repr(Nothing) == "Nothing"
    assert list(Some(1)) == [1]
    assert list(Nothing) == []


def test_immutable() -> None:
    option = Some(1)
    with pytest.raises(AttributeError):
        option._value = 2  # type: ignore[misc]
