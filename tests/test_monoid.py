"""Monoid instances: neutral element, associativity, fresh accumulators."""

from __future__ import annotations

import pytest

from embellish import LIST, LOG, STRING, TUPLE, Log
from embellish.laws import monoid_associativity_holds, monoid_identity_holds


@pytest.mark.parametrize("s", ["", "a", "toUpper ", "héllo wörld", "  \n"])
def test_string_neutral_element(s: str) -> None:
    assert STRING.combine(STRING.empty(), s) == s
    assert STRING.combine(s, STRING.empty()) == s


@pytest.mark.parametrize(
    ("monoid", "x", "y", "z"),
    [
        (STRING, "a ", "b ", "c "),
        (LIST, [1], [2, 3], []),
        (TUPLE, (1,), (), (2, 3)),
        (LOG, Log.of("a"), Log.of("b", "c"), Log()),
    ],
)
def test_associativity_and_identity(monoid, x, y, z) -> None:
    assert monoid_associativity_holds(monoid, x, y, z)
    assert monoid_identity_holds(monoid, x)


def test_empty_is_fresh_each_time() -> None:
    first = LIST.empty()
    first.append("leak")
    assert LIST.empty() == []
    assert LOG.empty() == Log()


def test_combine_is_ordered() -> None:
    assert STRING.combine("A ", "B ") == "A B "
    assert LIST.combine([1], [2]) == [1, 2]


def test_concat_folds_left_to_right() -> None:
    assert STRING.concat(["a ", "b ", "c "]) == "a b c "
    assert LIST.concat([]) == []


def test_log_combine_does_not_mutate() -> None:
    a = Log.of("a")
    b = Log.of("b")
    merged = a.combine(b)
    assert merged == ["a", "b"]
    assert a == ["a"]
    assert b == ["b"]
    assert a.tell("x") == ["a", "x"]
    assert a == ["a"]
