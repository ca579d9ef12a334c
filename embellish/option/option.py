"""
Option - value that may be absent
=================================

Option[A] = Present[A] | Absent

Models partial functions: instead of raising or returning a sentinel, a
partial function returns Absent() for inputs it is not defined on.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import EmptyValueError
from .._types import Thunk


class Present[A]:
    """Option holding a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: A) -> None:
        self._value = value

    @property
    def value(self) -> A:
        return self._value

    def is_present(self) -> bool:
        return True

    def unwrap(self) -> A:
        return self._value

    def map[B](self, f: Callable[[A], B], /) -> Present[B]:
        """Functor fmap - apply function to the value."""
        return Present(f(self._value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent:
    """Option without a value. All Absent instances are equal."""

    __slots__ = ()
    __match_args__ = ()

    def is_present(self) -> bool:
        return False

    def unwrap(self) -> typing.NoReturn:
        raise EmptyValueError()

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> Absent:
        _ = f
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "Absent()"


type Option[A] = Present[A] | Absent


# ============================================================================
# Constructors
# ============================================================================


def present[A](value: A) -> Option[A]:
    """Wrap a value. Always succeeds."""
    return Present(value)


def absent[A]() -> Option[A]:
    """The empty option. Always succeeds, carries no payload."""
    return Absent()


def from_optional[A](value: A | None) -> Option[A]:
    """
    Convert `A | None` into an Option. None becomes Absent().

    Example:
        from_optional(cache.get(key))
    """
    if value is None:
        return Absent()
    return Present(value)


# ============================================================================
# Eliminators
# ============================================================================


def is_present[A](option: Option[A]) -> bool:
    """True for Present, False for Absent. Never fails."""
    return isinstance(option, Present)


def unwrap[A](option: Option[A]) -> A:
    """
    Return the payload of a Present option.

    Raises EmptyValueError for Absent. Callers that cannot guarantee
    presence should use or_else, try_unwrap or a match statement instead.
    """
    match option:
        case Present(value):
            return value
        case Absent():
            raise EmptyValueError()
        case _ as unreachable:
            assert_never(unreachable)


def or_else[A](option: Option[A], default: A) -> A:
    """Return the payload or default."""
    match option:
        case Present(value):
            return value
        case Absent():
            return default
        case _ as unreachable:
            assert_never(unreachable)


def to_result[A, E](option: Option[A], *, error: Thunk[E]) -> Result[A, E]:
    """
    Convert Option to Result. Absent becomes Error(error()).

    NOTE: error is a thunk so the error is only built when the value is
          missing.
    """
    match option:
        case Present(value):
            return Ok(value)
        case Absent():
            return Error(error())
        case _ as unreachable:
            assert_never(unreachable)


def try_unwrap[A](option: Option[A]) -> Result[A, EmptyValueError]:
    """unwrap() that reports absence as Error(EmptyValueError) instead of raising."""
    return to_result(option, error=EmptyValueError)


__all__ = (
    "Option",
    "Present",
    "Absent",
    "present",
    "absent",
    "from_optional",
    "is_present",
    "unwrap",
    "or_else",
    "to_result",
    "try_unwrap",
)
