"""
Writer - value with accumulated log
===================================
"""

from __future__ import annotations

from collections.abc import Callable


class Writer[A, M]:
    """
    A value paired with the log produced while computing it.

    This is the result type of a Writer-embellished function. The log is
    only ever merged through a Monoid's combine; the value is opaque to the
    composition machinery.

    Example:
        def to_upper(s: str) -> Writer[str, str]:
            return Writer(s.upper(), "toUpper ")

        match to_upper("hi"):
            case Writer(value, log):
                ...
    """

    __slots__ = ("_value", "_log")
    __match_args__ = ("value", "log")

    def __init__(self, value: A, log: M) -> None:
        self._value = value
        self._log = log

    @property
    def value(self) -> A:
        """The computed value."""
        return self._value

    @property
    def log(self) -> M:
        """The accumulated log."""
        return self._log

    def map[B](self, f: Callable[[A], B], /) -> Writer[B, M]:
        """Functor fmap - apply function to the value, keep the log."""
        return Writer(f(self._value), self._log)

    def to_tuple(self) -> tuple[A, M]:
        return (self._value, self._log)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Writer):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    def __hash__(self) -> int:
        return hash((self._value, self._log))

    def __repr__(self) -> str:
        return f"Writer({self._value!r}, log={self._log!r})"


# Convenience Constructors
def writer[A, M](value: A, log: M) -> Writer[A, M]:
    """Create a Writer from a value and its log."""
    return Writer(value, log)


def tell[M](log: M) -> Writer[None, M]:
    """Write to the log without producing a value."""
    return Writer(None, log)


__all__ = (
    "Writer",
    "writer",
    "tell",
)
