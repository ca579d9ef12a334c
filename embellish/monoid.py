"""
Monoids
=======

Log media for the Writer embellishment: an associative combine plus a
neutral element.

Laws (checked in tests, see embellish.laws):
- Left identity: combine(empty(), x) == x
- Right identity: combine(x, empty()) == x
- Associativity: combine(combine(x, y), z) == combine(x, combine(y, z))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ._types import Thunk
from .writer.log import Log


@dataclass(frozen=True, slots=True)
class Monoid[M]:
    """
    Typeclass record for a log medium.

    NOTE: empty is a factory, not a value. Every accumulator is built
    fresh where it is needed so mutable media (list, Log) are never shared.
    """

    empty: Thunk[M]
    combine: Callable[[M, M], M]

    def concat(self, items: Iterable[M], /) -> M:
        """
        Fold many logs into one, left to right.

        Usage:
            STRING.concat(["a ", "b "])  # "a b "
        """
        result = self.empty()
        for item in items:
            result = self.combine(result, item)
        return result


def _combine_str(a: str, b: str) -> str:
    return a + b


def _combine_list[A](a: list[A], b: list[A]) -> list[A]:
    return [*a, *b]


def _combine_tuple[A](a: tuple[A, ...], b: tuple[A, ...]) -> tuple[A, ...]:
    return a + b


def _combine_log[A](a: Log[A], b: Log[A]) -> Log[A]:
    return a.combine(b)


# ============================================================================
# Instances
# ============================================================================

STRING: Monoid[str] = Monoid(empty=str, combine=_combine_str)

LIST: Monoid[list[object]] = Monoid(empty=list, combine=_combine_list)

TUPLE: Monoid[tuple[object, ...]] = Monoid(empty=tuple, combine=_combine_tuple)

LOG: Monoid[Log[object]] = Monoid(empty=Log, combine=_combine_log)


__all__ = (
    "Monoid",
    "STRING",
    "LIST",
    "TUPLE",
    "LOG",
)
