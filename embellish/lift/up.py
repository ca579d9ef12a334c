"""
Lifting values into an embellishment.

Functions for turning plain values, `A | None` and exception-based code
into Writer and Option values.
"""

from __future__ import annotations

from collections.abc import Callable

from ..monoid import STRING, Monoid
from ..option import Absent, Option, Present, from_optional
from ..writer import Writer


def pure[A, M](value: A, *, monoid: Monoid[M] = STRING) -> Writer[A, M]:
    """
    Lift a value into Writer with an empty log.

    Example:
        from embellish import lift as L

        L.up.pure(42)                  # Writer(42, log='')
        L.up.pure(42, monoid=LOG)      # Writer(42, log=Log([]))
    """
    return Writer(value, monoid.empty())


def some[A](value: A) -> Option[A]:
    """Lift a value into Option. Same as present()."""
    return Present(value)


def optional[A](value: A | None) -> Option[A]:
    """
    Convert `A | None` to Option. None becomes Absent().

    **When to use:** dict lookups, regex matches, anything that signals
    absence with None.
    """
    return from_optional(value)


def catching[A](
    thunk: Callable[[], A],
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Option[A]:
    """
    Execute thunk, turn the listed exceptions into Absent().

    Example:
        from embellish import lift as L

        L.up.catching(lambda: int(raw), exceptions=(ValueError,))

    NOTE: Only exceptions in `exceptions` are caught, everything else
          propagates.
    """
    try:
        return Present(thunk())
    except exceptions:
        return Absent()


__all__ = (
    "pure",
    "some",
    "optional",
    "catching",
)
