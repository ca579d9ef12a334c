"""
Decorators that embellish plain functions.

    @logged("toUpper ")
    def to_upper(s: str) -> str:
        return s.upper()

    to_upper("hi")  # Writer('HI', log='toUpper ')
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from ..option import Absent, Option, Present
from ..writer import Writer


def logged[A, B, M](message: M) -> Callable[[Callable[[A], B]], Callable[[A], Writer[B, M]]]:
    """
    Decorator: pair the function's result with a fixed log entry.

    The message is whatever the composer's monoid combines: a str for
    STRING, a Log for LOG, a list for LIST.
    """

    def decorator(func: Callable[[A], B]) -> Callable[[A], Writer[B, M]]:
        @wraps(func)
        def wrapper(value: A) -> Writer[B, M]:
            return Writer(func(value), message)

        return wrapper

    return decorator


def traced[A, B, M](
    describe: Callable[[A, B], M],
) -> Callable[[Callable[[A], B]], Callable[[A], Writer[B, M]]]:
    """
    Decorator: build the log entry from the input and the result.

    Example:
        @traced(lambda x, y: f"sqrt({x})={y} ")
        def root(x: float) -> float: ...
    """

    def decorator(func: Callable[[A], B]) -> Callable[[A], Writer[B, M]]:
        @wraps(func)
        def wrapper(value: A) -> Writer[B, M]:
            result = func(value)
            return Writer(result, describe(value, result))

        return wrapper

    return decorator


def guarded[A, B](
    defined: Callable[[A], bool],
) -> Callable[[Callable[[A], B]], Callable[[A], Option[B]]]:
    """
    Decorator: make a partial function total.

    The wrapped function only runs on inputs where `defined` holds; every
    other input maps to Absent().

    Example:
        @guarded(lambda x: x >= 0)
        def safe_root(x: float) -> float:
            return math.sqrt(x)
    """

    def decorator(func: Callable[[A], B]) -> Callable[[A], Option[B]]:
        @wraps(func)
        def wrapper(value: A) -> Option[B]:
            if not defined(value):
                return Absent()
            return Present(func(value))

        return wrapper

    return decorator


def total[A, B](func: Callable[[A], B]) -> Callable[[A], Option[B]]:
    """Decorator: embed a total function into Option (always Present)."""

    @wraps(func)
    def wrapper(value: A) -> Option[B]:
        return Present(func(value))

    return wrapper


__all__ = (
    "logged",
    "traced",
    "guarded",
    "total",
)
