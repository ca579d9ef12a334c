"""
Lowering embellished values back to plain ones.
"""

from __future__ import annotations

from kungfu import Result

from .._errors import EmptyValueError
from .._types import Thunk
from ..option import Option
from ..option import or_else as _or_else
from ..option import to_result as _to_result
from ..option import unwrap
from ..writer import Writer


def to_tuple[A, M](w: Writer[A, M]) -> tuple[A, M]:
    """Split a Writer into (value, log)."""
    return w.to_tuple()


def value[A, M](w: Writer[A, M]) -> A:
    """Keep the value, drop the log."""
    return w.value


def unsafe[A](option: Option[A]) -> A:
    """
    Unwrap, raising EmptyValueError on Absent().

    **When to use:** only where presence is already established.
    """
    return unwrap(option)


def or_else[A](option: Option[A], default: A) -> A:
    """Unwrap or fall back to default."""
    return _or_else(option, default)


def to_result[A, E](
    option: Option[A],
    *,
    error: Thunk[E] = EmptyValueError,  # type: ignore[assignment]
) -> Result[A, E]:
    """
    Continue in a Result pipeline.

    Example:
        from embellish import lift as L

        match L.down.to_result(safe_root(x), error=lambda: NegativeInput(x)):
            case Ok(root): ...
            case Error(err): ...
    """
    return _to_result(option, error=error)


__all__ = (
    "to_tuple",
    "value",
    "unsafe",
    "or_else",
    "to_result",
)
