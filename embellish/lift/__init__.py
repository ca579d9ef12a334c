"""
Lift helpers with semantic namespaces.

    from embellish import lift as L

Architecture:
- L.up.*    - lift values into Writer / Option
- L.down.*  - lower embellished values back to plain ones
- L.logged / L.traced / L.guarded / L.total - decorators embellishing
  plain functions

Examples:
    from embellish import lift as L

    @L.logged("toUpper ")
    def to_upper(s: str) -> str:
        return s.upper()

    @L.guarded(lambda x: x != 0)
    def reciprocal(x: float) -> float:
        return 1.0 / x

    L.down.or_else(reciprocal(0.0), default=float("inf"))
"""

from __future__ import annotations

from . import down, up
from .call import guarded, logged, total, traced
from .up import catching, optional, pure, some

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Decorators
    "logged",
    "traced",
    "guarded",
    "total",
    # Up
    "pure",
    "some",
    "optional",
    "catching",
)
