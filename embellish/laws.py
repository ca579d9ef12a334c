"""
Executable algebraic laws.

Each check runs both sides on a concrete input and compares the results
with ==. Embellished values compare structurally (Writer compares value and
log, Absent() equals Absent()).
"""

from __future__ import annotations

import typing

from ._types import Embellished
from .kleisli import Embellishment, composeM, identityM
from .monoid import Monoid


def associativity_holds[A, F](
    f: Embellished[A, F],
    g: Embellished[typing.Any, F],
    h: Embellished[typing.Any, F],
    x: A,
    *,
    via: Embellishment[F],
) -> bool:
    """(f >=> g) >=> h and f >=> (g >=> h) agree on x."""
    left = composeM(composeM(f, g, via=via), h, via=via)
    right = composeM(f, composeM(g, h, via=via), via=via)
    return left(x) == right(x)


def left_identity_holds[A, F](f: Embellished[A, F], x: A, *, via: Embellishment[F]) -> bool:
    return composeM(identityM(via=via), f, via=via)(x) == f(x)


def right_identity_holds[A, F](f: Embellished[A, F], x: A, *, via: Embellishment[F]) -> bool:
    return composeM(f, identityM(via=via), via=via)(x) == f(x)


def monoid_identity_holds[M](monoid: Monoid[M], x: M) -> bool:
    return monoid.combine(monoid.empty(), x) == x == monoid.combine(x, monoid.empty())


def monoid_associativity_holds[M](monoid: Monoid[M], x: M, y: M, z: M) -> bool:
    c = monoid.combine
    return c(c(x, y), z) == c(x, c(y, z))


__all__ = (
    "associativity_holds",
    "left_identity_holds",
    "right_identity_holds",
    "monoid_identity_holds",
    "monoid_associativity_holds",
)
