"""
Embellishment typeclass
=======================

The capability every embellishment provides to the composer:
- unit: A -> F[A]            (the identity morphism)
- bind: (F[A], A -> F[B]) -> F[B]

composeM/identityM are written once against this record; Writer and
Option only supply unit and bind.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass
from functools import cache
from typing import assert_never

from ..monoid import STRING, Monoid
from ..option import Absent, Option, Present
from ..writer import Writer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Embellishment[F]:
    """
    Typeclass record for an embellished return type F.

    Users implement this for their own wrapper types to reuse composeM,
    identityM and Kleisli.

    NOTE: F stands for the whole family (Writer[?, M], Option[?]). Python
    has no higher-kinded type variables, so the payload is typing.Any here
    and the sugar functions restore precise signatures.
    """

    name: str
    unit: Callable[[typing.Any], F]
    bind: Callable[[F, Callable[[typing.Any], F]], F]


# ============================================================================
# Writer instance
# ============================================================================


@cache
def writer_embellishment[M](monoid: Monoid[M]) -> Embellishment[Writer[typing.Any, M]]:
    """
    Writer instance for a given log monoid.

    - unit: Writer(a, monoid.empty())
    - bind: run the continuation on the value, then combine(first, second)

    Instances are cached per monoid, so arrows built for the same monoid
    share one Embellishment and can be chained.
    """

    def unit(value: typing.Any) -> Writer[typing.Any, M]:
        return Writer(value, monoid.empty())

    def bind(
        w: Writer[typing.Any, M],
        f: Callable[[typing.Any], Writer[typing.Any, M]],
    ) -> Writer[typing.Any, M]:
        match w:
            case Writer(value, first):
                nxt = f(value)
                # Order is part of the contract: logs read in execution order.
                return Writer(nxt.value, monoid.combine(first, nxt.log))
            case _ as unreachable:
                assert_never(unreachable)

    return Embellishment(name="writer", unit=unit, bind=bind)


# ============================================================================
# Option instance
# ============================================================================


def _option_unit(value: typing.Any) -> Option[typing.Any]:
    return Present(value)


def _option_bind(
    o: Option[typing.Any],
    f: Callable[[typing.Any], Option[typing.Any]],
) -> Option[typing.Any]:
    match o:
        case Present(value):
            return f(value)
        case Absent():
            logger.debug("absent input, skipping %s", getattr(f, "__qualname__", f))
            return o
        case _ as unreachable:
            assert_never(unreachable)


OPTION: Embellishment[Option[typing.Any]] = Embellishment(
    name="option",
    unit=_option_unit,
    bind=_option_bind,
)

# Default Writer instance (string log)
WRITER: Embellishment[Writer[typing.Any, str]] = writer_embellishment(STRING)


__all__ = (
    "Embellishment",
    "writer_embellishment",
    "OPTION",
    "WRITER",
)
