"""
Kleisli composition
===================

Generic composition of embellished functions with the unit + bind pattern,
plus sugar for the Writer and Option embellishments.

Category laws (tests/test_laws.py):
- Associativity: compose(compose(f, g), h) ≡ compose(f, compose(g, h))
- Left identity: compose(identity, f) ≡ f
- Right identity: compose(f, identity) ≡ f
"""

from __future__ import annotations

import typing
from functools import reduce

from .._types import Embellished
from ..monoid import STRING, Monoid
from ..option import Option
from ..writer import Writer
from .embellishment import OPTION, Embellishment, writer_embellishment


# ============================================================================
# Generic combinators (unit + bind pattern)
# ============================================================================


def identityM[F](*, via: Embellishment[F]) -> Embellished[typing.Any, F]:
    """
    Identity morphism of an embellishment.

    Args:
        via: Embellishment providing unit
    """
    return via.unit


def composeM[A, F](
    first: Embellished[A, F],
    second: Embellished[typing.Any, F],
    *,
    via: Embellishment[F],
) -> Embellished[A, F]:
    """
    Generic Kleisli composition: run first, feed its value into second.

    The result is a new embellished function; nothing runs until it is
    called. Composition itself never raises, any failure the
    embellishment can represent (Absent) is carried in the return value.

    Args:
        first: A -> F[B]
        second: B -> F[C]
        via: Embellishment providing bind

    Example (custom embellishment):
        composeM(parse, validate, via=my_embellishment)
    """

    def composed(x: A) -> F:
        return via.bind(first(x), second)

    composed.__qualname__ = (
        f"{getattr(first, '__qualname__', 'first')}"
        f" >=> {getattr(second, '__qualname__', 'second')}"
    )
    return composed


def compose_allM[F](
    *morphisms: Embellished[typing.Any, F],
    via: Embellishment[F],
) -> Embellished[typing.Any, F]:
    """
    Compose any number of morphisms left to right.

    With no morphisms returns the identity; with one returns it unchanged.
    """
    if not morphisms:
        return identityM(via=via)
    return reduce(lambda acc, m: composeM(acc, m, via=via), morphisms)


# ============================================================================
# Sugar for Writer
# ============================================================================


def identity_writer[A, M](monoid: Monoid[M] = STRING) -> Embellished[A, Writer[A, M]]:
    """Writer identity: a -> Writer(a, monoid.empty())."""
    return identityM(via=writer_embellishment(monoid))


def compose_writer[A, B, C, M](
    first: Embellished[A, Writer[B, M]],
    second: Embellished[B, Writer[C, M]],
    *,
    monoid: Monoid[M] = STRING,
) -> Embellished[A, Writer[C, M]]:
    """
    Compose two Writer-embellished functions.

    Logs are combined as monoid.combine(first_log, second_log).

    Example:
        upper_words = compose_writer(to_upper, to_words)
        upper_words("Hello World")
        # Writer(['HELLO', 'WORLD'], log='toUpper toWords ')
    """
    return composeM(first, second, via=writer_embellishment(monoid))  # type: ignore[arg-type,return-value]


def compose_all_writer[M](
    *morphisms: Embellished[typing.Any, Writer[typing.Any, M]],
    monoid: Monoid[M] = STRING,
) -> Embellished[typing.Any, Writer[typing.Any, M]]:
    """Left-to-right composition of many Writer functions."""
    return compose_allM(*morphisms, via=writer_embellishment(monoid))


# ============================================================================
# Sugar for Option
# ============================================================================


def identity_option[A](value: A) -> Option[A]:
    """Option identity: a -> Present(a)."""
    return OPTION.unit(value)


def compose_option[A, B, C](
    first: Embellished[A, Option[B]],
    second: Embellished[B, Option[C]],
) -> Embellished[A, Option[C]]:
    """
    Compose two partial functions.

    If first returns Absent(), second is never called and the composite
    returns Absent(). Otherwise second's result is returned verbatim.

    Example:
        compose_option(safe_reciprocal, safe_root)(4.0)  # Present(0.5)
        compose_option(safe_reciprocal, safe_root)(0.0)  # Absent()
    """
    return composeM(first, second, via=OPTION)  # type: ignore[arg-type,return-value]


def compose_all_option(
    *morphisms: Embellished[typing.Any, Option[typing.Any]],
) -> Embellished[typing.Any, Option[typing.Any]]:
    """Left-to-right composition of many partial functions."""
    return compose_allM(*morphisms, via=OPTION)


__all__ = (
    # Generic
    "identityM",
    "composeM",
    "compose_allM",
    # Writer
    "identity_writer",
    "compose_writer",
    "compose_all_writer",
    # Option
    "identity_option",
    "compose_option",
    "compose_all_option",
)
