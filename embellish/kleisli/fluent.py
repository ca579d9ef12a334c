"""
Fluent Kleisli arrows.

    pipeline = Kleisli.writer(to_upper) >> to_words
    pipeline("Hello World")  # Writer(['HELLO', 'WORLD'], log='toUpper toWords ')

    root_of_inverse = Kleisli.option(safe_reciprocal) >> safe_root
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import Embellished
from ..monoid import STRING, Monoid
from ..option import Option
from ..writer import Writer
from .compose import composeM, identityM
from .embellishment import OPTION, Embellishment, writer_embellishment


class Kleisli[A, F]:
    """
    Embellished function bound to its embellishment.

    Calling a Kleisli calls the wrapped function. `>>` and then() compose
    left to right and return a new Kleisli; the receiver is unchanged.
    """

    __slots__ = ("_func", "_via")

    def __init__(self, func: Embellished[A, F], /, *, via: Embellishment[F]) -> None:
        if not callable(func):
            raise TypeError("Kleisli expects a callable returning an embellished value")
        self._func = func
        self._via = via

    @staticmethod
    def writer[T, M](
        func: Embellished[T, Writer[typing.Any, M]],
        /,
        *,
        monoid: Monoid[M] = STRING,
    ) -> Kleisli[T, Writer[typing.Any, M]]:
        return Kleisli(func, via=writer_embellishment(monoid))

    @staticmethod
    def option[T](func: Embellished[T, Option[typing.Any]], /) -> Kleisli[T, Option[typing.Any]]:
        return Kleisli(func, via=OPTION)

    @staticmethod
    def identity[T](via: Embellishment[T]) -> Kleisli[typing.Any, T]:
        """The identity arrow of an embellishment."""
        return Kleisli(identityM(via=via), via=via)

    @property
    def func(self) -> Embellished[A, F]:
        return self._func

    @property
    def via(self) -> Embellishment[F]:
        return self._via

    def then(self, other: Callable[[typing.Any], F] | Kleisli[typing.Any, F], /) -> Kleisli[A, F]:
        """Compose with the next embellished function."""
        if isinstance(other, Kleisli):
            if other.via != self._via:
                raise TypeError(
                    f"Cannot compose {self._via.name} arrow with {other.via.name} arrow"
                )
            other = other.func
        if not callable(other):
            raise TypeError("then() expects a callable returning an embellished value")
        return Kleisli(composeM(self._func, other, via=self._via), via=self._via)

    def __rshift__(self, other: Callable[[typing.Any], F] | Kleisli[typing.Any, F]) -> Kleisli[A, F]:
        return self.then(other)

    def __call__(self, value: A, /) -> F:
        return self._func(value)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"Kleisli({name}, via={self._via.name})"


__all__ = ("Kleisli",)
