from __future__ import annotations

import logging

import pytest

from embellish import (
    LOG,
    OPTION,
    WRITER,
    Absent,
    Embellishment,
    Kleisli,
    Log,
    Present,
    Writer,
    composeM,
    identityM,
    writer_embellishment,
)
from embellish.samples import count_words, safe_reciprocal, safe_root, split_traced, to_upper, to_words


def test_writer_arrow_chain() -> None:
    pipeline = Kleisli.writer(to_upper) >> to_words
    assert pipeline("Hello World") == Writer(["HELLO", "WORLD"], "toUpper toWords ")


def test_option_arrow_chain() -> None:
    pipeline = Kleisli.option(safe_reciprocal).then(safe_root)
    assert pipeline(4.0) == Present(0.5)
    assert pipeline(0.0) == Absent()


def test_chaining_arrows_of_same_embellishment() -> None:
    upper = Kleisli.writer(to_upper)
    words = Kleisli.writer(to_words)
    assert (upper >> words)("a b") == Writer(["A", "B"], "toUpper toWords ")


def test_arrow_is_not_mutated_by_chaining() -> None:
    upper = Kleisli.writer(to_upper)
    _ = upper >> to_words
    assert upper("x") == Writer("X", "toUpper ")


def test_sequence_log_arrow() -> None:
    pipeline = Kleisli.writer(split_traced, monoid=LOG) >> count_words
    assert pipeline("a b") == Writer(2, Log.of("split into 2 words", "counted 2 words"))


def test_mixing_embellishments_is_rejected() -> None:
    with pytest.raises(TypeError):
        Kleisli.writer(to_upper) >> Kleisli.option(safe_root)


def test_non_callable_is_rejected() -> None:
    with pytest.raises(TypeError):
        Kleisli(42, via=OPTION)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Kleisli.option(safe_root).then(42)  # type: ignore[arg-type]


def test_identity_arrow() -> None:
    ident = Kleisli.identity(WRITER)
    assert (ident >> to_upper)("a") == to_upper("a")
    assert (Kleisli.option(safe_root) >> Kleisli.identity(OPTION))(9.0) == Present(3.0)


def test_writer_embellishment_is_cached_per_monoid() -> None:
    assert writer_embellishment(LOG) is writer_embellishment(LOG)


def test_repr() -> None:
    assert repr(Kleisli.option(safe_root)) == "Kleisli(safe_root, via=option)"


def test_custom_embellishment() -> None:
    # List embellishment: nondeterministic functions
    def unit(x: object) -> list[object]:
        return [x]

    def bind(xs: list[object], f) -> list[object]:
        return [y for x in xs for y in f(x)]

    nondet: Embellishment[list[object]] = Embellishment(name="list", unit=unit, bind=bind)

    def plus_minus(x: int) -> list[int]:
        return [x, -x]

    def twice(x: int) -> list[int]:
        return [x, x]

    composed = composeM(plus_minus, twice, via=nondet)
    assert composed(1) == [1, 1, -1, -1]
    assert composeM(identityM(via=nondet), plus_minus, via=nondet)(2) == [2, -2]


def test_short_circuit_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="embellish.kleisli.embellishment"):
        Kleisli.option(safe_reciprocal).then(safe_root)(0.0)
    assert any("safe_root" in record.getMessage() for record in caplog.records)
