from __future__ import annotations

from embellish import (
    LIST,
    LOG,
    Log,
    Writer,
    compose_all_writer,
    compose_writer,
    identity_writer,
)
from embellish.samples import count_words, split_traced, to_lower, to_upper, to_words


def _logs(message: str):
    def f(x: int) -> Writer[int, str]:
        return Writer(x + 1, message)

    return f


def test_log_order_follows_execution_order() -> None:
    composed = compose_writer(_logs("A "), _logs("B "))
    assert composed(0) == Writer(2, "A B ")


def test_to_upper_then_to_words() -> None:
    assert to_upper("Hello World") == Writer("HELLO WORLD", "toUpper ")
    upper_words = compose_writer(to_upper, to_words)
    assert upper_words("Hello World") == Writer(["HELLO", "WORLD"], "toUpper toWords ")


def test_identity_has_empty_log() -> None:
    assert identity_writer()(5) == Writer(5, "")
    assert identity_writer(LOG)(5) == Writer(5, Log())


def test_composition_is_lazy() -> None:
    calls: list[str] = []

    def first(x: str) -> Writer[str, str]:
        calls.append("first")
        return Writer(x, "1 ")

    composed = compose_writer(first, to_upper)
    assert calls == []
    composed("a")
    assert calls == ["first"]


def test_composed_function_is_reusable() -> None:
    composed = compose_writer(to_lower, to_words)
    assert composed("A B") == Writer(["a", "b"], "toLower toWords ")
    assert composed("C") == Writer(["c"], "toLower toWords ")


def test_sequence_log_monoid() -> None:
    composed = compose_writer(split_traced, count_words, monoid=LOG)
    assert composed("one two three") == Writer(
        3, Log.of("split into 3 words", "counted 3 words")
    )


def test_list_log_monoid() -> None:
    def tag(name: str):
        def f(x: int) -> Writer[int, list[str]]:
            return Writer(x * 2, [name])

        return f

    composed = compose_writer(tag("a"), tag("b"), monoid=LIST)
    assert composed(1) == Writer(4, ["a", "b"])


def test_compose_all() -> None:
    pipeline = compose_all_writer(_logs("1 "), _logs("2 "), _logs("3 "))
    assert pipeline(0) == Writer(3, "1 2 3 ")


def test_compose_all_of_nothing_is_identity() -> None:
    assert compose_all_writer()("x") == Writer("x", "")
    assert compose_all_writer(monoid=LIST)("x") == Writer("x", [])


def test_user_exceptions_propagate() -> None:
    def boom(_: str) -> Writer[str, str]:
        raise ValueError("boom")

    composed = compose_writer(to_upper, boom)
    try:
        composed("x")
    except ValueError as exc:
        assert str(exc) == "boom"
    else:
        raise AssertionError("ValueError not propagated")
