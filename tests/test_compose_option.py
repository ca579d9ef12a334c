from __future__ import annotations

from embellish import (
    Absent,
    Option,
    Present,
    compose_all_option,
    compose_option,
    identity_option,
)
from embellish.samples import safe_log, safe_reciprocal, safe_root


def test_safe_root() -> None:
    assert safe_root(4.0) == Present(2.0)
    assert safe_root(0.0) == Present(0.0)
    assert safe_root(-1.0) == Absent()


def test_safe_reciprocal() -> None:
    assert safe_reciprocal(2.0) == Present(0.5)
    assert safe_reciprocal(0.0) == Absent()


def test_root_of_reciprocal() -> None:
    composed = compose_option(safe_reciprocal, safe_root)
    assert composed(0.0) == Absent()
    assert composed(4.0) == Present(0.5)
    assert composed(-4.0) == Absent()


def test_short_circuit_skips_second() -> None:
    calls: list[float] = []

    def counted(x: float) -> Option[float]:
        calls.append(x)
        return Present(x)

    composed = compose_option(safe_root, counted)
    assert composed(-1.0) == Absent()
    assert calls == []

    assert composed(9.0) == Present(3.0)
    assert calls == [3.0]


def test_second_result_returned_verbatim() -> None:
    composed = compose_option(identity_option, safe_reciprocal)
    assert composed(0.0) == Absent()
    assert composed(0.25) == Present(4.0)


def test_identity() -> None:
    assert identity_option(3) == Present(3)
    assert identity_option(None) == Present(None)


def test_composition_never_raises_on_absence() -> None:
    pipeline = compose_all_option(safe_root, safe_reciprocal, safe_log)
    assert pipeline(-1.0) == Absent()
    assert pipeline(0.0) == Absent()
    # 1 / sqrt(1) == 1, log(1) == 0
    assert pipeline(1.0) == Present(0.0)


def test_compose_all_of_nothing_is_identity() -> None:
    assert compose_all_option()(7) == Present(7)
