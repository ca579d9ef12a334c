from __future__ import annotations

import math

from _infra import banner, run

from embellish import Kleisli
from embellish import lift as L
from embellish.samples import safe_log, safe_reciprocal, to_lower, to_words


@L.guarded(lambda x: x >= 1)
def safe_acosh(x: float) -> float:
    return math.acosh(x)


def main() -> None:
    banner("03_fluent_arrows: Kleisli >> chaining")

    words = Kleisli.writer(to_lower) >> to_words
    print(words("Arrows Compose Like Functions"))

    pipeline = Kleisli.option(safe_reciprocal) >> safe_log >> safe_acosh
    print(pipeline)
    for x in (0.01, 0.5, 2.0):
        print(f"{x:>5}: {pipeline(x)!r}")


if __name__ == "__main__":
    run(main)
