from __future__ import annotations

from _infra import banner, run

from embellish import LOG, Writer, compose_all_writer, compose_writer
from embellish.samples import count_words, split_traced, strip, to_upper, to_words


def negate(flag: bool) -> Writer[bool, str]:
    # "Pure" embellished function: the log is returned, not written to a global.
    return Writer(not flag, "not so fast! ")


def main() -> None:
    banner("01_writer_logs: Writer composition (value + log)")

    upper_words = compose_writer(to_upper, to_words)
    w = upper_words("Hello World")
    print(f"value: {w.value!r}")
    print(f"log:   {w.log!r}")

    pipeline = compose_all_writer(strip, to_upper, to_words)
    print(pipeline("  keep calm and compose  "))

    print(compose_writer(negate, negate)(True))

    traced = compose_writer(split_traced, count_words, monoid=LOG)
    match traced("one two three"):
        case Writer(n, log):
            print(f"words: {n}")
            for entry in log:
                print(f"  - {entry}")


if __name__ == "__main__":
    run(main)
