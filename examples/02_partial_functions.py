from __future__ import annotations

from _infra import NegativeInput, banner, run

from embellish import EmptyValueError, compose_option, unwrap
from embellish import lift as L
from embellish.samples import safe_reciprocal, safe_root
from kungfu import Error, Ok


def main() -> None:
    banner("02_partial_functions: Option composition with short-circuit")

    root_of_inverse = compose_option(safe_reciprocal, safe_root)
    for x in (4.0, 0.0, -1.0):
        print(f"{x:>5}: {root_of_inverse(x)!r}")

    # Unwrapping Absent is an explicit failure
    try:
        unwrap(safe_root(-1.0))
    except EmptyValueError as exc:
        print(f"unwrap failed: {exc}")

    # Continue in a Result pipeline instead
    match L.down.to_result(safe_root(-9.0), error=lambda: NegativeInput(-9.0)):
        case Ok(root):
            print(f"root: {root}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
