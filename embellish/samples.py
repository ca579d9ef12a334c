"""
Sample embellished functions.

Small business functions in embellished form, used by the examples and the
test-suite. The composer does not depend on anything here.
"""

from __future__ import annotations

import math

from .lift.call import guarded, logged, traced
from .option import Absent, Option, Present
from .writer import Log, Writer

# ============================================================================
# Writer[_, str]
# ============================================================================


def to_upper(s: str) -> Writer[str, str]:
    return Writer(s.upper(), "toUpper ")


def to_words(s: str) -> Writer[list[str], str]:
    return Writer(s.split(), "toWords ")


@logged("toLower ")
def to_lower(s: str) -> str:
    return s.lower()


@logged("strip ")
def strip(s: str) -> str:
    return s.strip()


# ============================================================================
# Writer[_, Log[str]]
# ============================================================================


@traced(lambda words, n: Log.of(f"counted {n} words"))
def count_words(words: list[str]) -> int:
    return len(words)


def split_traced(s: str) -> Writer[list[str], Log[str]]:
    words = s.split()
    return Writer(words, Log.of(f"split into {len(words)} words"))


# ============================================================================
# Option
# ============================================================================


def safe_root(x: float) -> Option[float]:
    if x >= 0:
        return Present(math.sqrt(x))
    return Absent()


def safe_reciprocal(x: float) -> Option[float]:
    if x != 0:
        return Present(1.0 / x)
    return Absent()


@guarded(lambda x: x > 0)
def safe_log(x: float) -> float:
    return math.log(x)


__all__ = (
    "to_upper",
    "to_words",
    "to_lower",
    "strip",
    "count_words",
    "split_traced",
    "safe_root",
    "safe_reciprocal",
    "safe_log",
)
