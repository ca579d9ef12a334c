"""
Option Embellishment
====================

Option[A] - Present(value) or Absent(), the embellishment of partial
functions.
"""

from .option import (
    Absent,
    Option,
    Present,
    absent,
    from_optional,
    is_present,
    or_else,
    present,
    to_result,
    try_unwrap,
    unwrap,
)

__all__ = (
    "Option",
    "Present",
    "Absent",
    "present",
    "absent",
    "from_optional",
    "is_present",
    "unwrap",
    "or_else",
    "to_result",
    "try_unwrap",
)
