"""
Writer Embellishment
====================

Writer[A, M] - a value plus an accumulated log:
- Writer (value, log) pair
- Log[A] (list-based log with monoidal combine)

Logs are merged by the kleisli composer, never by hand.
"""

from .log import Log
from .pair import Writer, tell, writer

__all__ = (
    "Log",
    "Writer",
    "writer",
    "tell",
)
