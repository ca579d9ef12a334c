"""
Core type definitions for embellish.

Aliases shared by the writer, option and kleisli modules.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Embellished = plain function whose result is wrapped in an embellishment
# NOTE: FB is the already-applied embellished type (Writer[B, M], Option[B]),
#       Python has no higher-kinded type variables.
type Embellished[A, FB] = Callable[[A], FB]

# Unit = identity morphism of an embellishment (A -> F[A])
type Unit[A, FA] = Callable[[A], FA]

# Bind = feed an embellished value into the next embellished function
type Bind[FA, A, FB] = Callable[[FA, Callable[[A], FB]], FB]

# Thunk = zero-arg callable producing a value on demand
type Thunk[T] = Callable[[], T]

__all__ = (
    "Embellished",
    "Unit",
    "Bind",
    "Thunk",
)
