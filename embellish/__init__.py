"""
Composition of embellished functions.

An embellished function returns its result wrapped with extra structure:
a log (Writer) or possible absence (Option). This package composes such
functions as if they were plain ones (Kleisli composition), so callers
never unpack and repack the wrapper by hand.

Architecture:
- Embellishment typeclass (unit + bind) with generic *M combinators
- Sugar for Writer (*_writer suffix) and Option (*_option suffix)
- Kleisli fluent arrows (`>>`)
- lift namespace for embellishing plain functions and values
"""

# Core types
from ._types import Bind, Embellished, Thunk, Unit

# Monoids
from .monoid import LIST, LOG, STRING, TUPLE, Monoid

# Writer
from . import writer
from .writer import Log, Writer, tell

# Option
from . import option
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

# Kleisli composition
from . import kleisli
from .kleisli import (
    OPTION,
    WRITER,
    Embellishment,
    Kleisli,
    # Generic
    compose_allM,
    composeM,
    identityM,
    # Writer
    compose_all_writer,
    compose_writer,
    identity_writer,
    writer_embellishment,
    # Option
    compose_all_option,
    compose_option,
    identity_option,
)

# Lift helpers
from . import lift
from .lift import guarded, logged, total, traced

# Laws
from . import laws

# Errors
from ._errors import EmptyValueError

__all__ = (
    # Types
    "Bind",
    "Embellished",
    "Thunk",
    "Unit",
    # Monoids
    "Monoid",
    "STRING",
    "LIST",
    "TUPLE",
    "LOG",
    # Writer
    "writer",
    "Writer",
    "Log",
    "tell",
    # Option
    "option",
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
    # Kleisli - typeclass
    "kleisli",
    "Embellishment",
    "writer_embellishment",
    "OPTION",
    "WRITER",
    # Kleisli - generic
    "identityM",
    "composeM",
    "compose_allM",
    # Kleisli - Writer
    "identity_writer",
    "compose_writer",
    "compose_all_writer",
    # Kleisli - Option
    "identity_option",
    "compose_option",
    "compose_all_option",
    # Kleisli - fluent
    "Kleisli",
    # Lift
    "lift",
    "logged",
    "traced",
    "guarded",
    "total",
    # Laws
    "laws",
    # Errors
    "EmptyValueError",
)
