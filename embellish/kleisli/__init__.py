"""
Kleisli composition of embellished functions.

Architecture:
- Embellishment[F] - typeclass with unit + bind
- Generic combinators (*M functions) work with any Embellishment
- Sugar for Writer (*_writer) and Option (*_option)
- Kleisli - fluent wrapper with `>>`
"""

from .compose import (
    compose_all_option,
    compose_all_writer,
    compose_allM,
    compose_option,
    compose_writer,
    composeM,
    identity_option,
    identity_writer,
    identityM,
)
from .embellishment import OPTION, WRITER, Embellishment, writer_embellishment
from .fluent import Kleisli

__all__ = (
    # Typeclass
    "Embellishment",
    "writer_embellishment",
    "OPTION",
    "WRITER",
    # Generic
    "identityM",
    "composeM",
    "compose_allM",
    # Writer
    "identity_writer",
    "compose_writer",
    "compose_all_writer",
    # Option
    "identity_option",
    "compose_option",
    "compose_all_option",
    # Fluent
    "Kleisli",
)
