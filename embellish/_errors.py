from __future__ import annotations

class EmptyValueError(Exception):
    """Tried to take the value out of an Absent option."""

    context: str | None

    def __init__(self, context: str | None = None) -> None:
        self.context = context
        if context is None:
            super().__init__("Cannot unwrap an absent value")
        else:
            super().__init__(f"Cannot unwrap an absent value: {context}")

__all__ = ("EmptyValueError",)
