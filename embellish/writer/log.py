"""
Log - list accumulator for Writer
=================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Sequence log for the Writer embellishment.

    A list with monoidal operations:
    - empty: Log()
    - combine: concatenation into a new Log

    combine and tell never touch the receiver, so a Log handed out by one
    embellished function stays valid after it was merged into a longer trace.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Append single item. Same as self.combine(Log.of(item))."""
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def __repr__(self) -> str:
        return f"Log({list.__repr__(self)})"


__all__ = ("Log",)
