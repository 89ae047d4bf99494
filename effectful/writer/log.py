"""
Log - Моноидный аккумулятор для Writer
======================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Log accumulator carried by `WriterResult`.

    A list with monoid operations; every operation returns a new Log
    and leaves the receiver untouched:
    - empty: `Log()`
    - combine: concatenation

    The WRITER kind uses `combine` to merge logs across a traversal.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Concatenate two logs.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        merged: Log[A] = Log(self)
        merged.extend(other)
        return merged

    def tell(self, *items: A) -> Log[A]:
        """Append items, returning a new log."""
        merged: Log[A] = Log(self)
        merged.extend(items)
        return merged


__all__ = ("Log",)
