"""
Builder protocol
================

Mutable accumulator used by aggregation: items are added one by one,
`finish()` produces the final shape. A builder belongs to exactly one
aggregation call.
"""

from __future__ import annotations

import typing

from .._errors import BuilderFinishedError


@typing.runtime_checkable
class Builder[T, R](typing.Protocol):
    """Anything with `add(item)` and `finish()`."""

    def add(self, item: T, /) -> None: ...

    def finish(self) -> R: ...


class ClosingBuilder[T, R]:
    """
    Base for concrete builders.

    Subclasses implement `_add` and `_finish`; this class refuses
    items after `finish()` was called. `finish()` itself may be called
    again and returns the same result.
    """

    __slots__ = ("_finished",)

    def __init__(self) -> None:
        self._finished = False

    def add(self, item: T, /) -> None:
        if self._finished:
            raise BuilderFinishedError(type(self).__name__)
        self._add(item)

    def finish(self) -> R:
        self._finished = True
        return self._finish()

    def _add(self, item: T, /) -> None:
        raise NotImplementedError

    def _finish(self) -> R:
        raise NotImplementedError


__all__ = ("Builder", "ClosingBuilder")
