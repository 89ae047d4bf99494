"""
Fold builders
=============

FoldBuilder: combine every item into a seed.
NoOpBuilder: discard everything (for_each traversals).
"""

from __future__ import annotations

import copy
import typing

from .._helpers import semigroup_combine
from .._types import Combine
from ._base import ClosingBuilder


class FoldBuilder[T](ClosingBuilder[T, T]):
    """
    Seeded associative fold.

    Example:
        b = FoldBuilder(0, lambda a, b: a + b)
        b.add(1); b.add(2)
        b.finish()  # 3
    """

    __slots__ = ("_acc", "_combine")

    def __init__(self, initial: T, combine: Combine[T] = semigroup_combine) -> None:
        super().__init__()
        self._acc: T = copy.copy(initial)
        self._combine = combine

    def _add(self, item: T, /) -> None:
        self._acc = self._combine(self._acc, item)

    def _finish(self) -> T:
        return self._acc


class NoOpBuilder(ClosingBuilder[typing.Any, None]):
    __slots__ = ()

    def _add(self, item: typing.Any, /) -> None:
        _ = item

    def _finish(self) -> None:
        return None


__all__ = ("FoldBuilder", "NoOpBuilder")
