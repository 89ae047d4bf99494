"""Set builders."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from ._base import ClosingBuilder


class SetAddBuilder[T: Hashable](ClosingBuilder[T, set[T]]):
    __slots__ = ("_items",)

    def __init__(self, initial: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: set[T] = set(initial)

    def _add(self, item: T, /) -> None:
        self._items.add(item)

    def _finish(self) -> set[T]:
        return self._items


class SetUnionBuilder[T: Hashable](ClosingBuilder[Iterable[T], set[T]]):
    __slots__ = ("_items",)

    def __init__(self, initial: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: set[T] = set(initial)

    def _add(self, item: Iterable[T], /) -> None:
        self._items.update(item)

    def _finish(self) -> set[T]:
        return self._items


__all__ = ("SetAddBuilder", "SetUnionBuilder")
