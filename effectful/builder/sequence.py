"""
Sequence builders
=================

Builders producing lists.
"""

from __future__ import annotations

from collections.abc import Iterable

from ._base import ClosingBuilder


class ListAppendBuilder[T](ClosingBuilder[T, list[T]]):
    """Append in call order."""

    __slots__ = ("_items",)

    def __init__(self, initial: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: list[T] = list(initial)

    def _add(self, item: T, /) -> None:
        self._items.append(item)

    def _finish(self) -> list[T]:
        return self._items


class ListPrependBuilder[T](ClosingBuilder[T, list[T]]):
    """Prepend: the last added item comes first."""

    __slots__ = ("_items",)

    def __init__(self, initial: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: list[T] = list(initial)

    def _add(self, item: T, /) -> None:
        self._items.insert(0, item)

    def _finish(self) -> list[T]:
        return self._items


class ListIndexBuilder[T](ClosingBuilder[tuple[int, T], list[T]]):
    """
    Positional writes: accepts `(index, item)`.

    Concurrent traversal settles out of order; writing by input index
    restores input order. Gaps are filled with None.
    """

    __slots__ = ("_items",)

    def __init__(self, initial: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: list[T | None] = list(initial)

    def _add(self, item: tuple[int, T], /) -> None:
        idx, value = item
        if idx < 0:
            raise IndexError(f"ListIndexBuilder: negative index {idx}")
        if idx >= len(self._items):
            self._items.extend([None] * (idx + 1 - len(self._items)))
        self._items[idx] = value

    def _finish(self) -> list[T]:
        return self._items  # type: ignore[return-value]


class ListConcatBuilder[T](ClosingBuilder[Iterable[T], list[T]]):
    """Each added item is an iterable; elements are concatenated."""

    __slots__ = ("_items",)

    def __init__(self, initial: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: list[T] = list(initial)

    def _add(self, item: Iterable[T], /) -> None:
        self._items.extend(item)

    def _finish(self) -> list[T]:
        return self._items


__all__ = (
    "ListAppendBuilder",
    "ListPrependBuilder",
    "ListIndexBuilder",
    "ListConcatBuilder",
)
