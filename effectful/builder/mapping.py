"""Mapping builders."""

from __future__ import annotations

from collections.abc import Mapping

from ._base import ClosingBuilder


class DictEntryBuilder[K, V](ClosingBuilder[tuple[K, V], dict[K, V]]):
    """Accepts `(key, value)`; later keys overwrite earlier ones."""

    __slots__ = ("_entries",)

    def __init__(self, initial: Mapping[K, V] | None = None) -> None:
        super().__init__()
        self._entries: dict[K, V] = dict(initial or {})

    def _add(self, item: tuple[K, V], /) -> None:
        key, value = item
        self._entries[key] = value

    def _finish(self) -> dict[K, V]:
        return self._entries


class DictMergeBuilder[K, V](ClosingBuilder[Mapping[K, V], dict[K, V]]):
    """Each added item is a mapping merged into the result."""

    __slots__ = ("_entries",)

    def __init__(self, initial: Mapping[K, V] | None = None) -> None:
        super().__init__()
        self._entries: dict[K, V] = dict(initial or {})

    def _add(self, item: Mapping[K, V], /) -> None:
        self._entries.update(item)

    def _finish(self) -> dict[K, V]:
        return self._entries


__all__ = ("DictEntryBuilder", "DictMergeBuilder")
