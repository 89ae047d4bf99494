"""String builders."""

from __future__ import annotations

from ._base import ClosingBuilder


class StrAppendBuilder(ClosingBuilder[str, str]):
    __slots__ = ("_parts",)

    def __init__(self, initial: str = "") -> None:
        super().__init__()
        self._parts: list[str] = [initial]

    def _add(self, item: str, /) -> None:
        self._parts.append(item)

    def _finish(self) -> str:
        return "".join(self._parts)


class StrPrependBuilder(ClosingBuilder[str, str]):
    """Last added piece comes first."""

    __slots__ = ("_parts",)

    def __init__(self, initial: str = "") -> None:
        super().__init__()
        self._parts: list[str] = [initial]

    def _add(self, item: str, /) -> None:
        self._parts.append(item)

    def _finish(self) -> str:
        return "".join(reversed(self._parts))


__all__ = ("StrAppendBuilder", "StrPrependBuilder")
