"""
Eval instructions
=================

Nodes of the evaluation tree interpreted by `Eval.run`.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

if typing.TYPE_CHECKING:
    from .eval import Eval


@dataclass(frozen=True, slots=True)
class Now:
    value: typing.Any


@dataclass(frozen=True, slots=True)
class FlatMap:
    source: Eval[typing.Any]
    f: Callable[[typing.Any], Eval[typing.Any]]


class Once:
    """
    Lazy memoized thunk.

    One-way transition: pending (thunk set) -> done (memo set, thunk dropped).
    """

    __slots__ = ("_thunk", "_memo", "done")

    def __init__(self, thunk: Callable[[], typing.Any]) -> None:
        self._thunk: Callable[[], typing.Any] | None = thunk
        self._memo: typing.Any = None
        self.done = False

    def force(self) -> typing.Any:
        if not self.done:
            thunk = typing.cast(Callable[[], typing.Any], self._thunk)
            self._memo = thunk()
            self._thunk = None
            self.done = True
        return self._memo


@dataclass(frozen=True, slots=True)
class Always:
    thunk: Callable[[], typing.Any]


type Instr = Now | FlatMap | Once | Always

__all__ = ("Instr", "Now", "FlatMap", "Once", "Always")
