"""
Parallel traverse
=================

Concurrent traverse: all steps in flight at once.

With `indexed=True` the step is called as `step(item, idx)`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Iterable

from .._helpers import positional
from .._types import AsyncStep, IndexedStep
from ..builder import ListIndexBuilder, NoOpBuilder
from ..kinds import Kind
from ._settle import map_eventually, traverse_into_par


async def traverse_par[A, M](
    items: Iterable[A],
    step: AsyncStep[A, M] | IndexedStep[A, M | Awaitable[M]],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    """
    Concurrent monadic map. Payloads come back in input order.

    Example:
        async def fetch(user_id: int) -> Result[User, ApiError]: ...

        await traverse_par([1, 2, 3], fetch, kind=RESULT)  # Ok([u1, u2, u3])
    """
    call = positional(step, indexed)

    def at(item: A, idx: int) -> M | Awaitable[M]:
        return map_eventually(call(item, idx), lambda value: kind.map(value, lambda p: (idx, p)))

    return await traverse_into_par(items, at, ListIndexBuilder(), kind=kind, indexed=True)


async def for_each_par[A, M](
    items: Iterable[A],
    step: AsyncStep[A, M] | IndexedStep[A, M | Awaitable[M]],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    """Concurrent run for effects only; productive payload is None."""
    return await traverse_into_par(items, step, NoOpBuilder(), kind=kind, indexed=indexed)


__all__ = ("traverse_par", "for_each_par")
