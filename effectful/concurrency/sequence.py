"""
Parallel sequence
=================

Await already-started (or lazy) effect values concurrently.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Iterable, Mapping

from .._helpers import identity
from ..builder import Builder, DictEntryBuilder
from ..kinds import Kind
from ._settle import map_eventually, traverse_into_par
from .traverse import traverse_par


async def sequence_into_par[M, R](
    values: Iterable[M | Awaitable[M]],
    builder: Builder[typing.Any, R],
    *,
    kind: Kind[M],
) -> M:
    return await traverse_into_par(values, identity, builder, kind=kind)


async def sequence_par[M](values: Iterable[M | Awaitable[M]], *, kind: Kind[M]) -> M:
    """
    Many awaitables of effect values -> one effect value of a list.

    Input order is kept in the payload; failures are seen in settlement order.
    """
    return await traverse_par(values, identity, kind=kind)


async def sequence_props_par[K, M](
    values: Mapping[K, M | Awaitable[M]],
    *,
    kind: Kind[M],
) -> M:
    """
    Mapping of awaitables -> one effect value of a dict with the same keys.

    Example:
        await sequence_props_par(
            {"user": api.fetch_user(1), "posts": api.fetch_posts(1)},
            kind=RESULT,
        )  # Ok({"user": ..., "posts": ...})
    """

    def entry(pair: tuple[K, M | Awaitable[M]]) -> M:
        key, value = pair
        return map_eventually(value, lambda v: kind.map(v, lambda p: (key, p)))  # type: ignore[return-value]

    return await traverse_into_par(values.items(), entry, DictEntryBuilder(), kind=kind)


__all__ = ("sequence_into_par", "sequence_par", "sequence_props_par")
