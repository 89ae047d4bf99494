"""
Sequence combinators
====================

Collect effect values that already exist: sequence = traverse(identity).
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Iterable, Mapping

from .._helpers import identity, resolve
from .._types import AnyIterable
from ..builder import Builder, DictEntryBuilder, ListAppendBuilder
from ..kinds import Kind
from .traverse import traverse_into, traverse_into_async


# ============================================================================
# Sync
# ============================================================================


def sequence_into[M, R](values: Iterable[M], builder: Builder[typing.Any, R], *, kind: Kind[M]) -> M:
    return traverse_into(values, identity, builder, kind=kind)


def sequence[M](values: Iterable[M], *, kind: Kind[M]) -> M:
    """
    Many effect values -> one effect value of a list.

    Example:
        sequence([Ok(1), Ok(2)], kind=RESULT)             # Ok([1, 2])
        sequence([Some(1), Nothing()], kind=OPTION)       # Nothing()
    """
    return sequence_into(values, ListAppendBuilder(), kind=kind)


def sequence_props[K, M](values: Mapping[K, M], *, kind: Kind[M]) -> M:
    """Mapping of effect values -> one effect value of a dict with the same keys."""

    def entry(pair: tuple[K, M]) -> M:
        key, value = pair
        return kind.map(value, lambda payload: (key, payload))

    return traverse_into(values.items(), entry, DictEntryBuilder(), kind=kind)


# ============================================================================
# Async
# ============================================================================


async def sequence_into_async[M, R](
    values: AnyIterable[M | Awaitable[M]],
    builder: Builder[typing.Any, R],
    *,
    kind: Kind[M],
) -> M:
    """Values may be effects or awaitables of effects; awaited in order."""
    return await traverse_into_async(values, resolve, builder, kind=kind)


async def sequence_async[M](values: AnyIterable[M | Awaitable[M]], *, kind: Kind[M]) -> M:
    return await sequence_into_async(values, ListAppendBuilder(), kind=kind)


__all__ = (
    "sequence_into",
    "sequence",
    "sequence_props",
    "sequence_into_async",
    "sequence_async",
)
