"""Traverse combinators

Sequential traverse over any kind: one element at a time,
first terminal value aborts the whole traversal.

With `indexed=True` the step is called as `step(item, idx)`,
`idx` being the position of `item` in iteration order."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Iterable

from loguru import logger

from .._helpers import aiter_of, positional, resolve
from .._types import AnyIterable, AsyncStep, Go, IndexedStep, Step
from ..builder import Builder, ListAppendBuilder, NoOpBuilder
from ..go import Tally, go
from ..kinds import Kind

# Sync (driven by go)
def traverse_into[A, M, R](
    items: Iterable[A],
    step: Step[A, M] | IndexedStep[A, M],
    builder: Builder[typing.Any, R],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    """Add every productive payload to `builder`; result carries `builder.finish()`."""
    call = positional(step, indexed)

    def body() -> Go[M, R]:
        for idx, item in enumerate(items):
            builder.add((yield call(item, idx)))
        return builder.finish()

    return go(body(), kind=kind)

def traverse[A, M](
    items: Iterable[A],
    step: Step[A, M] | IndexedStep[A, M],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    """
    Monadic map: payloads collected into a list, input order.

    Example:
        traverse(["a", "b"], lambda s, i: Ok(f"{i}:{s}"), kind=RESULT, indexed=True)
        # Ok(["0:a", "1:b"])
    """
    return traverse_into(items, step, ListAppendBuilder(), kind=kind, indexed=indexed)

def for_each[A, M](
    items: Iterable[A],
    step: Step[A, M] | IndexedStep[A, M],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    """Run for effects only; productive payload is None."""
    return traverse_into(items, step, NoOpBuilder(), kind=kind, indexed=indexed)

# Async (one step awaited before the next starts)
async def traverse_into_async[A, M, R](
    items: AnyIterable[A],
    step: AsyncStep[A, M] | IndexedStep[A, M | Awaitable[M]],
    builder: Builder[typing.Any, R],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    """
    Async traverse.

    `items` may be sync or async iterable, `step` may return an effect
    value or an awaitable of one.
    """
    call = positional(step, indexed)
    tally = Tally(kind)
    idx = 0
    async for item in aiter_of(items):
        value = tally.absorb(await resolve(call(item, idx)))
        if kind.is_terminal(value):
            logger.debug("traverse[{}]: halted on terminal value {!r}", kind.name, value)
            return tally.halted(value)
        builder.add(kind.payload_of(value))
        idx += 1
    return tally.completed(builder.finish())

async def traverse_async[A, M](
    items: AnyIterable[A],
    step: AsyncStep[A, M] | IndexedStep[A, M | Awaitable[M]],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    return await traverse_into_async(items, step, ListAppendBuilder(), kind=kind, indexed=indexed)

async def for_each_async[A, M](
    items: AnyIterable[A],
    step: AsyncStep[A, M] | IndexedStep[A, M | Awaitable[M]],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    return await traverse_into_async(items, step, NoOpBuilder(), kind=kind, indexed=indexed)

__all__ = (
    "traverse_into",
    "traverse",
    "for_each",
    "traverse_into_async",
    "traverse_async",
    "for_each_async",
)
