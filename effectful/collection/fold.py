"""
Fold combinators
================

Effectful reduce: thread an accumulator through the elements,
stop at the first terminal value.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable

from loguru import logger

from .._helpers import aiter_of, resolve
from .._types import AnyIterable, Go
from ..go import Tally, go
from ..kinds import Kind


# ============================================================================
# Sync
# ============================================================================


def reduce[A, B, M](
    items: Iterable[A],
    step: Callable[[B, A], M],
    initial: B,
    *,
    kind: Kind[M],
) -> M:
    """
    Effectful left fold.

    Example:
        def add(acc: int, x: int) -> Result[int, str]:
            return Ok(acc + x) if x >= 0 else Error(f"negative: {x}")

        reduce([1, 2, 3], add, 0, kind=RESULT)   # Ok(6)
        reduce([1, -2, 3], add, 0, kind=RESULT)  # Error("negative: -2")
    """

    def body() -> Go[M, B]:
        acc = initial
        for item in items:
            acc = yield step(acc, item)
        return acc

    return go(body(), kind=kind)


# ============================================================================
# Async
# ============================================================================


async def reduce_async[A, B, M](
    items: AnyIterable[A],
    step: Callable[[B, A], M | Awaitable[M]],
    initial: B,
    *,
    kind: Kind[M],
) -> M:
    """Effectful left fold, each step awaited before the next one starts."""
    tally = Tally(kind)
    acc = initial
    async for item in aiter_of(items):
        value = tally.absorb(await resolve(step(acc, item)))
        if kind.is_terminal(value):
            logger.debug("reduce[{}]: halted on terminal value {!r}", kind.name, value)
            return tally.halted(value)
        acc = kind.payload_of(value)
    return tally.completed(acc)


__all__ = ("reduce", "reduce_async")
