"""Internal helpers for effectful.

Common functions used across the driver and aggregation modules.
These are not part of the public API but can be used for writing custom kinds."""

from __future__ import annotations

import asyncio
import inspect
import typing
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable

from kungfu import LazyCoroResult

from ._types import AnyIterable, Semigroup

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Default combine for accumulating kinds
def semigroup_combine[T](x: T, y: T) -> T:
    """
    Combine two values associatively.

    Uses `x.combine(y)` when the value is a Semigroup (e.g. `Log`),
    falls back to `x + y` for str, list, tuple and numbers.

    Usage:
        semigroup_combine("a", "b")                  # "ab"
        semigroup_combine(Log.of(1), Log.of(2))      # Log([1, 2])
    """
    if isinstance(x, Semigroup):
        return typing.cast(T, x.combine(y))
    return typing.cast(T, x + y)  # type: ignore[operator]

# Awaiting helpers
def unlazy[T](value: T | Awaitable[T]) -> T | Awaitable[T]:
    """LazyCoroResult is a thunk: start it, get the coroutine."""
    if isinstance(value, LazyCoroResult):
        return typing.cast(Awaitable[T], value())
    return value

async def resolve[T](value: T | Awaitable[T]) -> T:
    """
    Await `value` if it is awaitable, otherwise return it as is.

    Plain values still pass through the event loop once, so a caller
    looping over plain values never resumes synchronously.
    """
    value = unlazy(value)
    if inspect.isawaitable(value):
        return await value
    await asyncio.sleep(0)
    return typing.cast(T, value)

# Step call shape
def positional[A, M](step: Callable[..., M], indexed: bool) -> Callable[[A, int], M]:
    """Call shape `(item, idx)` for both plain and indexed steps."""
    if indexed:
        return step
    return lambda item, _idx: step(item)

async def aiter_of[A](items: AnyIterable[A]) -> AsyncIterator[A]:
    """
    Iterate sync and async iterables uniformly.

    Sync iterables are pulled lazily, one item per step.
    """
    if isinstance(items, AsyncIterable):
        async for item in items:
            yield item
    else:
        for item in items:
            yield item

__all__ = (
    # Identity
    "identity",
    # Combine
    "semigroup_combine",
    # Awaiting
    "unlazy",
    "resolve",
    "aiter_of",
    # Steps
    "positional",
)
