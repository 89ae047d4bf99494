"""
Core type definitions for effectful.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, Awaitable, Callable, Generator, Iterable

# ============================================================================
# Type aliases
# ============================================================================

# Step = function that turns an input item into an effect value
type Step[A, M] = Callable[[A], M]

# AsyncStep = step that may also return an awaitable of the effect value
type AsyncStep[A, M] = Callable[[A], M | Awaitable[M]]

# IndexedStep = step that also receives the element position (`indexed=True`)
type IndexedStep[A, M] = Callable[[A, int], M]

# Go = generator body driven by the coroutine driver
# NOTE: yields effect values, receives their payloads, returns the final payload.
type Go[M, R] = Generator[M, typing.Any, R]

# AsyncGo = generator body that may yield awaitables of effect values
type AsyncGo[M, R] = Generator[M | Awaitable[M], typing.Any, R]

# Thunk = zero-arg deferred computation
type Thunk[T] = Callable[[], T]

# Combine = associative binary operation
type Combine[T] = Callable[[T, T], T]

# Items accepted by the sequential async aggregators
type AnyIterable[A] = Iterable[A] | AsyncIterable[A]

# Policy = how concurrent aggregation folds its settlements
type Policy = typing.Literal["halt", "accumulate"]

# ============================================================================
# Protocols
# ============================================================================


@typing.runtime_checkable
class Semigroup(typing.Protocol):
    """Value with an associative `combine`."""

    def combine(self, other: typing.Self, /) -> typing.Self: ...


__all__ = (
    # Type aliases
    "Step",
    "AsyncStep",
    "IndexedStep",
    "Go",
    "AsyncGo",
    "Thunk",
    "Combine",
    "AnyIterable",
    "Policy",
    # Protocols
    "Semigroup",
)
