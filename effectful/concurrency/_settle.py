"""
Settlement engine
=================

Fan out every step, fold settlements into a builder as they arrive.

All step calls are issued before anything is awaited. Each result is
wrapped in a future (plain values become already-resolved futures) and
gets a done-callback; the callbacks fold into one outcome future.

Policies (taken from the kind):
- halt: first terminal value resolves the outcome immediately
- accumulate: every settlement merges its residue (settlement order),
  payloads reach the builder only while no terminal value was seen,
  the outcome resolves when the countdown hits zero

Hard failures (exceptions, cancellation) reject the outcome the first
time they happen. Tasks still running after the outcome is resolved
are not cancelled; they stay referenced until done and late
exceptions are logged.
"""

from __future__ import annotations

import asyncio
import inspect
import typing
from collections.abc import Awaitable, Callable, Iterable

from loguru import logger

from .._helpers import positional, unlazy
from .._types import AsyncStep, IndexedStep
from ..builder import Builder
from ..go import Tally
from ..kinds import Kind

# strong refs for tasks that may outlive the aggregation that launched them
_in_flight: set[asyncio.Future[typing.Any]] = set()


def _launch[M](value: M | Awaitable[M], loop: asyncio.AbstractEventLoop) -> asyncio.Future[M]:
    value = unlazy(value)
    if inspect.isawaitable(value):
        fut = asyncio.ensure_future(value)
    else:
        fut = loop.create_future()
        fut.set_result(value)
    _in_flight.add(fut)
    fut.add_done_callback(_in_flight.discard)
    return fut


def _reap(fut: asyncio.Future[typing.Any]) -> None:
    """Consume the outcome of a future nobody is waiting for anymore."""
    if fut.cancelled():
        return
    exc = fut.exception()
    if exc is not None:
        logger.opt(exception=exc).warning(
            "Task failed after its aggregation had already resolved: {!r}", exc
        )


def map_eventually[M](
    value: M | Awaitable[M],
    f: Callable[[M], M],
) -> M | Awaitable[M]:
    """Apply `f` now for plain values, after awaiting for awaitables."""
    value = unlazy(value)
    if not inspect.isawaitable(value):
        return f(typing.cast(M, value))

    async def later() -> M:
        return f(await value)

    return later()


async def traverse_into_par[A, M, R](
    items: Iterable[A],
    step: AsyncStep[A, M] | IndexedStep[A, M | Awaitable[M]],
    builder: Builder[typing.Any, R],
    *,
    kind: Kind[M],
    indexed: bool = False,
) -> M:
    """
    Concurrent traverse into `builder`.

    Payloads are added in settlement order; use an index-assigning
    builder (see `traverse_par`) to get input order back. With
    `indexed=True` the step is called as `step(item, idx)`.
    """
    call = positional(step, indexed)
    loop = asyncio.get_running_loop()
    tally = Tally(kind)

    tasks: list[asyncio.Future[M]] = []
    try:
        for idx, item in enumerate(items):
            tasks.append(_launch(call(item, idx), loop))
    except BaseException:
        for task in tasks:
            task.add_done_callback(_reap)
        raise

    if not tasks:
        return tally.completed(builder.finish())

    outcome: asyncio.Future[M] = loop.create_future()
    remaining = len(tasks)
    first_failure: M | None = None
    failed = False

    def settle(task: asyncio.Future[M]) -> None:
        nonlocal remaining, first_failure, failed
        if outcome.done():
            _reap(task)
            return
        if task.cancelled():
            outcome.cancel()
            return
        exc = task.exception()
        if exc is not None:
            outcome.set_exception(exc)
            return

        value = task.result()
        try:
            tally.absorb(value)
            terminal = kind.is_terminal(value)
            if terminal and not kind.accumulates:
                logger.debug(
                    "traverse_par[{}]: halted on terminal value {!r}, {} task(s) still in flight",
                    kind.name,
                    value,
                    sum(not t.done() for t in tasks),
                )
                outcome.set_result(tally.halted(value))
                return
            if terminal and not failed:
                failed = True
                first_failure = value
            elif not failed:
                builder.add(kind.payload_of(value))

            remaining -= 1
            if remaining == 0:
                if failed:
                    outcome.set_result(tally.halted(typing.cast(M, first_failure)))
                else:
                    outcome.set_result(tally.completed(builder.finish()))
        except Exception as error:
            outcome.set_exception(error)

    for task in tasks:
        task.add_done_callback(settle)

    return await outcome


__all__ = ("traverse_into_par", "map_eventually")
