"""
Async Go
========

Same protocol as `go`, but the body may yield awaitables.

Each yielded item is either an effect value or an awaitable resolving
to one (coroutine, Task, LazyCoroResult); the driver awaits it before
looking at it. Waiting on anything else (sleep, locks) is done by
yielding an awaitable that returns an effect value.

Example:
    def body():
        user = yield api.fetch_user(42)          # coroutine -> Result
        posts = yield api.fetch_posts(user.id)
        return (user, posts)

    await go_async(body(), kind=RESULT)
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from functools import wraps

from loguru import logger

from .._helpers import resolve
from .._types import AsyncGo
from ..kinds import Kind
from ._state import Tally


async def go_async[M](gen: AsyncGo[M, typing.Any], *, kind: Kind[M]) -> M:
    """
    Drive `gen`, awaiting every yielded awaitable.

    A failing awaitable raises at the yield point inside the body;
    anything the body does not handle propagates unchanged.
    """
    tally = Tally(kind)
    try:
        pending = next(gen)
    except StopIteration as stop:
        return tally.completed(stop.value)

    while True:
        try:
            value = await resolve(pending)
        except Exception as exc:
            # raised at the yield point; the body may handle it
            try:
                pending = gen.throw(exc)
            except StopIteration as stop:
                return tally.completed(stop.value)
            continue
        except BaseException:
            gen.close()
            raise
        tally.absorb(value)
        if kind.is_terminal(value):
            gen.close()
            logger.debug("go_async[{}]: halted on terminal value {!r}", kind.name, value)
            return tally.halted(value)
        try:
            pending = gen.send(kind.payload_of(value))
        except StopIteration as stop:
            return tally.completed(stop.value)


async def go_fn_async[M](f: Callable[[], AsyncGo[M, typing.Any]], *, kind: Kind[M]) -> M:
    """Call zero-arg generator function `f` and drive the fresh generator."""
    return await go_async(f(), kind=kind)


def wrap_go_fn_async[M, **P](
    *, kind: Kind[M]
) -> Callable[
    [Callable[P, AsyncGo[M, typing.Any]]],
    Callable[P, Coroutine[typing.Any, typing.Any, M]],
]:
    """Decorator: generator function -> async function returning an effect value."""

    def decorator(
        f: Callable[P, AsyncGo[M, typing.Any]],
    ) -> Callable[P, Coroutine[typing.Any, typing.Any, M]]:
        @wraps(f)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> M:
            return await go_async(f(*args, **kwargs), kind=kind)

        return wrapper

    return decorator


__all__ = ("go_async", "go_fn_async", "wrap_go_fn_async")
