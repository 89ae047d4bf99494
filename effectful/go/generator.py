"""
Go
==

Do-notation over any kind via plain generators.

The body yields effect values and receives their payloads back;
its return value becomes the productive payload of the result.
A terminal yield stops the body: the generator is closed (pending
`finally` blocks run) and the terminal value is returned.

Example:
    def body():
        user = yield fetch_user(42)        # Result[User, E]
        posts = yield fetch_posts(user)    # Result[list[Post], E]
        return (user, posts)

    go(body(), kind=RESULT)  # Ok((user, posts)) | Error(e)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import wraps

from loguru import logger

from .._types import Go
from ..kinds import Kind
from ._state import Tally


def go[M](gen: Go[M, typing.Any], *, kind: Kind[M]) -> M:
    """
    Drive `gen` to completion or to its first terminal yield.

    Exceptions raised by the body propagate unchanged.
    """
    tally = Tally(kind)
    try:
        value = next(gen)
    except StopIteration as stop:
        return tally.completed(stop.value)

    while True:
        tally.absorb(value)
        if kind.is_terminal(value):
            gen.close()
            logger.debug("go[{}]: halted on terminal value {!r}", kind.name, value)
            return tally.halted(value)
        try:
            value = gen.send(kind.payload_of(value))
        except StopIteration as stop:
            return tally.completed(stop.value)


def go_fn[M](f: Callable[[], Go[M, typing.Any]], *, kind: Kind[M]) -> M:
    """Call zero-arg generator function `f` and drive the fresh generator."""
    return go(f(), kind=kind)


def wrap_go_fn[M, **P](
    *, kind: Kind[M]
) -> Callable[[Callable[P, Go[M, typing.Any]]], Callable[P, M]]:
    """
    Decorator: generator function -> function returning an effect value.

    Example:
        @wrap_go_fn(kind=OPTION)
        def lookup(key: str):
            raw = yield find(key)
            return int(raw)

        lookup("a")  # Some(1) | Nothing()
    """

    def decorator(f: Callable[P, Go[M, typing.Any]]) -> Callable[P, M]:
        @wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> M:
            return go(f(*args, **kwargs), kind=kind)

        return wrapper

    return decorator


__all__ = ("go", "go_fn", "wrap_go_fn")
