"""
Parallel lift
=============

Lift a plain (sync or async) function over awaitable effect values.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine
from functools import wraps

from .._helpers import resolve
from ..kinds import Kind
from .sequence import sequence_par


def lift_par[T, M](
    f: Callable[..., T | Awaitable[T]],
    *,
    kind: Kind[M],
) -> Callable[..., Coroutine[typing.Any, typing.Any, M]]:
    """
    Function of payloads -> async function of (awaitable) effect values.

    All arguments are awaited concurrently; `f` runs only when every
    argument is productive. Residue of the arguments is kept.

    Example:
        render = lift_par(render_page, kind=RESULT)
        await render(api.fetch_user(1), api.fetch_posts(1))
    """

    @wraps(f)
    async def lifted(*values: M | Awaitable[M]) -> M:
        args = await sequence_par(values, kind=kind)
        if kind.is_terminal(args):
            return args
        out = await resolve(f(*kind.payload_of(args)))
        return kind.attach(kind.make_productive(out), kind.residue_of(args))

    return lifted


__all__ = ("lift_par",)
