"""Lift a plain function over effect values."""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import wraps

from ..kinds import Kind
from .sequence import sequence


def lift[T, M](f: Callable[..., T], *, kind: Kind[M]) -> Callable[..., M]:
    """
    Plain function of payloads -> function of effect values.

    Arguments are sequenced left to right; the first terminal
    argument is returned (with residue for accumulating kinds).

    Example:
        add = lift(lambda a, b: a + b, kind=OPTION)
        add(Some(1), Some(2))     # Some(3)
        add(Some(1), Nothing())   # Nothing()
    """

    @wraps(f)
    def lifted(*values: M) -> M:
        args = sequence(values, kind=kind)
        return kind.map(args, lambda payloads: f(*typing.cast(list[typing.Any], payloads)))

    return lifted


__all__ = ("lift",)
