"""
Result kinds
============

RESULT: disjoint failure, the first Error wins.
validation(): accumulating failure, every Error is combined.

Both run over plain kungfu `Result`; they differ only in policy.
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .._helpers import semigroup_combine
from .._types import Combine
from ._kind import Kind


def _is_error(value: Result[typing.Any, typing.Any]) -> bool:
    return isinstance(value, Error)


def _payload(value: Result[typing.Any, typing.Any]) -> typing.Any:
    match value:
        case Ok(v):
            return v
        case Error(e):
            return e


def _error_of(value: Result[typing.Any, typing.Any]) -> typing.Any:
    match value:
        case Error(e):
            return e
        case _:
            return None


def _replace_error(
    value: Result[typing.Any, typing.Any], errors: typing.Any
) -> Result[typing.Any, typing.Any]:
    match value:
        case Error(_):
            return Error(errors)
        case _:
            return value


RESULT: Kind[Result[typing.Any, typing.Any]] = Kind(
    name="result",
    is_terminal=_is_error,
    payload_of=_payload,
    make_terminal=Error,
    make_productive=Ok,
)


def validation(
    combine: Combine[typing.Any] = semigroup_combine,
) -> Kind[Result[typing.Any, typing.Any]]:
    """
    Accumulating kind over Result.

    Errors must form a semigroup under `combine` (str, list, Log, ...).

    Only the concurrent aggregators (`traverse_par`, `sequence_par`,
    `for_each_par`, ...) collect every error: they wait for all
    settlements and combine the errors in settlement order.

    The sequential ones (`go`, `traverse`, `sequence`, `reduce` and
    their `_async` forms) stop at the first Error, so later elements
    are never run and their errors are not collected:

        sequence([Ok(1), Error("a"), Error("b")], kind=VALIDATION)             # Error("a")
        await sequence_par([Ok(1), Error("a"), Error("b")], kind=VALIDATION)   # Error("ab")
    """
    return Kind(
        name="validation",
        is_terminal=_is_error,
        payload_of=_payload,
        make_terminal=Error,
        make_productive=Ok,
        combine=combine,
        residue_of=_error_of,
        with_residue=_replace_error,
        policy="accumulate",
    )


VALIDATION = validation()

__all__ = ("RESULT", "VALIDATION", "validation")
