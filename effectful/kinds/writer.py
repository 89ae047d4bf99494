"""WRITER kind: WriterResult, logs are merged across every observed value."""

from __future__ import annotations

import typing

from kungfu import Error, Ok

from ..writer import Log, WriterResult
from ._kind import Kind

type AnyWriter = WriterResult[typing.Any, typing.Any, typing.Any]


def _is_error(wr: AnyWriter) -> bool:
    return wr.is_error


def _payload(wr: AnyWriter) -> typing.Any:
    match wr.result:
        case Ok(v):
            return v
        case Error(e):
            return e


def _log_of(wr: AnyWriter) -> Log[typing.Any] | None:
    # empty log contributes nothing
    return wr.log or None


def _with_log(wr: AnyWriter, log: Log[typing.Any]) -> AnyWriter:
    return wr.with_log(log)


def _terminal(err: typing.Any) -> AnyWriter:
    return WriterResult(Error(err))


def _productive(value: typing.Any) -> AnyWriter:
    return WriterResult(Ok(value))


WRITER: Kind[AnyWriter] = Kind(
    name="writer",
    is_terminal=_is_error,
    payload_of=_payload,
    make_terminal=_terminal,
    make_productive=_productive,
    combine=Log.combine,
    residue_of=_log_of,
    with_residue=_with_log,
    policy="accumulate",
)

__all__ = ("WRITER",)
