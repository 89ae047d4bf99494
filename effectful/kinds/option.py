"""OPTION kind: kungfu Option, halts on Nothing."""

from __future__ import annotations

import typing

from kungfu import Nothing, Option, Some

from ._kind import Kind


def _is_nothing(value: Option[typing.Any]) -> bool:
    return not isinstance(value, Some)


def _payload(value: Option[typing.Any]) -> typing.Any:
    match value:
        case Some(v):
            return v
        case _:
            return None


def _nothing(payload: typing.Any) -> Option[typing.Any]:
    _ = payload
    return Nothing()


OPTION: Kind[Option[typing.Any]] = Kind(
    name="option",
    is_terminal=_is_nothing,
    payload_of=_payload,
    make_terminal=_nothing,
    make_productive=Some,
)

__all__ = ("OPTION",)
