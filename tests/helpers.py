"""Helpers for inspecting kungfu values in assertions."""

from __future__ import annotations

import asyncio
import typing

import pytest
from kungfu import Error, Ok, Option, Result, Some


def ok_value(r: Result[typing.Any, typing.Any]) -> typing.Any:
    match r:
        case Ok(v):
            return v
        case _:
            pytest.fail(f"expected Ok, got {r!r}")


def error_value(r: Result[typing.Any, typing.Any]) -> typing.Any:
    match r:
        case Error(e):
            return e
        case _:
            pytest.fail(f"expected Error, got {r!r}")


def some_value(o: Option[typing.Any]) -> typing.Any:
    match o:
        case Some(v):
            return v
        case _:
            pytest.fail(f"expected Some, got {o!r}")


def is_nothing(o: Option[typing.Any]) -> bool:
    return not isinstance(o, Some)


async def delayed[T](value: T, seconds: float, trace: list[str] | None = None, tag: str = "") -> T:
    """Return `value` after `seconds`, recording `tag` when done."""
    await asyncio.sleep(seconds)
    if trace is not None:
        trace.append(tag)
    return value


async def explode(seconds: float, message: str = "boom") -> typing.NoReturn:
    await asyncio.sleep(seconds)
    raise RuntimeError(message)


async def count_ticks(ticks: list[int]) -> None:
    """Record one tick per event-loop turn until cancelled."""
    while True:
        ticks.append(1)
        await asyncio.sleep(0)
