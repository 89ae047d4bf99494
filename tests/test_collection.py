"""Tests for sequential aggregation."""

import asyncio

import pytest
from kungfu import Error, Nothing, Ok, Result, Some

from effectful import (
    OPTION,
    RESULT,
    VALIDATION,
    WRITER,
    FoldBuilder,
    StrAppendBuilder,
    WriterResult,
    for_each,
    for_each_async,
    lift,
    reduce,
    reduce_async,
    sequence,
    sequence_async,
    sequence_into,
    sequence_props,
    traverse,
    traverse_async,
    traverse_into,
    traverse_into_async,
)
from tests.helpers import count_ticks, delayed, error_value, is_nothing, ok_value, some_value


def parse(raw: str) -> Result[int, str]:
    return Ok(int(raw)) if raw.isdigit() else Error(f"not a number: {raw}")


class TestReduce:
    def test_reduce_success(self):
        def add(acc: int, x: int) -> Result[int, str]:
            return Ok(acc + x)

        assert ok_value(reduce([1, 2, 3], add, 0, kind=RESULT)) == 6

    def test_reduce_stops_at_first_terminal(self):
        seen = []

        def add(acc: int, x: int) -> Result[int, str]:
            seen.append(x)
            return Ok(acc + x) if x >= 0 else Error(f"negative: {x}")

        assert error_value(reduce([1, -2, 3], add, 0, kind=RESULT)) == "negative: -2"
        assert seen == [1, -2]

    def test_reduce_empty_returns_initial(self):
        assert some_value(reduce([], lambda acc, x: Some(acc), "seed", kind=OPTION)) == "seed"


class TestTraverse:
    def test_traverse_preserves_order_and_length(self):
        items = ["3", "1", "2"]
        result = ok_value(traverse(items, parse, kind=RESULT))
        assert result == [3, 1, 2]
        assert len(result) == len(items)

    def test_traverse_short_circuits(self):
        calls = []

        def step(raw: str) -> Result[int, str]:
            calls.append(raw)
            return parse(raw)

        assert error_value(traverse(["1", "x", "2"], step, kind=RESULT)) == "not a number: x"
        assert calls == ["1", "x"]

    def test_traverse_pulls_lazily(self):
        produced = []

        def numbers():
            for raw in ["1", "y", "2"]:
                produced.append(raw)
                yield raw

        traverse(numbers(), parse, kind=RESULT)
        assert produced == ["1", "y"]

    def test_traverse_into_custom_builder(self):
        result = traverse_into(["a", "b"], lambda s: Some(s.upper()), StrAppendBuilder(), kind=OPTION)
        assert some_value(result) == "AB"

    def test_for_each(self):
        seen = []

        def record(x: int) -> Result[int, str]:
            seen.append(x)
            return Ok(x)

        assert ok_value(for_each([1, 2], record, kind=RESULT)) is None
        assert seen == [1, 2]

    def test_indexed_step_gets_position(self):
        result = traverse(["a", "b", "c"], lambda s, i: Ok(f"{i}:{s}"), kind=RESULT, indexed=True)
        assert ok_value(result) == ["0:a", "1:b", "2:c"]

    def test_indexed_for_each(self):
        seen = []

        def step(s: str, i: int) -> Result[None, str]:
            seen.append((i, s))
            return Ok(None) if i < 1 else Error(f"stop at {i}")

        assert error_value(for_each(["x", "y", "z"], step, kind=RESULT, indexed=True)) == "stop at 1"
        assert seen == [(0, "x"), (1, "y")]

    def test_writer_traverse_merges_logs(self):
        def step(x: int) -> WriterResult[int, str, str]:
            return WriterResult.ok(x * 2, f"double {x}")

        assert traverse([1, 2], step, kind=WRITER) == WriterResult.ok([2, 4], "double 1", "double 2")


class TestSequence:
    def test_sequence(self):
        assert ok_value(sequence([Ok(1), Ok(2)], kind=RESULT)) == [1, 2]
        assert is_nothing(sequence([Some(1), Nothing()], kind=OPTION))

    def test_sequence_into_fold(self):
        result = sequence_into([Ok(1), Ok(2), Ok(3)], FoldBuilder(0, lambda a, b: a + b), kind=RESULT)
        assert ok_value(result) == 6

    def test_sequence_props(self):
        assert ok_value(sequence_props({"a": Ok(1), "b": Ok(2)}, kind=RESULT)) == {"a": 1, "b": 2}
        assert error_value(sequence_props({"a": Ok(1), "b": Error("e")}, kind=RESULT)) == "e"

    def test_validation_sequential_stops_at_first(self):
        assert error_value(sequence([Ok(1), Error("a"), Error("b")], kind=VALIDATION)) == "a"


class TestLift:
    def test_lift_option(self):
        add = lift(lambda a, b: a + b, kind=OPTION)
        assert some_value(add(Some(1), Some(2))) == 3
        assert is_nothing(add(Some(1), Nothing()))

    def test_lift_writer_keeps_logs(self):
        pair = lift(lambda a, b: (a, b), kind=WRITER)
        assert pair(WriterResult.ok(1, "x"), WriterResult.ok(2, "y")) == WriterResult.ok((1, 2), "x", "y")


class TestAsync:
    @pytest.mark.asyncio
    async def test_reduce_async(self):
        async def add(acc: int, x: int) -> Result[int, str]:
            return await delayed(Ok(acc + x), 0.0)

        assert ok_value(await reduce_async([1, 2, 3], add, 0, kind=RESULT)) == 6

    @pytest.mark.asyncio
    async def test_traverse_async_is_sequential(self):
        trace = []

        def step(x: int):
            return delayed(Ok(x), 0.02 if x == 1 else 0.0, trace, f"done {x}")

        assert ok_value(await traverse_async([1, 2], step, kind=RESULT)) == [1, 2]
        assert trace == ["done 1", "done 2"]

    @pytest.mark.asyncio
    async def test_traverse_async_over_async_iterable(self):
        async def numbers():
            for x in [1, 2, 3]:
                yield x

        result = await traverse_async(numbers(), lambda x: Some(x * 10), kind=OPTION)
        assert some_value(result) == [10, 20, 30]

    @pytest.mark.asyncio
    async def test_traverse_into_async_halts(self):
        calls = []

        async def step(x: int) -> Result[int, str]:
            calls.append(x)
            return Ok(x) if x < 2 else Error(f"too big: {x}")

        builder = FoldBuilder(0, lambda a, b: a + b)
        result = await traverse_into_async([1, 2, 3], step, builder, kind=RESULT)
        assert error_value(result) == "too big: 2"
        assert calls == [1, 2]

    @pytest.mark.asyncio
    async def test_for_each_async_writer_logs_survive_failure(self):
        def step(x: int):
            if x == 2:
                return delayed(WriterResult.error("bad", "two"), 0.0)
            return WriterResult.ok(x, f"saw {x}")

        result = await for_each_async([1, 2, 3], step, kind=WRITER)
        assert result == WriterResult.error("bad", "saw 1", "two")

    @pytest.mark.asyncio
    async def test_sequence_async(self):
        values = [delayed(Ok(1), 0.0), Ok(2)]
        assert ok_value(await sequence_async(values, kind=RESULT)) == [1, 2]

    @pytest.mark.asyncio
    async def test_traverse_async_indexed_over_async_iterable(self):
        async def letters():
            for s in "ab":
                yield s

        async def step(s: str, i: int) -> Result[str, str]:
            return Ok(s * (i + 1))

        result = await traverse_async(letters(), step, kind=RESULT, indexed=True)
        assert ok_value(result) == ["a", "bb"]

    @pytest.mark.asyncio
    async def test_plain_steps_yield_to_event_loop(self):
        ticks: list[int] = []
        ticker = asyncio.create_task(count_ticks(ticks))

        result = await traverse_async(range(100), lambda x: Ok(x), kind=RESULT)
        folded = await reduce_async(range(100), lambda acc, x: Ok(acc + x), 0, kind=RESULT)
        ticker.cancel()
        await asyncio.gather(ticker, return_exceptions=True)

        assert ok_value(result) == list(range(100))
        assert ok_value(folded) == sum(range(100))
        assert len(ticks) >= 100
