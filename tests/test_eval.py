"""Tests for Eval."""

from effectful import Eval, Log


def count_down(n: int) -> Eval[int]:
    if n == 0:
        return Eval.now(0)
    return Eval.defer(lambda: count_down(n - 1))


def sum_to(n: int) -> Eval[int]:
    if n == 0:
        return Eval.now(0)
    return Eval.defer(lambda: sum_to(n - 1)).map(lambda acc: acc + n)


class TestConstructors:
    def test_now(self):
        assert Eval.now(1).run() == 1

    def test_once_memoizes(self):
        calls = []

        def thunk() -> int:
            calls.append(1)
            return 42

        ev = Eval.once(thunk)
        assert calls == []
        assert ev.run() == 42
        assert ev.run() == 42
        assert len(calls) == 1

    def test_once_shared_inside_composition(self):
        calls = []

        def thunk() -> int:
            calls.append(1)
            return 7

        ev = Eval.once(thunk)
        composed = ev.zip_with(ev, lambda a, b: a + b).flat_map(lambda x: ev.map(lambda y: x + y))
        assert calls == []
        assert composed.run() == 21
        assert len(calls) == 1
        assert composed.run() == 21
        assert len(calls) == 1

    def test_always_reevaluates(self):
        calls = []

        def thunk() -> int:
            calls.append(1)
            return len(calls)

        ev = Eval.always(thunk)
        assert ev.run() == 1
        assert ev.run() == 2

    def test_defer_is_lazy(self):
        calls = []

        def build() -> Eval[str]:
            calls.append(1)
            return Eval.now("built")

        ev = Eval.defer(build)
        assert calls == []
        assert ev.run() == "built"


class TestSequencing:
    def test_map_and_flat_map(self):
        ev = Eval.now(2).map(lambda x: x * 3).flat_map(lambda x: Eval.now(x + 1))
        assert ev.run() == 7

    def test_flat(self):
        assert Eval.now(Eval.now("inner")).flat().run() == "inner"

    def test_zip_variants_run_left_to_right(self):
        order = []

        def tagged(tag: str) -> Eval[str]:
            return Eval.always(lambda: order.append(tag) or tag)

        assert tagged("a").zip_with(tagged("b"), lambda x, y: x + y).run() == "ab"
        assert tagged("c").zip_fst(tagged("d")).run() == "c"
        assert tagged("e").zip_snd(tagged("f")).run() == "f"
        assert order == ["a", "b", "c", "d", "e", "f"]

    def test_combine(self):
        assert Eval.now("x").combine(Eval.now("y")).run() == "xy"
        merged = Eval.now(Log.of(1)).combine(Eval.now(Log.of(2))).run()
        assert list(merged) == [1, 2]
        assert Eval.now(2).combine(Eval.now(5), max).run() == 5


class TestStackSafety:
    def test_deep_defer_chain(self):
        assert count_down(100_000).run() == 0

    def test_deep_map_chain(self):
        assert sum_to(100_000).run() == 100_000 * 100_001 // 2

    def test_long_left_nested_flat_map(self):
        ev = Eval.now(0)
        for _ in range(100_000):
            ev = ev.flat_map(lambda x: Eval.now(x + 1))
        assert ev.run() == 100_000


class TestGo:
    def test_yield_and_yield_from(self):
        def body():
            x = yield Eval.now(1)
            y = yield from Eval.now(2)
            return x + y

        assert Eval.go(body).run() == 3

    def test_each_run_starts_fresh(self):
        starts = []

        def body():
            starts.append(1)
            x = yield Eval.always(lambda: len(starts))
            return x

        ev = Eval.go(body)
        assert ev.run() == 1
        assert ev.run() == 2

    def test_recursive_go_is_stack_safe(self):
        def depth(n: int) -> Eval[int]:
            def body():
                if n == 0:
                    return 0
                below = yield Eval.defer(lambda: depth(n - 1))
                return below + 1

            return Eval.go(body)

        assert depth(20_000).run() == 20_000

    def test_body_without_yields(self):
        def body():
            return "plain"
            yield

        assert Eval.go(body).run() == "plain"


class TestCollections:
    def test_reduce(self):
        ev = Eval.reduce(range(1, 5), lambda acc, x: Eval.now(acc * x), 1)
        assert ev.run() == 24

    def test_collect_list_and_tuple(self):
        evals = [Eval.now(1), Eval.once(lambda: 2), Eval.always(lambda: 3)]
        assert Eval.collect(evals).run() == [1, 2, 3]
        assert Eval.collect(tuple(evals)).run() == (1, 2, 3)

    def test_gather(self):
        ev = Eval.gather({"a": Eval.now(1), "b": Eval.defer(lambda: Eval.now(2))})
        assert ev.run() == {"a": 1, "b": 2}

    def test_collect_many(self):
        evals = [Eval.now(i) for i in range(50_000)]
        assert Eval.collect(evals).run() == list(range(50_000))
