"""
Eval
====

Stack-safe deferred evaluation.

An Eval is a description of a computation: nothing runs until `run()`.
`run()` interprets the instruction tree with an explicit continuation
stack, so arbitrarily deep `flat_map` chains and recursive programs
built with `defer`/`go` never grow the Python call stack.

Example:
    def count_down(n: int) -> Eval[int]:
        if n == 0:
            return Eval.now(0)
        return Eval.defer(lambda: count_down(n - 1))

    count_down(1_000_000).run()  # 0
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Generator, Iterable, Mapping, Sequence

from .._helpers import identity, semigroup_combine
from .._types import Combine, Thunk
from ._instr import Always, FlatMap, Instr, Now, Once

type EvalGo[A] = Generator[Eval[typing.Any], typing.Any, A]


class Eval[A]:
    """Deferred computation producing A."""

    __slots__ = ("_instr",)

    def __init__(self, instr: Instr) -> None:
        self._instr = instr

    # ========================================================================
    # Constructors
    # ========================================================================

    @staticmethod
    def now[T](x: T) -> Eval[T]:
        """Already known value."""
        return Eval(Now(x))

    @staticmethod
    def once[T](f: Thunk[T]) -> Eval[T]:
        """Thunk called at most once; later runs reuse the memoized value."""
        return Eval(Once(f))

    @staticmethod
    def always[T](f: Thunk[T]) -> Eval[T]:
        """Thunk called on every run."""
        return Eval(Always(f))

    @staticmethod
    def defer[T](f: Thunk[Eval[T]]) -> Eval[T]:
        """Build the Eval lazily, at run time."""
        return Eval.now(None).flat_map(lambda _: f())

    @staticmethod
    def go[T](f: Callable[[], EvalGo[T]]) -> Eval[T]:
        """
        Generator comprehension.

        The body yields Evals and receives their results. A fresh
        generator is created on every run.

        Example:
            def body():
                x = yield Eval.now(1)
                y = yield from Eval.now(2)
                return x + y

            Eval.go(body).run()  # 3
        """

        def start() -> Eval[T]:
            return _resume(f(), None)

        return Eval.defer(start)

    # ========================================================================
    # Collections
    # ========================================================================

    @staticmethod
    def reduce[T, B](items: Iterable[T], f: Callable[[B, T], Eval[B]], initial: B) -> Eval[B]:
        """Left fold in the context of Eval."""

        def body() -> EvalGo[B]:
            acc = initial
            for item in items:
                acc = yield f(acc, item)
            return acc

        return Eval.go(body)

    @staticmethod
    def collect(evals: Sequence[Eval[typing.Any]]) -> Eval[typing.Any]:
        """Run left to right; list in -> list out, tuple in -> tuple out."""

        def body() -> EvalGo[typing.Any]:
            results = []
            for ev in evals:
                results.append((yield ev))
            return tuple(results) if isinstance(evals, tuple) else results

        return Eval.go(body)

    @staticmethod
    def gather[K, T](evals: Mapping[K, Eval[T]]) -> Eval[dict[K, T]]:
        """Run in mapping order, collect results under the same keys."""

        def body() -> EvalGo[dict[K, T]]:
            results: dict[K, T] = {}
            for key, ev in evals.items():
                results[key] = yield ev
            return results

        return Eval.go(body)

    # ========================================================================
    # Sequencing
    # ========================================================================

    def flat_map[B](self, f: Callable[[A], Eval[B]]) -> Eval[B]:
        return Eval(FlatMap(self, f))

    def flat[B](self: Eval[Eval[B]]) -> Eval[B]:
        """Unwrap a nested Eval."""
        return self.flat_map(identity)

    def map[B](self, f: Callable[[A], B]) -> Eval[B]:
        return self.flat_map(lambda x: Eval.now(f(x)))

    def zip_with[B, C](self, that: Eval[B], f: Callable[[A, B], C]) -> Eval[C]:
        """Run self then that, combine both results."""
        return self.flat_map(lambda x: that.map(lambda y: f(x, y)))

    def zip_fst(self, that: Eval[typing.Any]) -> Eval[A]:
        """Run self then that, keep self's result."""
        return self.zip_with(that, lambda x, _: x)

    def zip_snd[B](self, that: Eval[B]) -> Eval[B]:
        """Run self then that, keep that's result."""
        return self.flat_map(lambda _: that)

    def combine(self, that: Eval[A], combine: Combine[A] = semigroup_combine) -> Eval[A]:
        """Combine both results with an associative operation."""
        return self.zip_with(that, combine)

    def __iter__(self) -> Generator[Eval[A], typing.Any, A]:
        # `x = yield from ev` inside Eval.go bodies
        return (yield self)

    # ========================================================================
    # Interpreter
    # ========================================================================

    def run(self) -> A:
        """Evaluate. Iterative: continuation stack lives in a list."""
        stack: list[Callable[[typing.Any], Eval[typing.Any]]] = []
        current: Eval[typing.Any] = self

        while True:
            match current._instr:
                case Now(value):
                    if not stack:
                        return typing.cast(A, value)
                    current = stack.pop()(value)
                case FlatMap(source, f):
                    stack.append(f)
                    current = source
                case Once() as once:
                    current = Eval.now(once.force())
                case Always(thunk):
                    current = Eval.now(thunk())

    def __repr__(self) -> str:
        return f"Eval({type(self._instr).__name__})"


def _resume[T](gen: EvalGo[T], sent: typing.Any) -> Eval[T]:
    try:
        yielded = gen.send(sent)
    except StopIteration as stop:
        return Eval.now(stop.value)
    return yielded.flat_map(lambda x: _resume(gen, x))


__all__ = ("Eval",)
