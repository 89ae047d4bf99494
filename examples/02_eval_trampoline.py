from __future__ import annotations

from dataclasses import dataclass

from _infra import banner, run

from effectful import Eval


@dataclass(frozen=True, slots=True)
class Tree:
    value: int
    left: Tree | None = None
    right: Tree | None = None


def in_order(tree: Tree | None) -> Eval[list[int]]:
    def body():
        if tree is None:
            return []
        left = yield Eval.defer(lambda: in_order(tree.left))
        right = yield Eval.defer(lambda: in_order(tree.right))
        return [*left, tree.value, *right]

    return Eval.go(body)


def degenerate(depth: int) -> Tree:
    tree = Tree(0)
    for value in range(1, depth):
        tree = Tree(value, left=tree)
    return tree


async def main() -> None:
    banner("02_eval_trampoline: recursion without stack growth")

    small = Tree(4, Tree(2, Tree(1), Tree(3)), Tree(6, Tree(5), Tree(7)))
    print(in_order(small).run())

    deep = in_order(degenerate(10_000)).run()
    print(f"deep tree: {len(deep)} nodes, first={deep[0]}, last={deep[-1]}")

    expensive = Eval.once(lambda: sum(range(1_000_000)))
    print(Eval.collect([expensive, expensive.map(lambda s: s * 2)]).run())


if __name__ == "__main__":
    run(main)
