"""
Kind
====

Explicit contract between the generic machinery (drivers, aggregation)
and a concrete effect container.

Every generic function takes `kind=` and never inspects effect values
directly: it asks the kind whether a value is terminal, what payload it
carries, and how to build a new terminal or productive value.

Accumulating kinds additionally expose a *residue*: the part of a value
that must survive across steps (validation errors, writer logs).
Residues are merged with `combine` in the order values are observed.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._types import Combine, Policy

_POLICIES: tuple[Policy, ...] = ("halt", "accumulate")


def _no_residue(value: object) -> None:
    _ = value
    return None


def _keep_value[M](value: M, residue: object) -> M:
    _ = residue
    return value


@dataclass(frozen=True, slots=True)
class Kind[M]:
    """
    Short-circuit/accumulate contract for effect values of type M.

    - is_terminal: value ends the computation (Error, Nothing)
    - payload_of: payload carried in either state
    - make_terminal / make_productive: build values from payloads
    - combine: associative merge of residues (required when accumulating)
    - residue_of / with_residue: read and attach the accumulated residue
    - policy: "halt" resolves concurrent aggregation on the first terminal,
      "accumulate" waits for every settlement and merges residues
    """

    name: str
    is_terminal: Callable[[M], bool]
    payload_of: Callable[[M], typing.Any]
    make_terminal: Callable[[typing.Any], M]
    make_productive: Callable[[typing.Any], M]
    combine: Combine[typing.Any] | None = None
    residue_of: Callable[[M], typing.Any] = _no_residue
    with_residue: Callable[[M, typing.Any], M] = _keep_value
    policy: Policy = "halt"

    def __post_init__(self) -> None:
        if self.policy not in _POLICIES:
            raise ValueError(f"Kind.policy must be one of {_POLICIES}, got {self.policy!r}")
        if self.combine is None and self.policy == "accumulate":
            raise ValueError(f"Kind {self.name!r}: accumulate policy requires combine")
        if self.combine is None and self.residue_of is not _no_residue:
            raise ValueError(f"Kind {self.name!r}: residue_of requires combine")

    @property
    def accumulates(self) -> bool:
        return self.policy == "accumulate"

    def merge(self, acc: typing.Any, residue: typing.Any) -> typing.Any:
        """Merge a residue into the running one. `None` means "nothing yet"."""
        if residue is None:
            return acc
        if acc is None:
            return residue
        combine = typing.cast(Combine[typing.Any], self.combine)
        return combine(acc, residue)

    def attach(self, value: M, residue: typing.Any) -> M:
        """Attach an accumulated residue to a freshly built value."""
        if residue is None:
            return value
        return self.with_residue(value, residue)

    def map(self, value: M, f: Callable[[typing.Any], typing.Any]) -> M:
        """Map the payload of a productive value, keeping its residue."""
        if self.is_terminal(value):
            return value
        mapped = self.make_productive(f(self.payload_of(value)))
        return self.attach(mapped, self.residue_of(value))

    def __repr__(self) -> str:
        return f"Kind({self.name!r}, policy={self.policy!r})"


__all__ = ("Kind",)
