"""Residue bookkeeping shared by the drivers and the aggregators."""

from __future__ import annotations

import typing

from ..kinds import Kind


class Tally[M]:
    """
    Running residue of one drive.

    absorb() every observed value, then build the outcome with
    halted() or completed(); both attach what was absorbed.
    """

    __slots__ = ("kind", "residue")

    def __init__(self, kind: Kind[M]) -> None:
        self.kind = kind
        self.residue: typing.Any = None

    def absorb(self, value: M) -> M:
        self.residue = self.kind.merge(self.residue, self.kind.residue_of(value))
        return value

    def halted(self, value: M) -> M:
        """Terminal outcome rebuilt from a terminal value."""
        terminal = self.kind.make_terminal(self.kind.payload_of(value))
        return self.kind.attach(terminal, self.residue)

    def completed(self, payload: typing.Any) -> M:
        return self.kind.attach(self.kind.make_productive(payload), self.residue)


__all__ = ("Tally",)
