"""
WriterResult - Result with accumulated log
==========================================
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    Result paired with an accumulated log.

    Combines:
    - Result[T, E]: computation result (success or error)
    - Log[W]: log entries written so far

    Terminal when the result is an Error; the log survives either way.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("_result", "_log")

    def __init__(self, result: Result[T, E], log: Log[W] | None = None) -> None:
        self._result = result
        self._log: Log[W] = Log() if log is None else log

    @staticmethod
    def ok[V, X](value: V, *entries: X) -> WriterResult[V, typing.Any, X]:
        """Successful result with log entries."""
        return WriterResult(Ok(value), Log.of(*entries))

    @staticmethod
    def error[V, X](err: V, *entries: X) -> WriterResult[typing.Any, V, X]:
        """Failed result with log entries."""
        return WriterResult(Error(err), Log.of(*entries))

    @property
    def result(self) -> Result[T, E]:
        """The underlying Result."""
        return self._result

    @property
    def log(self) -> Log[W]:
        """The accumulated log."""
        return self._log

    @property
    def is_error(self) -> bool:
        return isinstance(self._result, Error)

    def with_log(self, log: Log[W]) -> WriterResult[T, E, W]:
        """Same result, replaced log."""
        return WriterResult(self._result, log)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriterResult):
            return NotImplemented
        if list(self._log) != list(other._log):
            return False
        match self._result, other._result:
            case Ok(a), Ok(b):
                return a == b
            case Error(a), Error(b):
                return a == b
            case _:
                return False

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
