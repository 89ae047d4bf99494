"""
Writer
======

Result + Log pair:
- Result[T, E] (успех/ошибка)
- Log[W] (аккумуляция логов)

Driven by the generic machinery through the WRITER kind.
"""

from .log import Log
from .result import WriterResult

__all__ = (
    "Log",
    "WriterResult",
)
