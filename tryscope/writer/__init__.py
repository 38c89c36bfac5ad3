"""
Writer
======

Журнал событий рядом с результатом:
- Either[E, T] (успех/ошибка)
- Log[W] (аккумуляция событий)
"""

from .log import Log
from .result import WriterResult

__all__ = (
    "Log",
    "WriterResult",
)
