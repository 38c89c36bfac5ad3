"""
Core type definitions for tryscope.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Kind = failure recognised by type or by predicate (first match wins)
type Kind = type[BaseException] | Predicate[BaseException]

# Thunk = zero-arg computation producing a value
type Thunk[T] = Callable[[], T]

# Effect = zero-arg computation run for its side effect only
type Effect = Callable[[], object]

# AsyncThunk = zero-arg computation producing an awaitable
type AsyncThunk[T] = Callable[[], Awaitable[T]]

# ============================================================================
# Resources
# ============================================================================

# Upper bound on acquisition steps in a single scope
MAX_RESOURCES: typing.Final = 5


@typing.runtime_checkable
class Closeable(typing.Protocol):
    """Anything with an explicit release operation."""

    def close(self) -> object: ...


@typing.runtime_checkable
class AsyncCloseable(typing.Protocol):
    """Resource released with an awaitable ``aclose``."""

    def aclose(self) -> Awaitable[object]: ...


__all__ = (
    "AsyncCloseable",
    "AsyncThunk",
    "Closeable",
    "Effect",
    "Kind",
    "MAX_RESOURCES",
    "Predicate",
    "Thunk",
)
