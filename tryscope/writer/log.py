"""
Log - моноидный журнал событий
==============================
"""

from __future__ import annotations

from collections.abc import Callable, Iterable


class Log[A](list[A]):
    """
    Append-only journal with monoidal operations.

    - empty:   Log()
    - combine: concatenation, never mutates operands

    Left identity, right identity and associativity hold for combine.
    Scopes journal every acquire and release as one entry each.
    """

    @classmethod
    def of[T](cls, *entries: T) -> Log[T]:
        return cls(entries)

    def combine(self, other: Iterable[A], /) -> Log[A]:
        """
        Both journals in order, as a new log.

        Example:
            Log.of("acquired").combine(Log.of("released"))  # Log(["acquired", "released"])
        """
        return type(self)([*self, *other])

    def tell(self, entry: A, /) -> Log[A]:
        """New log with entry appended; self is untouched."""
        return self.combine((entry,))

    def where(self, predicate: Callable[[A], bool], /) -> Log[A]:
        """Entries satisfying predicate, order kept."""
        return type(self)(entry for entry in self if predicate(entry))


__all__ = ("Log",)
