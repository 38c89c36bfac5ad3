"""Kind matching

Ordered recognition of failures: a kind is either an exception type or a
predicate over the raised failure. First match wins."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .._types import Kind


def kind_matches(kind: Kind, exc: BaseException, /) -> bool:
    """Single kind test: isinstance for types, call for predicates."""
    if isinstance(kind, type):
        return isinstance(exc, kind)
    return bool(kind(exc))


def first_match(exc: BaseException, kinds: Sequence[Kind], /) -> Kind | None:
    """First kind (in supplied order) recognising exc, or None."""
    for kind in kinds:
        if kind_matches(kind, exc):
            return kind
    return None


def matches_any(exc: BaseException, kinds: Sequence[Kind], /) -> bool:
    return first_match(exc, kinds) is not None


def where[E: BaseException](exc_type: type[E], predicate: Callable[[E], bool], /) -> Kind:
    """
    Narrow a type kind with a predicate.

    Example:
        reify(fetch, where(OSError, lambda e: e.errno == errno.ENOENT))
    """

    def kind(exc: BaseException) -> bool:
        return isinstance(exc, exc_type) and predicate(exc)

    kind.__name__ = f"where({exc_type.__name__})"
    return kind


__all__ = (
    "first_match",
    "kind_matches",
    "matches_any",
    "where",
)
