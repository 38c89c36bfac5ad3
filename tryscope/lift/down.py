"""
Опускание Either в значение.

Extract the value out of an Either, or hand it to kungfu as a Result.
"""

from __future__ import annotations

from kungfu import Result

from ..either import Either


def to_result[T, E](either: Either[E, T]) -> Result[T, E]:
    """
    Convert to kungfu Result.

    Example:
        from tryscope import lift as L

        L.down.to_result(L.reify(lambda: 60 // 2))  # Ok(30)
    """
    return either.to_result()


def unsafe[T, E](either: Either[E, T]) -> T:
    """
    Return Right value or raise the Left failure.

    Same as ``either.get_right_or_throw_left()``: the idiom for going back to
    exception-style control flow.
    """
    return either.get_right_or_throw_left()


def or_else[T, E, D](either: Either[E, T], default: D) -> T | D:
    """Right value, or default on Left."""
    return either.get_right_or_else(default)


__all__ = (
    "or_else",
    "to_result",
    "unsafe",
)
