"""
Подъем значений в Either.

Функции для преобразования обычных значений, kungfu Result и Optional в Either.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Result

from ..either import Either, Left, Right


def pure[T](value: T) -> Either[Never, T]:
    """
    Lift value into Right.

    Example:
        from tryscope import lift as L

        L.up.pure(42)  # Right(42)
    """
    return Right(value)


def fail[E](error: E) -> Either[E, Never]:
    """Lift error into Left. Dual of pure()."""
    return Left(error)


def from_result[T, E](value: Result[T, E]) -> Either[E, T]:
    """
    Convert kungfu Result: Ok -> Right, Error -> Left.

    **When to use:** at the seam between kungfu pipelines and code that
    speaks Either.
    """
    return Either.from_result(value)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Either[E, T]:
    """
    Convert Optional to Either. None becomes Left(error()).

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return Left(error())
    return Right(value)


__all__ = (
    "fail",
    "from_result",
    "optional",
    "pure",
)
