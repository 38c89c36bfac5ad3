"""
Either - two-variant result value
=================================

Left holds a failure, Right holds a success. Exactly one side is populated
and the value never changes after construction.

Usage:
    match reify(lambda: 60 // 0):
        case Right(value):
            ...
        case Left(error):
            ...
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from ._errors import AbsentSideError


class Either[L, R]:
    """
    Base of the Left / Right sum type.

    Not instantiated directly: use ``left()`` / ``right()`` or the variants.
    """

    __slots__ = ("_value",)

    _value: typing.Any

    def __init__(self, value: typing.Any, /) -> None:
        if type(self) is Either:
            raise TypeError("Either is abstract, construct Left(...) or Right(...)")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Either[L, R]], tuple[typing.Any]]:
        # slot state restore would go through the blocked __setattr__
        return (type(self), (self._value,))

    # Constructors

    @staticmethod
    def left[A](value: A, /) -> Either[A, typing.Never]:
        return Left(value)

    @staticmethod
    def right[B](value: B, /) -> Either[typing.Never, B]:
        return Right(value)

    @staticmethod
    def try_catch_checked[T](supplier: Callable[[], T], /) -> Either[Exception, T]:
        """
        Run supplier, capture ANY Exception as Left.

        Unconditional capture; classifying wrappers decide afterwards
        whether to keep the Left or re-raise it.
        """
        try:
            return Right(supplier())
        except Exception as exc:
            return Left(exc)

    @staticmethod
    def from_result[T, E](result: Result[T, E], /) -> Either[E, T]:
        """Convert kungfu Result: Ok -> Right, Error -> Left."""
        match result:
            case Ok(value):
                return Right(value)
            case Error(error):
                return Left(error)
            case _ as unreachable:
                typing.assert_never(unreachable)

    # Inspection

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def get_left(self) -> L:
        """Left value. Raises AbsentSideError on Right."""
        if isinstance(self, Left):
            return self._value
        raise AbsentSideError("left")

    def get_right(self) -> R:
        """Right value. Raises AbsentSideError on Left."""
        if isinstance(self, Right):
            return self._value
        raise AbsentSideError("right")

    # Projections

    def map[U](self, f: Callable[[R], U], /) -> Either[L, U]:
        """Apply f to Right value. Left is returned unchanged."""
        if isinstance(self, Right):
            return Right(f(self._value))
        return typing.cast(Either[L, U], self)

    def map_left[F](self, f: Callable[[L], F], /) -> Either[F, R]:
        """Apply f to Left value. Right is returned unchanged."""
        if isinstance(self, Left):
            return Left(f(self._value))
        return typing.cast(Either[F, R], self)

    def fold[U](self, on_left: Callable[[L], U], on_right: Callable[[R], U], /) -> U:
        if isinstance(self, Left):
            return on_left(self._value)
        return on_right(self._value)

    def swap(self) -> Either[R, L]:
        if isinstance(self, Left):
            return Right(self._value)
        return Left(self._value)

    # Collapse

    def get_right_or_else[D](self, default: D, /) -> R | D:
        if isinstance(self, Right):
            return self._value
        return default

    def get_right_or_throw_left(self) -> R:
        """
        Return Right value, or raise the Left value.

        Collapses a value-domain failure back into propagation. Left must hold
        an exception (map_left into one first otherwise).
        """
        if isinstance(self, Right):
            return self._value
        error = self._value
        if not isinstance(error, BaseException):
            raise TypeError(
                f"Left value must be an exception to be raised, got {type(error).__name__}"
            )
        raise error

    def to_result(self) -> Result[R, L]:
        """Convert to kungfu Result: Right -> Ok, Left -> Error."""
        if isinstance(self, Right):
            return Ok(self._value)
        return Error(self._value)

    # Dunder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Left[L](Either[L, typing.Never]):
    """Failure side."""

    __slots__ = ()
    __match_args__ = ("value",)

    @property
    def value(self) -> L:
        return self._value


class Right[R](Either[typing.Never, R]):
    """Success side."""

    __slots__ = ()
    __match_args__ = ("value",)

    @property
    def value(self) -> R:
        return self._value


def left[L](value: L, /) -> Either[L, typing.Never]:
    """Construct Left(value)."""
    return Left(value)


def right[R](value: R, /) -> Either[typing.Never, R]:
    """Construct Right(value)."""
    return Right(value)


__all__ = (
    "Either",
    "Left",
    "Right",
    "left",
    "right",
)
