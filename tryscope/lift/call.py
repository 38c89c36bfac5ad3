"""
Вызов функций с автоматическим лифтингом.

Функции и декораторы для вызова обычных (raising) функций с подъемом
результата в Either, и обратно: снятие checked ошибок с сигнатуры.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import wraps

from .._types import Kind
from ..classify import DEFAULT_POLICY, ClassifyPolicy
from ..either import Either
from .reify import reify


def call[T, **P](
    func: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Either[BaseException, T]:
    """
    Call raising function with arguments, ordinary failures come back as Left.

    **When to use:** lift at the call site instead of writing a lambda.

    Example:
        from tryscope import lift as L

        L.call(int, "42")    # Right(42)
        L.call(int, "nope")  # Left(ValueError(...))

    NOTE: Only ordinary failures are captured. For explicit kinds use
          ``reify(lambda: func(...), KindA, KindB)`` or ``@reified``.
    """
    return reify(lambda: func(*args, **kwargs))


def reified[T, **P](
    *kinds: Kind,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> Callable[[Callable[P, T]], Callable[P, Either[BaseException, T]]]:
    """
    Decorator: function returns Either instead of raising recognised kinds.

    Example:
        @L.reified(KeyError)
        def lookup(table: dict[str, int], key: str) -> int:
            return table[key]

        lookup({}, "a")  # Left(KeyError('a'))
    """

    def decorate(func: Callable[P, T]) -> Callable[P, Either[BaseException, T]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Either[BaseException, T]:
            return reify(lambda: func(*args, **kwargs), *kinds, policy=policy)

        return wrapper

    return decorate


def unchecked[T, **P](
    func: Callable[P, T] | None = None,
    /,
    *,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> typing.Any:
    """
    Decorator: checked failures escaping func are raised boxed.

    Ordinary and fatal failures pass through unchanged, so the decorated
    function only ever raises "ordinary" failures.

    Example:
        @L.unchecked
        def load(path: str) -> bytes: ...

        @L.unchecked(policy=ClassifyPolicy(checked=(OSError,)))
        def load_io(path: str) -> bytes: ...
    """

    def decorate(fn: Callable[P, T]) -> Callable[P, T]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                escalated = policy.escalate(exc, getattr(fn, "__name__", "unchecked"))
                if escalated is exc:
                    raise
                raise escalated from exc

        return wrapper

    if func is None:
        return decorate
    return decorate(func)


__all__ = (
    "call",
    "reified",
    "unchecked",
)
