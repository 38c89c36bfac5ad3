"""
Мост в async pipelines (kungfu LazyCoroResult).

Reification for coroutines, with the same kind rules as ``reify``.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import AsyncThunk, Kind
from ..classify import DEFAULT_POLICY, ClassifyPolicy, matches_any
from ..either import Either


def reify_async[T](
    thunk: AsyncThunk[T],
    *kinds: Kind,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> LazyCoroResult[T, BaseException]:
    """
    Async ``reify``: recognised failures become Error, the rest are raised
    when the LazyCoroResult is awaited.

    Example:
        from tryscope import lift as L

        result = await L.reify_async(lambda: client.get_user(42), APIException)
        # Ok(User(...)) | Error(APIException(...))

    NOTE: thunk must be a zero-arg callable for laziness.
          A bare coroutine would start executing on creation.
    """
    recognised = kinds or (policy.is_ordinary,)

    async def run() -> Result[T, BaseException]:
        try:
            return Ok(await thunk())
        except BaseException as exc:
            if matches_any(exc, recognised):
                return Error(exc)
            raise

    return LazyCoroResult(run)


def to_lazy[T, E](either: Either[E, T]) -> LazyCoroResult[T, E]:
    """
    Lift already-computed Either into LazyCoroResult.

    NOTE: Not lazy - the Either is already computed.
    """

    async def run() -> Result[T, E]:
        return either.to_result()

    return LazyCoroResult(run)


__all__ = (
    "reify_async",
    "to_lazy",
)
