"""Async using combinator

Same protocol as ``using_nested`` for coroutine-based resources, lifted
into kungfu's LazyCoroResult."""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult, Result

from ..classify import DEFAULT_POLICY, ClassifyPolicy
from .arena import AsyncScope, check_arity
from .using import settle


def using_async[T](
    *acquire: Callable[..., Awaitable[typing.Any]],
    body: Callable[..., Awaitable[T]],
    nested: bool = True,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> LazyCoroResult[T, BaseException]:
    """
    Resource management for async code: acquire → body → release (always).

    Nothing runs until the result is awaited.

    Example:
        result = await using_async(
            lambda: open_session(url),
            lambda session: session.ws_connect("/feed"),
            body=lambda session, ws: ws.receive_json(),
        )
        # Ok(payload) | Error(failure)
    """
    check_arity(len(acquire))

    async def run() -> Result[T, BaseException]:
        scope = AsyncScope()
        primary: BaseException | None = None
        value: typing.Any = None

        try:
            for step in acquire:
                await scope.acquire_async(step, nested=nested)
            try:
                value = await body(*scope.resources)
            except BaseException as exc:
                scope.record("body_failed", 0, exc)
                raise
            scope.record("body_returned", 0)
        except BaseException as exc:
            primary = exc

        primary = await scope.close_async(primary)
        return settle(value, primary, policy).to_result()

    return LazyCoroResult(run)


__all__ = ("using_async",)
