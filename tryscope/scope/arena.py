"""
Scope arena
===========

Явный список живых ресурсов: acquire по порядку, release в обратном порядке.

Release failures are never dropped:
- if something already failed, they are attached to it as suppressed
- otherwise the first one becomes the primary failure and the rest are
  attached to it
Releasing always continues through every remaining resource.
A step that returned None holds nothing and is skipped on release.
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .._errors import ScopeArityError, add_suppressed
from .._types import MAX_RESOURCES, AsyncCloseable, Closeable
from ..writer import Log

logger = logging.getLogger(__name__)

type ScopeAction = typing.Literal[
    "acquired",
    "acquire_failed",
    "body_returned",
    "body_failed",
    "released",
    "release_failed",
]


@dataclass(frozen=True, slots=True)
class ScopeEvent:
    """One journal entry. index is the 1-based resource position, 0 for the body."""

    action: ScopeAction
    index: int
    error: BaseException | None = None


def check_arity(count: int, /) -> None:
    if not 1 <= count <= MAX_RESOURCES:
        raise ScopeArityError(count, MAX_RESOURCES)


class Scope:
    """
    Synchronous arena of live resources for one scope invocation.

    Not shared between invocations; no locking.
    """

    __slots__ = ("_live", "_log")

    def __init__(self) -> None:
        self._live: list[Closeable | None] = []
        self._log: Log[ScopeEvent] = Log()

    @property
    def resources(self) -> tuple[typing.Any, ...]:
        """Live resources in acquisition order."""
        return tuple(self._live)

    @property
    def log(self) -> Log[ScopeEvent]:
        return self._log

    def record(self, action: ScopeAction, index: int, error: BaseException | None = None) -> None:
        self._log = self._log.tell(ScopeEvent(action, index, error))

    def acquire(self, step: Callable[..., typing.Any], /, *, nested: bool) -> typing.Any:
        """
        Run one acquisition step.

        nested=True: step receives the live resources positionally.
        The resource only becomes live once the step has returned.
        """
        index = len(self._live) + 1
        try:
            resource = step(*self._live) if nested else step()
        except BaseException as exc:
            self.record("acquire_failed", index, exc)
            raise
        self._live.append(resource)
        self.record("acquired", index)
        return resource

    def close(self, primary: BaseException | None = None, /) -> BaseException | None:
        """
        Release every live resource, last acquired first.

        Returns the primary failure: the one passed in, else the first release
        failure, else None.
        """
        while self._live:
            index = len(self._live)
            resource = self._live.pop()
            try:
                if resource is not None:
                    resource.close()
            except BaseException as exc:
                primary = self._release_failed(primary, exc, index, resource)
            else:
                self.record("released", index)
        return primary

    def _release_failed(
        self,
        primary: BaseException | None,
        exc: BaseException,
        index: int,
        resource: object,
    ) -> BaseException:
        self.record("release_failed", index, exc)
        logger.debug(
            "Failed to release resource #%d (%s): %s",
            index,
            type(resource).__name__,
            exc,
        )
        if primary is None:
            return exc
        add_suppressed(primary, exc)
        return primary


class AsyncScope(Scope):
    """
    Arena for async scopes.

    Steps return awaitables. Release prefers ``aclose()``, falling back to
    ``close()`` (awaited when it returns an awaitable).
    """

    __slots__ = ()

    async def acquire_async(
        self,
        step: Callable[..., Awaitable[typing.Any]],
        /,
        *,
        nested: bool,
    ) -> typing.Any:
        index = len(self._live) + 1
        try:
            resource = await (step(*self._live) if nested else step())
        except BaseException as exc:
            self.record("acquire_failed", index, exc)
            raise
        self._live.append(resource)
        self.record("acquired", index)
        return resource

    async def close_async(self, primary: BaseException | None = None, /) -> BaseException | None:
        while self._live:
            index = len(self._live)
            resource = self._live.pop()
            try:
                await _release(resource)
            except BaseException as exc:
                primary = self._release_failed(primary, exc, index, resource)
            else:
                self.record("released", index)
        return primary


async def _release(resource: typing.Any) -> None:
    if resource is None:
        return
    if isinstance(resource, AsyncCloseable):
        await resource.aclose()
        return
    outcome = resource.close()
    if inspect.isawaitable(outcome):
        await outcome


__all__ = (
    "AsyncScope",
    "Scope",
    "ScopeAction",
    "ScopeEvent",
    "check_arity",
)
