"""
Using combinators
=================

Scoped acquisition of 1..5 resources: acquire → body → release (always,
in reverse order), outcome returned as Either.

- using:        acquisition steps are independent zero-arg callables
- using_nested: step k receives resources 1..k-1 positionally
- *_unsafe:     collapse the Either, raising the Left
- using_writer: like using_nested, plus the acquire/release journal

Outcome classification:
- success                          -> Right(body result)
- ordinary failure                 -> Left(failure)
- checked failure                  -> Left(policy.wrap(failure))
- fatal (KeyboardInterrupt, ...)   -> re-raised after releasing
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..classify import DEFAULT_POLICY, ClassifyPolicy
from ..either import Either, Left, Right
from ..writer import Log, WriterResult
from .arena import Scope, ScopeEvent, check_arity


# ============================================================================
# Generic protocol
# ============================================================================


def run_scope[T](
    steps: tuple[Callable[..., typing.Any], ...],
    body: Callable[..., T],
    *,
    nested: bool,
    policy: ClassifyPolicy,
) -> WriterResult[T, BaseException, Log[ScopeEvent]]:
    """
    Run one scope invocation and return its journalled outcome.

    Idle → Acquiring(1..N) → BodyRunning → Closing(N..1) → Done; a failure in
    any acquisition or in the body skips to closing what is already live.
    """
    check_arity(len(steps))
    scope = Scope()
    primary: BaseException | None = None
    value: typing.Any = None

    try:
        for step in steps:
            scope.acquire(step, nested=nested)
        try:
            value = body(*scope.resources)
        except BaseException as exc:
            scope.record("body_failed", 0, exc)
            raise
        scope.record("body_returned", 0)
    except BaseException as exc:
        primary = exc

    primary = scope.close(primary)
    return WriterResult(settle(value, primary, policy), scope.log)


def settle[T](
    value: T,
    primary: BaseException | None,
    policy: ClassifyPolicy,
) -> Either[BaseException, T]:
    """Classify the scope outcome: ordinary as-is, checked boxed, fatal raised."""
    if primary is None:
        return Right(value)
    if policy.is_fatal(primary):
        raise primary
    if policy.is_checked(primary):
        return Left(policy.wrap(primary))
    return Left(primary)


# ============================================================================
# Sugar
# ============================================================================


def using[T](
    *acquire: Callable[[], typing.Any],
    body: Callable[..., T],
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> Either[BaseException, T]:
    """
    Acquire independent resources, run body over all of them, release all.

    Example:
        from tryscope import using

        lines = using(
            lambda: open("a.txt"),
            lambda: open("b.txt"),
            body=lambda a, b: a.readlines() + b.readlines(),
        )
    """
    return run_scope(acquire, body, nested=False, policy=policy).outcome


def using_unsafe[T](
    *acquire: Callable[[], typing.Any],
    body: Callable[..., T],
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> T:
    """``using`` collapsed: body result, or the (classified) failure raised."""
    return using(*acquire, body=body, policy=policy).get_right_or_throw_left()


def using_nested[T](
    *acquire: Callable[..., typing.Any],
    body: Callable[..., T],
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> Either[BaseException, T]:
    """
    Acquire resources where each step may depend on the previous ones.

    Example:
        using_nested(
            lambda: connect(dsn),
            lambda conn: conn.cursor(),
            body=lambda conn, cur: cur.execute("select 1").fetchone(),
        )

    A later step only ever sees fully acquired, not yet released resources.
    """
    return run_scope(acquire, body, nested=True, policy=policy).outcome


def using_nested_unsafe[T](
    *acquire: Callable[..., typing.Any],
    body: Callable[..., T],
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> T:
    """``using_nested`` collapsed: body result, or the failure raised."""
    return using_nested(*acquire, body=body, policy=policy).get_right_or_throw_left()


def using_writer[T](
    *acquire: Callable[..., typing.Any],
    body: Callable[..., T],
    nested: bool = True,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> WriterResult[T, BaseException, Log[ScopeEvent]]:
    """
    ``using_nested`` with the scope journal.

    Example:
        wr = using_writer(open_db, lambda db: db.session(), body=migrate)
        [e.action for e in wr.log]
        # ["acquired", "acquired", "body_returned", "released", "released"]
    """
    return run_scope(acquire, body, nested=nested, policy=policy)


__all__ = (
    "run_scope",
    "settle",
    "using",
    "using_nested",
    "using_nested_unsafe",
    "using_unsafe",
    "using_writer",
)
