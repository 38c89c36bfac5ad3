"""
Reification of try/except into values.

Функции, превращающие исключения в данные (Either / Optional).

Two call shapes:
- value:  thunk returns T   -> Either[E, T]
- effect: thunk returns None -> E | None  (None = no failure)

Classification is a filter, not a catch-all: a failure matching none of the
kinds is re-raised (as-is, or boxed for the *_classifiable variants).
"""

from __future__ import annotations

import typing
from collections.abc import Sequence

from .._types import Effect, Kind, Thunk
from ..classify import DEFAULT_POLICY, ClassifyPolicy, matches_any
from ..either import Either, Left, Right


def _attempt[T](thunk: Thunk[T]) -> Either[BaseException, T]:
    """Capture every failure, fatal ones included. Callers re-raise what they don't want."""
    try:
        return Right(thunk())
    except BaseException as exc:
        return Left(exc)


def _settle[T](
    outcome: Either[BaseException, T],
    recognised: Sequence[Kind],
    *,
    policy: ClassifyPolicy | None,
    context: str,
) -> Either[BaseException, T]:
    """
    Keep recognised failures as Left, raise the rest.

    policy=None: re-raise unchanged. Otherwise checked failures are boxed.
    """
    match outcome:
        case Right(_):
            return outcome
        case Left(exc) if matches_any(exc, recognised):
            return outcome
        case Left(exc):
            escalated = exc if policy is None else policy.escalate(exc, context)
            if escalated is exc:
                raise exc
            raise escalated from exc
        case _ as unreachable:
            typing.assert_never(unreachable)


def _failure_of(outcome: Either[BaseException, object]) -> BaseException | None:
    return outcome.get_left() if outcome.is_left() else None


# ============================================================================
# Filtering reification (unmatched failures re-raised unchanged)
# ============================================================================


def reify[T](
    thunk: Thunk[T],
    *kinds: Kind,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> Either[BaseException, T]:
    """
    Run thunk: Right(result) on success, Left(failure) if a kind matches.

    Without kinds every ordinary failure is recognised. A failure matching
    nothing propagates with the same identity.

    Example:
        reify(lambda: 60 // 0)                       # Left(ZeroDivisionError(...))
        reify(lambda: 60 // 2)                       # Right(30)
        reify(lambda: 60 // 0, KeyError)             # raises ZeroDivisionError
    """
    recognised = kinds or (policy.is_ordinary,)
    return _settle(_attempt(thunk), recognised, policy=None, context="reify")


def reify_effect(
    effect: Effect,
    *kinds: Kind,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> BaseException | None:
    """
    Run effect for its side effect: None on success, the failure if recognised.

    Same recognition rules as ``reify``.
    """
    recognised = kinds or (policy.is_ordinary,)
    return _failure_of(_settle(_attempt(effect), recognised, policy=None, context="reify_effect"))


# ============================================================================
# Classifying reification (unmatched checked failures boxed)
# ============================================================================


def reify_classifiable[T](
    thunk: Thunk[T],
    *kinds: Kind,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> Either[BaseException, T]:
    """
    Like ``reify``, but a checked failure matching no kind is raised boxed
    in ``policy.wrapper`` (WrappedCheckedError by default), original as cause.

    Without kinds every Exception, checked or not, comes back as Left.

    Anything escaping is therefore either ordinary (as-is), fatal (as-is),
    or a wrapped checked failure.
    """
    recognised = kinds or (Exception,)
    return _settle(
        _attempt(thunk),
        recognised,
        policy=policy,
        context="reify_classifiable",
    )


def reify_effect_classifiable(
    effect: Effect,
    *kinds: Kind,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> BaseException | None:
    """
    Effect form of ``reify_classifiable``.

    NOTE: Without kinds only ordinary failures are recognised, so a checked
          failure is boxed and raised. This differs from the value form on
          purpose; callers rely on both defaults.
    """
    recognised = kinds or (policy.is_ordinary,)
    outcome = _settle(
        _attempt(effect),
        recognised,
        policy=policy,
        context="reify_effect_classifiable",
    )
    return _failure_of(outcome)


__all__ = (
    "reify",
    "reify_classifiable",
    "reify_effect",
    "reify_effect_classifiable",
)
