"""Small shared helpers.

Stateless constants and functions used across modules and handy in
user code (default callbacks, repeated side effects)."""

from __future__ import annotations

import typing

from ._types import Effect
from .classify import DEFAULT_POLICY, ClassifyPolicy
from .lift.call import unchecked


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def _no_op() -> None:
    """Does nothing."""


def _no_op_checked() -> None:
    """Does nothing and never fails."""


# No-op effects: immutable process-wide singletons
NO_OP: typing.Final[Effect] = _no_op
NO_OP_CHECKED: typing.Final[Effect] = _no_op_checked


def repeat_effect(
    times: int,
    effect: Effect,
    *,
    policy: ClassifyPolicy = DEFAULT_POLICY,
) -> None:
    """
    Run effect ``times`` times, results ignored.

    A checked failure stops the loop and is raised boxed (see ``unchecked``).
    """
    if times < 0:
        raise ValueError(f"times must be >= 0, got {times}")
    run = unchecked(effect, policy=policy)
    for _ in range(times):
        run()


__all__ = (
    "NO_OP",
    "NO_OP_CHECKED",
    "identity",
    "repeat_effect",
)
