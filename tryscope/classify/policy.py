"""
Classification policy
=====================

Разделение ошибок на ordinary / checked / fatal.

- ordinary: any Exception not listed as checked, propagates as-is
- checked:  instances of ``ClassifyPolicy.checked``, boxed before propagating
- fatal:    BaseException outside Exception (KeyboardInterrupt, SystemExit, ...),
            never boxed and never captured unless a caller kind names it
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .._errors import CheckedError, WrappedCheckedError

# Wrapper = (message, cause) -> propagation-safe failure
type Wrapper = Callable[[str, BaseException], BaseException]


def _wrapped_checked(message: str, cause: BaseException) -> BaseException:
    return WrappedCheckedError(message, cause)


@dataclass(frozen=True, slots=True)
class ClassifyPolicy:
    """
    Failure taxonomy configuration.

    Usage:
        io_checked = ClassifyPolicy(checked=(CheckedError, OSError))
        reify_classifiable(read_config, ValueError, policy=io_checked)
    """

    checked: tuple[type[BaseException], ...] = (CheckedError,)
    wrapper: Wrapper = _wrapped_checked

    def is_checked(self, exc: BaseException, /) -> bool:
        return isinstance(exc, self.checked)

    def is_ordinary(self, exc: BaseException, /) -> bool:
        return isinstance(exc, Exception) and not self.is_checked(exc)

    def is_fatal(self, exc: BaseException, /) -> bool:
        return not isinstance(exc, Exception) and not self.is_checked(exc)

    def wrap(self, exc: BaseException, /, context: str | None = None) -> BaseException:
        """Box exc for propagation, message prefixed with context when given."""
        message = str(exc) if context is None else f"{context} failure - {exc}"
        return self.wrapper(message, exc)

    def escalate(self, exc: BaseException, /, context: str | None = None) -> BaseException:
        """What to raise for an unmatched failure: itself, or its wrapped form."""
        if self.is_checked(exc):
            return self.wrap(exc, context)
        return exc


DEFAULT_POLICY = ClassifyPolicy()


__all__ = (
    "DEFAULT_POLICY",
    "ClassifyPolicy",
    "Wrapper",
)
