from __future__ import annotations

_SUPPRESSED_ATTR = "_tryscope_suppressed"


class CheckedError(Exception):
    """
    Marker base for failures a caller is expected to recognise explicitly.

    Anything deriving from it (or listed in ``ClassifyPolicy.checked``) is
    boxed into WrappedCheckedError when it crosses a classifying boundary
    without being matched.
    """


class WrappedCheckedError(Exception):
    """
    Propagation-only carrier for an unclassified (checked) failure.

    Usage:
        WrappedCheckedError(cause)
        WrappedCheckedError("loading config", cause)

    The message defaults to the cause's message. ``cause`` and ``__cause__``
    are the original instance.
    """

    cause: BaseException

    def __init__(self, *args: object) -> None:
        match args:
            case (BaseException() as cause,):
                message = str(cause)
            case (str() as message, BaseException() as cause):
                pass
            case (None,) | (_, None):
                raise ValueError("WrappedCheckedError requires a cause, got None")
            case _:
                raise TypeError(
                    "WrappedCheckedError expects (cause) or (message, cause), "
                    f"got {args!r}"
                )
        self.cause = cause
        super().__init__(message)
        self.__cause__ = cause

    def __reduce__(self) -> tuple[type[WrappedCheckedError], tuple[str, BaseException]]:
        return (type(self), (str(self), self.cause))

    @property
    def message(self) -> str:
        return str(self)


class AbsentSideError(LookupError):
    """Either queried for the side it does not hold."""

    side: str

    def __init__(self, side: str) -> None:
        self.side = side
        super().__init__(f"Either has no {side} value")


class ScopeArityError(ValueError):
    """Scoped acquisition called with an unsupported number of steps."""

    count: int

    def __init__(self, count: int, maximum: int) -> None:
        self.count = count
        super().__init__(f"Expected 1..{maximum} acquisition steps, got {count}")


# ============================================================================
# Suppressed (secondary) failures
# ============================================================================


def add_suppressed(primary: BaseException, secondary: BaseException, /) -> None:
    """
    Record ``secondary`` as suppressed by ``primary``.

    Order of calls is preserved. A note is added too so tracebacks show it.
    """
    if primary is secondary:
        return
    existing: list[BaseException] = getattr(primary, _SUPPRESSED_ATTR, None) or []
    setattr(primary, _SUPPRESSED_ATTR, [*existing, secondary])
    primary.add_note(f"Suppressed: {type(secondary).__name__}: {secondary}")


def suppressed(exc: BaseException, /) -> tuple[BaseException, ...]:
    """Suppressed failures attached to ``exc``, in the order they occurred."""
    return tuple(getattr(exc, _SUPPRESSED_ATTR, None) or ())


__all__ = (
    "AbsentSideError",
    "CheckedError",
    "ScopeArityError",
    "WrappedCheckedError",
    "add_suppressed",
    "suppressed",
)
