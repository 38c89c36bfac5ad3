"""
WriterResult - Either with accumulated log
==========================================
"""

from __future__ import annotations

from ..either import Either


class WriterResult[T, E, W]:
    """
    Outcome of a journalled computation.

    Combines:
    - Either[E, T]: outcome (failure or success)
    - W: accumulated log
    """

    __slots__ = ("_outcome", "_log")
    __match_args__ = ("outcome", "log")

    def __init__(self, outcome: Either[E, T], log: W) -> None:
        self._outcome = outcome
        self._log = log

    @property
    def outcome(self) -> Either[E, T]:
        """The underlying Either."""
        return self._outcome

    @property
    def log(self) -> W:
        """The accumulated log."""
        return self._log

    def unsafe(self) -> T:
        """Right value, or raise the Left failure."""
        return self._outcome.get_right_or_throw_left()

    def __repr__(self) -> str:
        return f"WriterResult({self._outcome!r}, log={self._log!r})"


__all__ = ("WriterResult",)
