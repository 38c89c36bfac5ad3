from __future__ import annotations

import pytest

from tryscope import (
    DEFAULT_POLICY,
    CheckedError,
    ClassifyPolicy,
    WrappedCheckedError,
    first_match,
    matches_any,
    where,
)

pytestmark = pytest.mark.unit


def test_first_match_respects_order() -> None:
    exc = KeyError("k")

    assert first_match(exc, (LookupError, KeyError)) is LookupError
    assert first_match(exc, (KeyError, LookupError)) is KeyError
    assert first_match(exc, (ValueError,)) is None


def test_predicate_kinds() -> None:
    def is_404(exc: BaseException) -> bool:
        return "404" in str(exc)

    assert matches_any(RuntimeError("HTTP 404"), (is_404,))
    assert not matches_any(RuntimeError("HTTP 500"), (is_404,))


def test_where_narrows_a_type() -> None:
    kind = where(OSError, lambda e: e.errno == 2)

    assert matches_any(FileNotFoundError(2, "missing"), (kind,))
    assert not matches_any(PermissionError(13, "denied"), (kind,))
    assert not matches_any(ValueError("2"), (kind,))


def test_default_taxonomy() -> None:
    assert DEFAULT_POLICY.is_ordinary(ZeroDivisionError())
    assert DEFAULT_POLICY.is_checked(CheckedError())
    assert not DEFAULT_POLICY.is_ordinary(CheckedError())
    assert DEFAULT_POLICY.is_fatal(KeyboardInterrupt())
    assert not DEFAULT_POLICY.is_ordinary(KeyboardInterrupt())


def test_custom_checked_types() -> None:
    policy = ClassifyPolicy(checked=(CheckedError, OSError))

    assert policy.is_checked(FileNotFoundError())
    assert not policy.is_ordinary(FileNotFoundError())
    assert DEFAULT_POLICY.is_ordinary(FileNotFoundError())


def test_escalate_boxes_checked_only() -> None:
    checked = CheckedError("reset() not supported")
    ordinary = ValueError("v")

    boxed = DEFAULT_POLICY.escalate(checked, "load")
    assert isinstance(boxed, WrappedCheckedError)
    assert str(boxed) == "load failure - reset() not supported"
    assert boxed.__cause__ is checked
    assert DEFAULT_POLICY.escalate(ordinary, "load") is ordinary


def test_custom_wrapper() -> None:
    class Boxed(Exception):
        def __init__(self, message: str, cause: BaseException) -> None:
            super().__init__(message)
            self.inner = cause

    policy = ClassifyPolicy(wrapper=Boxed)
    cause = CheckedError("x")
    boxed = policy.wrap(cause)

    assert isinstance(boxed, Boxed)
    assert boxed.inner is cause
    assert str(boxed) == "x"


def test_policy_is_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_POLICY.checked = ()  # type: ignore[misc]
