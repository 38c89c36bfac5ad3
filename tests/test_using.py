from __future__ import annotations

import logging

import pytest

from tryscope import (
    ClassifyPolicy,
    Right,
    ScopeArityError,
    WrappedCheckedError,
    suppressed,
    using,
    using_nested,
    using_nested_unsafe,
    using_unsafe,
    using_writer,
)

from tests.helpers import DiskError, FakeResource

pytestmark = pytest.mark.unit


def _opener(name: str, journal: list[str], **kwargs: object):
    def acquire(*_: object) -> FakeResource:
        return FakeResource(name, journal, **kwargs)  # type: ignore[arg-type]

    return acquire


# =============================================================================
# Happy path
# =============================================================================


@pytest.mark.parametrize("count", [1, 2, 3, 4, 5])
def test_all_released_once_in_reverse_order(count: int, journal: list[str]) -> None:
    names = [f"r{i}" for i in range(1, count + 1)]
    seen: list[FakeResource] = []

    def body(*resources: FakeResource) -> int:
        seen.extend(resources)
        return len(resources)

    outcome = using(*(_opener(n, journal) for n in names), body=body)

    assert outcome == Right(count)
    assert journal == list(reversed(names))
    assert [r.close_calls for r in seen] == [1] * count


def test_nested_acquisition_sees_live_resources(journal: list[str]) -> None:
    def open_b(a: FakeResource) -> FakeResource:
        assert a.close_calls == 0
        return FakeResource(f"{a.name}->b", journal)

    outcome = using_nested(
        _opener("a", journal),
        open_b,
        body=lambda a, b: (a.read(), b.read()),
    )

    assert outcome == Right(("data:a", "data:a->b"))
    assert journal == ["a->b", "a"]


def test_nested_step_receives_all_previous(journal: list[str]) -> None:
    received: list[tuple[str, ...]] = []

    def step(*previous: FakeResource) -> FakeResource:
        received.append(tuple(r.name for r in previous))
        return FakeResource(str(len(previous) + 1), journal)

    using_nested(step, step, step, body=lambda *rs: None)

    assert received == [(), ("1",), ("1", "2")]
    assert journal == ["3", "2", "1"]


def test_unsafe_returns_body_result(journal: list[str]) -> None:
    assert using_unsafe(_opener("a", journal), body=lambda a: a.read()) == "data:a"
    assert using_nested_unsafe(_opener("b", journal), body=lambda b: b.read()) == "data:b"


def test_step_returning_none_is_skipped_on_release(journal: list[str]) -> None:
    assert using(lambda: None, body=lambda r: "ok") == Right("ok")

    wr = using_writer(_opener("a", journal), lambda a: None, body=lambda a, nothing: nothing)

    assert wr.outcome == Right(None)
    assert [(e.action, e.index) for e in wr.log][-2:] == [("released", 2), ("released", 1)]
    assert journal == ["a"]


# =============================================================================
# Acquisition failures
# =============================================================================


def test_failed_acquisition_releases_previous_only(journal: list[str]) -> None:
    broken = ConnectionError("step 3")
    acquired: list[str] = []

    def third(*_: object) -> FakeResource:
        raise broken

    def fourth(*_: object) -> FakeResource:
        acquired.append("r4")
        return FakeResource("r4", journal)

    outcome = using(
        _opener("r1", journal),
        _opener("r2", journal),
        third,
        fourth,
        body=lambda *rs: pytest.fail("body must not run"),
    )

    assert outcome.get_left() is broken
    assert journal == ["r2", "r1"]
    assert acquired == []


def test_failed_first_acquisition_releases_nothing(journal: list[str]) -> None:
    def first() -> FakeResource:
        raise ValueError("bad dsn")

    outcome = using(first, body=lambda r: r)

    assert isinstance(outcome.get_left(), ValueError)
    assert journal == []


def test_acquisition_failure_keeps_release_failures_as_suppressed(journal: list[str]) -> None:
    close_error = OSError("close r1")

    def second() -> FakeResource:
        raise ValueError("step 2")

    outcome = using(
        _opener("r1", journal, fail_on_close=close_error),
        second,
        body=lambda *rs: None,
    )

    primary = outcome.get_left()
    assert str(primary) == "step 2"
    assert suppressed(primary) == (close_error,)


# =============================================================================
# Body and release failures
# =============================================================================


def test_body_failure_is_primary_and_release_failures_suppressed(journal: list[str]) -> None:
    body_error = RuntimeError("body")
    close_c = OSError("close c")
    close_a = OSError("close a")

    def body(*_: FakeResource) -> None:
        raise body_error

    outcome = using(
        _opener("a", journal, fail_on_close=close_a),
        _opener("b", journal),
        _opener("c", journal, fail_on_close=close_c),
        body=body,
    )

    assert outcome.get_left() is body_error
    assert suppressed(body_error) == (close_c, close_a)
    assert journal == ["c", "b", "a"]


def test_release_failure_after_successful_body_is_reported(journal: list[str]) -> None:
    close_b = OSError("close b")
    close_a = OSError("close a")

    outcome = using(
        _opener("a", journal, fail_on_close=close_a),
        _opener("b", journal, fail_on_close=close_b),
        body=lambda a, b: "done",
    )

    assert outcome.get_left() is close_b
    assert suppressed(close_b) == (close_a,)
    assert journal == ["b", "a"]


def test_release_failure_is_logged(journal: list[str], caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="tryscope.scope.arena"):
        using(_opener("a", journal, fail_on_close=OSError("gone")), body=lambda a: None)

    assert "Failed to release resource #1 (FakeResource): gone" in caplog.text


def test_unsafe_raises_primary_failure(journal: list[str]) -> None:
    def body(a: FakeResource) -> None:
        raise KeyError("k")

    with pytest.raises(KeyError):
        using_unsafe(_opener("a", journal), body=body)
    assert journal == ["a"]


# =============================================================================
# Classification
# =============================================================================


def test_checked_failure_is_wrapped(journal: list[str]) -> None:
    disk = DiskError("disk full")

    def body(a: FakeResource) -> None:
        raise disk

    outcome = using(_opener("a", journal), body=body)
    wrapped = outcome.get_left()

    assert isinstance(wrapped, WrappedCheckedError)
    assert wrapped.cause is disk
    assert str(wrapped) == "disk full"

    with pytest.raises(WrappedCheckedError):
        using_unsafe(_opener("b", journal), body=body)


def test_checked_release_failure_is_wrapped(journal: list[str]) -> None:
    outcome = using(
        _opener("a", journal, fail_on_close=DiskError("flush failed")),
        body=lambda a: 1,
    )

    assert isinstance(outcome.get_left(), WrappedCheckedError)


def test_policy_controls_checked_types(journal: list[str]) -> None:
    def body(a: FakeResource) -> None:
        raise FileNotFoundError("x")

    plain = using(_opener("a", journal), body=body)
    boxed = using(_opener("b", journal), body=body, policy=ClassifyPolicy(checked=(OSError,)))

    assert isinstance(plain.get_left(), FileNotFoundError)
    assert isinstance(boxed.get_left(), WrappedCheckedError)


def test_fatal_is_reraised_after_release(journal: list[str]) -> None:
    def body(a: FakeResource) -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        using(_opener("a", journal), body=body)
    assert journal == ["a"]


# =============================================================================
# Arity and journal
# =============================================================================


@pytest.mark.parametrize("count", [0, 6])
def test_arity_outside_one_to_five_is_rejected(count: int, journal: list[str]) -> None:
    with pytest.raises(ScopeArityError):
        using(*(_opener(str(i), journal) for i in range(count)), body=lambda *rs: None)
    assert journal == []


def test_writer_journal(journal: list[str]) -> None:
    close_a = OSError("close a")

    wr = using_writer(
        _opener("a", journal, fail_on_close=close_a),
        _opener("b", journal),
        body=lambda a, b: "ok",
    )

    assert [(e.action, e.index) for e in wr.log] == [
        ("acquired", 1),
        ("acquired", 2),
        ("body_returned", 0),
        ("released", 2),
        ("release_failed", 1),
    ]
    assert wr.log[-1].error is close_a
    assert wr.outcome.get_left() is close_a
    with pytest.raises(OSError):
        wr.unsafe()


def test_writer_journal_on_acquire_failure(journal: list[str]) -> None:
    def second(a: FakeResource) -> FakeResource:
        raise ValueError("no")

    wr = using_writer(_opener("a", journal), second, body=lambda *rs: None)

    assert [e.action for e in wr.log] == ["acquired", "acquire_failed", "released"]
    assert wr.log.where(lambda e: e.error is not None)[0].index == 2
