"""Resource test doubles that record release order."""

from __future__ import annotations

from dataclasses import dataclass

from tryscope import CheckedError


class DiskError(CheckedError):
    """Checked failure used across tests."""


@dataclass
class FakeResource:
    """Closeable test double.

    Appends its name to the shared ``journal`` on close and raises
    ``fail_on_close`` if configured.
    """

    name: str
    journal: list[str]
    fail_on_close: BaseException | None = None
    close_calls: int = 0

    def read(self) -> str:
        return f"data:{self.name}"

    def close(self) -> None:
        self.close_calls += 1
        self.journal.append(self.name)
        if self.fail_on_close is not None:
            raise self.fail_on_close


@dataclass
class FakeAsyncResource:
    """Async counterpart released through ``aclose``."""

    name: str
    journal: list[str]
    fail_on_close: BaseException | None = None
    close_calls: int = 0

    async def read(self) -> str:
        return f"data:{self.name}"

    async def aclose(self) -> None:
        self.close_calls += 1
        self.journal.append(self.name)
        if self.fail_on_close is not None:
            raise self.fail_on_close


@dataclass
class FakeSyncCloseAsyncResource:
    """Async-acquired resource that only has a plain ``close``."""

    name: str
    journal: list[str]

    def close(self) -> None:
        self.journal.append(self.name)
