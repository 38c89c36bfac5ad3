from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from tryscope import CheckedError  # noqa: E402


class StorageError(CheckedError):
    """Checked failure raised by the fake storage layer."""


@dataclass(slots=True)
class FakeConnection:
    dsn: str
    journal: list[str] = field(default_factory=list)
    fail_on_close: bool = False

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def close(self) -> None:
        self.journal.append(f"close {self.dsn}")
        if self.fail_on_close:
            raise StorageError(f"{self.dsn}: flush failed")


@dataclass(slots=True)
class FakeCursor:
    connection: FakeConnection

    def fetch(self, query: str) -> list[str]:
        if "drop" in query:
            raise StorageError("permission denied")
        return [f"{self.connection.dsn}:{query}"]

    def close(self) -> None:
        self.connection.journal.append("close cursor")


@dataclass(slots=True)
class FakeStream:
    name: str
    journal: list[str]

    async def receive(self) -> str:
        await asyncio.sleep(0.01)
        return f"{self.name}: payload"

    async def aclose(self) -> None:
        self.journal.append(f"aclose {self.name}")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
