from __future__ import annotations

from _infra import FakeStream, banner, run

from kungfu import Error, Ok

from tryscope import lift as L, using_async


async def main() -> None:
    banner("03_async_streams: using_async + reify_async")

    journal: list[str] = []

    async def open_feed() -> FakeStream:
        return FakeStream("feed", journal)

    async def open_mirror(feed: FakeStream) -> FakeStream:
        return FakeStream(f"{feed.name}-mirror", journal)

    async def body(feed: FakeStream, mirror: FakeStream) -> list[str]:
        return [await feed.receive(), await mirror.receive()]

    match await using_async(open_feed, open_mirror, body=body)():
        case Ok(messages):
            print(messages, journal)
        case Error(err):
            print(f"error: {err!r}")

    async def flaky() -> str:
        raise ConnectionError("reset by peer")

    print(await L.reify_async(flaky, ConnectionError)())


if __name__ == "__main__":
    run(main)
