from __future__ import annotations

from _infra import FakeConnection, banner, run

from tryscope import suppressed, using_nested, using_writer


async def main() -> None:
    banner("02_scoped_resources: nested acquisition + ordered release")

    journal: list[str] = []
    rows = using_nested(
        lambda: FakeConnection("db://primary", journal),
        lambda conn: conn.cursor(),
        body=lambda conn, cur: cur.fetch("select 1"),
    )
    print(rows, journal)

    banner("body fails, release fails too")
    journal = []
    outcome = using_nested(
        lambda: FakeConnection("db://replica", journal, fail_on_close=True),
        lambda conn: conn.cursor(),
        body=lambda conn, cur: cur.fetch("drop table users"),
    )
    error = outcome.get_left()
    print(f"{type(error).__name__}: {error}")
    print("cause:", repr(error.__cause__))
    print("suppressed:", suppressed(error.__cause__))

    banner("journal")
    wr = using_writer(
        lambda: FakeConnection("db://audit", []),
        lambda conn: conn.cursor(),
        body=lambda conn, cur: cur.fetch("select 2"),
    )
    for event in wr.log:
        print(f"  {event.action} #{event.index}")


if __name__ == "__main__":
    run(main)
