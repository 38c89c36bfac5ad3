from __future__ import annotations

from _infra import StorageError, banner, run

from tryscope import Left, Right, WrappedCheckedError, lift as L


def load_quota(user_id: int) -> int:
    # Locality: plain raising function, no Either here.
    if user_id == 0:
        raise StorageError("quota table unavailable")
    return 100 // (user_id - 1)


async def main() -> None:
    banner("01_quickstart: reify + classify + collapse")

    for user_id in (3, 1):
        match L.reify(lambda: load_quota(user_id)):
            case Right(quota):
                print(f"user {user_id}: quota {quota}")
            case Left(error):
                print(f"user {user_id}: {type(error).__name__}: {error}")

    # Recognised checked failure comes back as data
    print(L.reify_classifiable(lambda: load_quota(0), StorageError))

    # Unrecognised checked failure is boxed, original kept as cause
    try:
        L.reify_classifiable(lambda: load_quota(0), KeyError)
    except WrappedCheckedError as exc:
        print(f"boxed: {exc} (cause={exc.cause!r})")

    # Back to exception-style control flow
    print(L.down.unsafe(L.call(load_quota, 5)))


if __name__ == "__main__":
    run(main)
