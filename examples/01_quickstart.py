from __future__ import annotations

from _infra import FakeRepo, User, banner, run

from turbo_response import (
    Fail,
    Success,
    and_then_async,
    ensure,
    map_success,
    when,
)


def describe(response) -> str:
    return when(
        response,
        success=lambda s: f"{s.title}: {s.result}",
        fail=lambda f: f"{f.title or 'Error'}: {f.message or f.error!r}",
    )


async def main() -> None:
    banner("01_quickstart: construct, chain, validate, match")

    repo = FakeRepo(delay_seconds=0.01)

    for user_id in (1, 2, 42):
        loaded = await repo.fetch_user(user_id)
        adult = ensure(loaded, lambda user: user.age >= 18, "too young")
        greeting = map_success(adult, lambda user: f"hello, {user.name}")
        print(describe(greeting))

    async def load_active(user: User):
        return await repo.fetch_user(user.id + 2)

    chained = await and_then_async(await repo.fetch_user(1), load_active)
    match chained:
        case Success(user):
            print(f"chained to {user.name}")
        case Fail(error, title):
            print(f"chain failed: {title} ({error!r})")


if __name__ == "__main__":
    run(main)
