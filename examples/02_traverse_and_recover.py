from __future__ import annotations

from _infra import Failure, FakeRepo, User, banner, run

from turbo_response import (
    TurboResponse,
    fail,
    partition,
    recover,
    sequence,
    success,
    traverse,
    unwrap_or,
)


async def main() -> None:
    banner("02_traverse_and_recover: batches stop at the first Fail")

    repo = FakeRepo()

    all_users = await traverse([1, 2, 3], repo.fetch_user)
    print(f"traverse [1, 2, 3] -> {all_users}")

    repo.calls.clear()
    stopped = await traverse([1, 42, 3], repo.fetch_user)
    print(f"traverse [1, 42, 3] -> {stopped.title}; fetched ids {repo.calls}")

    responses = [await repo.fetch_user(i) for i in (1, 42, 2, 99)]
    users, errors = partition(responses)
    print(f"partition -> {[u.name for u in users]} / {errors}")

    def guest(error: object) -> TurboResponse[User]:
        if isinstance(error, Failure) and error.code == "not_found":
            return success(User(id=0, name="guest", age=0), "Guest")
        return fail(error)

    healed = [recover(r, guest) for r in responses]
    names = unwrap_or(sequence(healed), [])
    print(f"recover + sequence -> {[u.name for u in names]}")


if __name__ == "__main__":
    run(main)
