from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from turbo_response import TurboResponse, fail, success  # noqa: E402


@dataclass(frozen=True, slots=True)
class Failure:
    code: str
    transient: bool = False


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    age: int
    is_active: bool = True


def _default_users() -> dict[int, User]:
    return {
        1: User(id=1, name="ada", age=36),
        2: User(id=2, name="linus", age=15),
        3: User(id=3, name="grace", age=45, is_active=False),
    }


@dataclass(slots=True)
class FakeRepo:
    users: dict[int, User] = field(default_factory=_default_users)
    delay_seconds: float = 0.0
    calls: list[int] = field(default_factory=list)

    async def fetch_user(self, user_id: int) -> TurboResponse[User]:
        self.calls.append(user_id)
        await asyncio.sleep(self.delay_seconds)
        user = self.users.get(user_id)
        if user is None:
            return fail(Failure("not_found"), "User not found", f"No user with id {user_id}")
        return success(user, "User loaded")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
