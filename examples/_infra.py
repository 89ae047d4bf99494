from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from effectful.writer import Log, WriterResult  # noqa: E402


@dataclass(frozen=True, slots=True)
class Failure:
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def _default_users() -> dict[int, User]:
    return {
        1: User(id=1, name="alice"),
        2: User(id=2, name="bob"),
        3: User(id=3, name="carol", is_active=False),
    }


@dataclass(slots=True)
class FakeBackend:
    name: str
    delay_seconds: float = 0.0
    users: dict[int, User] = field(default_factory=_default_users)

    async def fetch_user(self, user_id: int) -> Result[User, Failure]:
        # later ids answer faster, so settlement order differs from input order
        await asyncio.sleep(self.delay_seconds / max(user_id, 1))
        user = self.users.get(user_id)
        if user is None:
            return Error(Failure(f"{self.name}: user {user_id} not found"))
        return Ok(user)

    async def fetch_user_w(self, user_id: int) -> WriterResult[User, Failure, str]:
        result = await self.fetch_user(user_id)
        return WriterResult(result, Log.of(f"{self.name}:fetch_user({user_id})"))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
