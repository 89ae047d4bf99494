from __future__ import annotations

from _infra import FakeBackend, Failure, User, banner, run

from effectful import RESULT, go_async, traverse_par, wrap_go_fn_async
from kungfu import Error, Ok, Result


def check_active(user: User) -> Result[User, Failure]:
    return Ok(user) if user.is_active else Error(Failure(f"{user.name} is inactive"))


async def main() -> None:
    banner("01_quickstart: go_async + traverse_par")

    api = FakeBackend(name="api", delay_seconds=0.03)

    def greet(user_id: int):
        user = yield api.fetch_user(user_id)
        active = yield check_active(user)
        return f"hello, {active.name}"

    for user_id in (1, 3, 9):
        match await go_async(greet(user_id), kind=RESULT):
            case Ok(message):
                print(message)
            case Error(err):
                print(f"error: {err}")

    @wrap_go_fn_async(kind=RESULT)
    def names(user_id: int):
        user = yield api.fetch_user(user_id)
        return user.name

    # settles 2 before 1, result keeps input order
    match await traverse_par([1, 2], names, kind=RESULT):
        case Ok(all_names):
            print(f"names: {all_names}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
