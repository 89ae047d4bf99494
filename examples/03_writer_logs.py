from __future__ import annotations

from _infra import FakeBackend, banner, run

from effectful import VALIDATION, WRITER, traverse_par
from kungfu import Error, Ok


async def main() -> None:
    banner("03_writer_logs: accumulate policy (logs and validation errors)")

    api = FakeBackend(name="api", delay_seconds=0.02)

    wr = await traverse_par([1, 2, 7, 8], api.fetch_user_w, kind=WRITER)
    match wr.result:
        case Ok(users):
            print(f"ok: {[u.name for u in users]}")
        case Error(err):
            print(f"error: {err}")
    # every task's log survives, in settlement order
    print(f"log: {list(wr.log)!r}")

    async def user_problems(user_id: int):
        match await api.fetch_user(user_id):
            case Ok(user) if user.is_active:
                return Ok(user.name)
            case Ok(user):
                return Error([f"{user.name}: inactive"])
            case Error(err):
                return Error([str(err)])

    match await traverse_par([1, 3, 9], user_problems, kind=VALIDATION):
        case Ok(names):
            print(f"valid: {names}")
        case Error(problems):
            print(f"problems: {problems}")


if __name__ == "__main__":
    run(main)
