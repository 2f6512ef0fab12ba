from __future__ import annotations

import asyncio

from app.db.repo.questions_repo import QuestionsRepo
from app.db.session import SessionLocal


async def _run() -> int:
    async with SessionLocal() as session:
        total = await QuestionsRepo.count_questions(session)

    print(f"questions_assert_non_empty total={total}")  # noqa: T201
    if total <= 0:
        print("questions_assert_non_empty failed: questions table is empty")  # noqa: T201
        return 1
    return 0


def main() -> int:
    return asyncio.run(_run())


if __name__ == "__main__":
    raise SystemExit(main())
