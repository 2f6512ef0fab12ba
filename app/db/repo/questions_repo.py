from __future__ import annotations

from collections.abc import Mapping

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.questions import Question


class QuestionsRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, question_id: int) -> Question | None:
        return await session.get(Question, question_id)

    @staticmethod
    async def list_questions(session: AsyncSession) -> list[Question]:
        stmt = select(Question).order_by(Question.id.asc())
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def count_questions(session: AsyncSession) -> int:
        stmt = select(func.count()).select_from(Question)
        return int((await session.execute(stmt)).scalar_one())

    @staticmethod
    async def insert_question(
        session: AsyncSession,
        *,
        question: str,
        answers: Mapping[str, str],
        correct: Mapping[str, bool],
    ) -> Question:
        record = Question(
            question=question,
            answers=dict(answers),
            correct=dict(correct),
        )
        session.add(record)
        await session.flush()
        await session.refresh(record)
        return record

    @staticmethod
    async def delete_question(session: AsyncSession, question_id: int) -> int:
        stmt = delete(Question).where(Question.id == question_id)
        result = await session.execute(stmt)
        return int(result.rowcount or 0)
