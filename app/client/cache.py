from __future__ import annotations

from collections.abc import Awaitable, Callable

import structlog

from app.game.questions.types import QuizQuestion

logger = structlog.get_logger(__name__)

QuestionsFetcher = Callable[[], Awaitable[list[QuizQuestion]]]


class QuestionListCache:
    """Read-through snapshot of the question list.

    The snapshot is only replaced by ``refresh``; callers invalidate it explicitly
    after every successful create or delete.
    """

    def __init__(self, fetch: QuestionsFetcher) -> None:
        self._fetch = fetch
        self._snapshot: tuple[QuizQuestion, ...] | None = None

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> tuple[QuizQuestion, ...]:
        return self._snapshot or ()

    def invalidate(self) -> None:
        self._snapshot = None

    async def get(self) -> tuple[QuizQuestion, ...]:
        if self._snapshot is None:
            return await self.refresh()
        return self._snapshot

    async def refresh(self) -> tuple[QuizQuestion, ...]:
        questions = tuple(await self._fetch())
        self._snapshot = questions
        logger.debug("question_list_cache_refreshed", total=len(questions))
        return questions
