from __future__ import annotations

import random
from collections.abc import Awaitable, Callable

import structlog

from app.client.api import QuestionsApiClient
from app.client.cache import QuestionListCache
from app.client.drafts import QuestionDraft
from app.client.errors import QuestionsApiError
from app.client.notifications import Notifier
from app.client.texts import TEXTS_EN
from app.game.labels import LabelSet
from app.game.questions.types import QuizQuestion
from app.game.sessions.errors import QuizSessionError
from app.game.sessions.quiz_session import AnswerRecord, QuizSession

logger = structlog.get_logger(__name__)

MODE_SETUP = "setup"
MODE_RUNNING = "running"

DeleteConfirmation = Callable[[int], Awaitable[bool]]


class QuizClient:
    """Client-side state: the authoring draft, the cached question list and the quiz session.

    The client is in ``setup`` mode until ``start_quiz`` succeeds and returns to
    it on ``restart_quiz``. Network failures are reported through the notifier
    and never change the session state.
    """

    def __init__(
        self,
        api: QuestionsApiClient,
        *,
        labels: LabelSet | None = None,
        quiz_size: int = 5,
        notifier: Notifier | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._api = api
        self.labels = labels or LabelSet.of_size()
        self.draft = QuestionDraft(labels=self.labels)
        self.quiz_size = quiz_size
        self.notifier = notifier or Notifier()
        self.cache = QuestionListCache(api.list_questions)
        self._rng = rng
        self._session: QuizSession | None = None

    @property
    def mode(self) -> str:
        return MODE_RUNNING if self._session is not None else MODE_SETUP

    @property
    def session(self) -> QuizSession | None:
        return self._session

    @property
    def questions(self) -> tuple[QuizQuestion, ...]:
        return self.cache.snapshot

    def find_question(self, question_id: int) -> QuizQuestion | None:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    async def load_questions(self) -> bool:
        try:
            await self.cache.get()
        except QuestionsApiError as exc:
            self.notifier.error(TEXTS_EN["toast.questions.load_failed"], description=exc.detail)
            return False
        return True

    async def _refresh_questions(self) -> None:
        try:
            await self.cache.refresh()
        except QuestionsApiError as exc:
            self.notifier.error(TEXTS_EN["toast.questions.load_failed"], description=exc.detail)

    async def submit_question(self) -> QuizQuestion | None:
        error_key = self.draft.validation_error()
        if error_key is not None:
            self.notifier.error(TEXTS_EN[error_key])
            return None

        try:
            created = await self._api.create_question(
                question=self.draft.question,
                answers=self.draft.answers,
                correct=self.draft.correct,
            )
        except QuestionsApiError as exc:
            logger.info("quiz_client_question_add_failed", status_code=exc.status_code)
            self.notifier.error(TEXTS_EN["toast.question.add_failed"], description=exc.detail)
            return None

        self.notifier.toast(TEXTS_EN["toast.question.added"])
        self.draft.reset()
        await self._refresh_questions()
        return created

    async def delete_question(self, question_id: int, *, confirm: DeleteConfirmation) -> bool:
        if not await confirm(question_id):
            return False

        try:
            await self._api.delete_question(question_id)
        except QuestionsApiError as exc:
            logger.info("quiz_client_question_delete_failed", question_id=question_id, status_code=exc.status_code)
            self.notifier.error(TEXTS_EN["toast.question.delete_failed"], description=exc.detail)
            return False

        self.notifier.toast(TEXTS_EN["toast.question.deleted"])
        await self._refresh_questions()
        return True

    def set_quiz_size(self, size: int) -> None:
        self.quiz_size = int(size)

    def can_start(self) -> bool:
        return len(self.questions) > 0

    def start_quiz(self) -> bool:
        if not self.can_start():
            self.notifier.error(TEXTS_EN["toast.quiz.no_questions"])
            return False

        self._session = QuizSession.start(self.questions, self.quiz_size, rng=self._rng)
        logger.debug("quiz_client_quiz_started", total=self._session.total, requested=self.quiz_size)
        return True

    def answer(self, index: int, label: str) -> AnswerRecord:
        if self._session is None:
            raise QuizSessionError("no quiz session is running")
        return self._session.answer(index, label)

    def restart_quiz(self) -> None:
        self._session = None
