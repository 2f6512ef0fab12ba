from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from app.game.questions.types import QuizQuestion
from app.game.sessions.errors import (
    NoQuestionsAvailableError,
    QuestionAlreadyAnsweredError,
    QuestionIndexOutOfRangeError,
)

MIN_QUIZ_SIZE = 1


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    index: int
    is_correct: bool
    label: str


@dataclass(frozen=True, slots=True)
class QuizResult:
    correct_count: int
    total: int

    @property
    def ratio(self) -> float:
        if self.total <= 0:
            return 0.0
        return self.correct_count / self.total

    @property
    def percentage(self) -> float:
        return round(self.ratio * 100, 2)


def effective_quiz_size(requested: int, available: int) -> int:
    return min(max(MIN_QUIZ_SIZE, requested), available)


def sample_questions(
    pool: Sequence[QuizQuestion],
    size: int,
    *,
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    """Uniformly sample up to ``size`` questions without replacement, in random order.

    ``random.sample`` performs a partial Fisher-Yates shuffle, so every ordered
    subset of the requested length is equally likely. Sizes below one are clamped
    to one.
    """
    if not pool:
        raise NoQuestionsAvailableError("no questions available to start a quiz")
    count = effective_quiz_size(size, len(pool))
    return (rng or random).sample(list(pool), count)


class QuizSession:
    """One client-local quiz run: a fixed question sample plus append-only answers."""

    def __init__(self, questions: Sequence[QuizQuestion]) -> None:
        self._questions: tuple[QuizQuestion, ...] = tuple(questions)
        self._answers: list[AnswerRecord] = []

    @classmethod
    def start(
        cls,
        pool: Sequence[QuizQuestion],
        size: int,
        *,
        rng: random.Random | None = None,
    ) -> QuizSession:
        return cls(sample_questions(pool, size, rng=rng))

    @property
    def questions(self) -> tuple[QuizQuestion, ...]:
        return self._questions

    @property
    def user_answers(self) -> tuple[AnswerRecord, ...]:
        return tuple(self._answers)

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def correct_count(self) -> int:
        return sum(1 for record in self._answers if record.is_correct)

    @property
    def is_complete(self) -> bool:
        return len(self._answers) == len(self._questions)

    def question_at(self, index: int) -> QuizQuestion:
        if index < 0 or index >= len(self._questions):
            raise QuestionIndexOutOfRangeError(f"question index {index} is out of range")
        return self._questions[index]

    def answer_for(self, index: int) -> AnswerRecord | None:
        for record in self._answers:
            if record.index == index:
                return record
        return None

    def is_answered(self, index: int) -> bool:
        return self.answer_for(index) is not None

    def unanswered_indexes(self) -> list[int]:
        return [index for index in range(len(self._questions)) if not self.is_answered(index)]

    def answer(self, index: int, label: str) -> AnswerRecord:
        question = self.question_at(index)
        if self.is_answered(index):
            raise QuestionAlreadyAnsweredError(f"question index {index} is already answered")

        record = AnswerRecord(index=index, is_correct=question.is_correct(label), label=label)
        self._answers.append(record)
        return record

    def result(self) -> QuizResult:
        return QuizResult(correct_count=self.correct_count, total=self.total)
