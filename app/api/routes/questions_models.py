from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class QuestionCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    question: str
    answers: dict[str, str]
    correct: dict[str, bool]


class QuestionResponse(BaseModel):
    id: int
    question: str
    answers: dict[str, str]
    correct: dict[str, bool]


class QuestionDeletedResponse(BaseModel):
    message: str


def _as_response(record: object) -> QuestionResponse:
    return QuestionResponse(
        id=int(getattr(record, "id")),
        question=str(getattr(record, "question")),
        answers=dict(getattr(record, "answers")),
        correct=dict(getattr(record, "correct")),
    )
