from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    id: int
    question: str
    answers: dict[str, str] = field(default_factory=dict)
    correct: dict[str, bool] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> QuizQuestion:
        return cls(
            id=int(payload["id"]),
            question=str(payload["question"]),
            answers={str(label): str(text) for label, text in dict(payload["answers"]).items()},
            correct={str(label): bool(flag) for label, flag in dict(payload["correct"]).items()},
        )

    def offered_answers(self) -> list[tuple[str, str]]:
        # Labels with empty text are not real options.
        return [(label, text) for label, text in self.answers.items() if text.strip()]

    def correct_labels(self) -> list[str]:
        return [label for label, flag in self.correct.items() if flag]

    def is_correct(self, label: str) -> bool:
        return bool(self.correct.get(label, False))
