from __future__ import annotations

from dataclasses import dataclass, field

from app.game.labels import LabelSet

ERROR_QUESTION_REQUIRED = "toast.validation.question_required"
ERROR_ANSWER_REQUIRED = "toast.validation.answer_required"
ERROR_CORRECT_REQUIRED = "toast.validation.correct_required"


@dataclass(slots=True)
class QuestionDraft:
    """Editable fields of a question that has not been submitted yet."""

    labels: LabelSet
    question: str = ""
    answers: dict[str, str] = field(default_factory=dict)
    correct: dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.answers:
            self.answers = self.labels.empty_answers()
        if not self.correct:
            self.correct = self.labels.empty_flags()

    def set_answer(self, label: str, text: str) -> None:
        if label not in self.labels:
            raise KeyError(label)
        self.answers[label] = text

    def set_correct(self, label: str, flag: bool) -> None:
        if label not in self.labels:
            raise KeyError(label)
        self.correct[label] = flag

    def validation_error(self) -> str | None:
        """Return the text key of the first unmet requirement, or None when submittable."""
        if not self.question.strip():
            return ERROR_QUESTION_REQUIRED
        if not any(text.strip() for text in self.answers.values()):
            return ERROR_ANSWER_REQUIRED
        if not any(self.correct.values()):
            return ERROR_CORRECT_REQUIRED
        return None

    def reset(self) -> None:
        self.question = ""
        self.answers = self.labels.empty_answers()
        self.correct = self.labels.empty_flags()
