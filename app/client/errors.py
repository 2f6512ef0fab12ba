from __future__ import annotations

GENERIC_ERROR_DETAIL = "Unexpected error"


class QuizClientError(Exception):
    pass


class QuestionsApiError(QuizClientError):
    def __init__(self, detail: str, *, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
