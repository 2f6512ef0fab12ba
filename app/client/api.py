from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from app.client.errors import GENERIC_ERROR_DETAIL, QuestionsApiError
from app.game.questions.types import QuizQuestion

logger = structlog.get_logger(__name__)
QUESTIONS_PATH = "/api/questions"


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return GENERIC_ERROR_DETAIL
    if isinstance(payload, dict):
        detail = payload.get("error") or payload.get("message")
        if isinstance(detail, str) and detail.strip():
            return detail
    return GENERIC_ERROR_DETAIL


class QuestionsApiClient:
    """Thin async wrapper over the ``/api/questions`` endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport)

    async def __aenter__(self) -> QuestionsApiClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("questions_api_transport_failed", method=method, path=path, error=str(exc))
            raise QuestionsApiError(GENERIC_ERROR_DETAIL) from exc

        if response.is_error:
            detail = _error_detail(response)
            logger.info(
                "questions_api_request_failed",
                method=method,
                path=path,
                status_code=response.status_code,
                detail=detail,
            )
            raise QuestionsApiError(detail, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise QuestionsApiError(GENERIC_ERROR_DETAIL, status_code=response.status_code) from exc

    async def list_questions(self) -> list[QuizQuestion]:
        payload = await self._request("GET", QUESTIONS_PATH)
        return [QuizQuestion.from_payload(item) for item in payload]

    async def create_question(
        self,
        *,
        question: str,
        answers: Mapping[str, str],
        correct: Mapping[str, bool],
    ) -> QuizQuestion:
        payload = await self._request(
            "POST",
            QUESTIONS_PATH,
            json={
                "question": question,
                "answers": dict(answers),
                "correct": dict(correct),
            },
        )
        return QuizQuestion.from_payload(payload)

    async def delete_question(self, question_id: int) -> str:
        payload = await self._request("DELETE", f"{QUESTIONS_PATH}/{question_id}")
        return str(payload.get("message", "")) if isinstance(payload, dict) else ""
