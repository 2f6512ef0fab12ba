from __future__ import annotations

import re
from typing import Any

import structlog
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.db.repo.questions_repo import QuestionsRepo
from app.db.session import SessionLocal

from .questions_models import (
    QuestionCreateRequest,
    QuestionDeletedResponse,
    QuestionResponse,
    _as_response,
)

router = APIRouter(prefix="/api/questions", tags=["questions"])
logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("question", "answers", "correct")
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

ERROR_FETCH_FAILED = "Failed to fetch questions"
ERROR_MISSING_FIELDS = "Missing required fields"
ERROR_INVALID_PAYLOAD = "Invalid question payload"
ERROR_ADD_FAILED = "Failed to add question"
ERROR_INVALID_ID = "Invalid question ID"
ERROR_DELETE_FAILED = "Failed to delete question"
MESSAGE_DELETED = "Question deleted successfully"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _parse_question_id(raw: str) -> int | None:
    match = LEADING_INT_RE.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _has_required_fields(body: Any) -> bool:
    if not isinstance(body, dict):
        return False
    return all(body.get(field) for field in REQUIRED_FIELDS)


async def _read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("", response_model=list[QuestionResponse])
async def list_questions() -> list[QuestionResponse] | JSONResponse:
    try:
        async with SessionLocal() as session:
            records = await QuestionsRepo.list_questions(session)
    except Exception:
        logger.exception("questions_list_failed")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_FETCH_FAILED)

    return [_as_response(record) for record in records]


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(request: Request) -> QuestionResponse | JSONResponse:
    body = await _read_json_body(request)
    if not _has_required_fields(body):
        return _error(status.HTTP_400_BAD_REQUEST, ERROR_MISSING_FIELDS)

    try:
        payload = QuestionCreateRequest.model_validate(body)
    except ValidationError:
        logger.info("question_create_rejected", reason="invalid_payload")
        return _error(status.HTTP_400_BAD_REQUEST, ERROR_INVALID_PAYLOAD)

    try:
        async with SessionLocal.begin() as session:
            record = await QuestionsRepo.insert_question(
                session,
                question=payload.question,
                answers=payload.answers,
                correct=payload.correct,
            )
            response = _as_response(record)
    except Exception:
        logger.exception("question_create_failed")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_ADD_FAILED)

    logger.info("question_created", question_id=response.id)
    return response


@router.delete("/{question_id}", response_model=QuestionDeletedResponse)
async def delete_question(question_id: str) -> QuestionDeletedResponse | JSONResponse:
    parsed_id = _parse_question_id(question_id)
    if parsed_id is None:
        return _error(status.HTTP_400_BAD_REQUEST, ERROR_INVALID_ID)

    try:
        async with SessionLocal.begin() as session:
            deleted = await QuestionsRepo.delete_question(session, parsed_id)
    except Exception:
        logger.exception("question_delete_failed", question_id=parsed_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_DELETE_FAILED)

    logger.info("question_deleted", question_id=parsed_id, deleted=deleted)
    return QuestionDeletedResponse(message=MESSAGE_DELETED)
