"""User directory and exercise log endpoints."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, TypeVar

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from pydantic import BaseModel, ValidationError

from exercise_tracker.api.schemas import ExerciseCreate, UserCreate
from exercise_tracker.domain.dates import format_calendar_date
from exercise_tracker.services.users import UserNotFoundError

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer
    from exercise_tracker.domain.exercises import ExerciseLog, ExerciseView
    from exercise_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

_NOT_FOUND = "User not found"

PayloadT = TypeVar("PayloadT", bound=BaseModel)


@router.post("", response_model=None)
async def create_user(request: Request) -> dict[str, str] | PlainTextResponse:
    """Create a user from a form or JSON body."""
    container: AppContainer = request.app.state.container
    payload = await _parse_body(request, UserCreate)
    if isinstance(payload, PlainTextResponse):
        return payload
    try:
        user = await run_in_threadpool(
            container.user_service.create_user, payload.username
        )
    except Exception:
        logger.exception("Error creating user")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error creating user")
    return _serialize_user(user)


@router.get("", response_model=None)
async def list_users(request: Request) -> list[dict[str, str]] | PlainTextResponse:
    """Return every user."""
    container: AppContainer = request.app.state.container
    try:
        users = await run_in_threadpool(container.user_service.list_users)
    except Exception:
        logger.exception("Error getting users")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error getting users")
    return [_serialize_user(user) for user in users]


@router.post("/{user_id}/exercises", response_model=None)
async def add_exercise(
    user_id: str, request: Request
) -> dict[str, object] | PlainTextResponse:
    """Log an exercise for a user."""
    container: AppContainer = request.app.state.container
    payload = await _parse_body(request, ExerciseCreate)
    if isinstance(payload, PlainTextResponse):
        return payload
    try:
        view = await run_in_threadpool(
            container.exercise_log_service.add_exercise,
            user_id=user_id,
            description=payload.description,
            duration=payload.duration,
            raw_date=payload.date,
        )
    except UserNotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, _NOT_FOUND)
    except Exception:
        logger.exception("Error adding exercise", extra={"user_id": user_id})
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error adding exercise")
    return _serialize_exercise_view(view)


@router.get("/{user_id}/logs", response_model=None)
async def get_log(
    user_id: str,
    request: Request,
    date_from: str | None = Query(default=None, alias="from"),
    date_to: str | None = Query(default=None, alias="to"),
    limit: str | None = None,
) -> dict[str, object] | PlainTextResponse:
    """Return a user's exercise log, optionally filtered and limited."""
    container: AppContainer = request.app.state.container
    try:
        log = await run_in_threadpool(
            container.exercise_log_service.get_log,
            user_id,
            date_from=date_from,
            date_to=date_to,
            limit=limit,
        )
    except UserNotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, _NOT_FOUND)
    except Exception:
        logger.exception("Error getting exercise log", extra={"user_id": user_id})
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Error getting exercise log"
        )
    return _serialize_log(log)


async def _parse_body(
    request: Request, model: type[PayloadT]
) -> PayloadT | PlainTextResponse:
    """Validate a JSON or form body against a payload model."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            raw = await request.json()
        else:
            raw = dict(await request.form())
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error(status.HTTP_400_BAD_REQUEST, "Malformed request body")
    if not isinstance(raw, dict):
        return _error(status.HTTP_400_BAD_REQUEST, "Request body must be an object")
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, _validation_message(exc))


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def _error(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def _serialize_user(user: UserRecord) -> dict[str, str]:
    return {"username": user.username, "id": str(user.id)}


def _serialize_exercise_view(view: ExerciseView) -> dict[str, object]:
    return {
        "id": str(view.user.id),
        "username": view.user.username,
        "description": view.exercise.description,
        "duration": view.exercise.duration,
        "date": format_calendar_date(view.exercise.date),
    }


def _serialize_log(log: ExerciseLog) -> dict[str, object]:
    return {
        "id": str(log.user.id),
        "username": log.user.username,
        "count": log.count,
        "log": [
            {
                "description": entry.description,
                "duration": entry.duration,
                "date": format_calendar_date(entry.date),
            }
            for entry in log.entries
        ],
    }
