"""Exercise logging and log queries."""

import logging
import re
from dataclasses import dataclass, field
from datetime import UTC, date, tzinfo
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.dates import parse_calendar_date, today
from exercise_tracker.domain.exercises import (
    ExerciseLog,
    ExerciseRecord,
    ExerciseView,
    LogQuery,
)
from exercise_tracker.services.users import UserService

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


class ExerciseRepository(Protocol):
    """Persistence interface for exercise entries."""

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, day: date
    ) -> ExerciseRecord:
        """Create and return an exercise row."""

    def list_exercises(self, user_id: UUID, query: LogQuery) -> list[ExerciseRecord]:
        """Return a user's exercises in insertion order, filtered by the query."""


@dataclass
class ExerciseLogService:
    """Service for appending to and reading exercise logs."""

    user_service: UserService
    repository: ExerciseRepository
    timezone: tzinfo = field(default=UTC)

    def add_exercise(
        self,
        user_id: str | UUID,
        description: str,
        duration: int,
        raw_date: str | None = None,
    ) -> ExerciseView:
        """Log an exercise for an existing user.

        A missing or unparsable date silently becomes today's date.
        """
        user = self.user_service.get_user(user_id)
        day = parse_calendar_date(raw_date, self.timezone)
        if day is None:
            if raw_date and raw_date.strip():
                logger.info(
                    "Unparsable exercise date, using today",
                    extra={"raw_date": raw_date},
                )
            day = today(self.timezone)
        exercise = self.repository.create_exercise(
            user_id=user.id,
            description=description,
            duration=duration,
            day=day,
        )
        logger.info(
            "Logged exercise",
            extra={"user_id": str(user.id), "exercise_id": str(exercise.id)},
        )
        return ExerciseView(user=user, exercise=exercise)

    def get_log(
        self,
        user_id: str | UUID,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: str | int | None = None,
    ) -> ExerciseLog:
        """Return a user's exercises within [date_from, date_to], capped by limit."""
        user = self.user_service.get_user(user_id)
        query = build_log_query(date_from, date_to, limit, self.timezone)
        entries = self.repository.list_exercises(user.id, query)
        return ExerciseLog(user=user, entries=entries)


def build_log_query(
    date_from: str | None,
    date_to: str | None,
    limit: str | int | None,
    tz: tzinfo = UTC,
) -> LogQuery:
    """Build a log query from raw request values.

    Unparsable bounds are dropped and non-positive or non-numeric limits
    mean no cap.
    """
    return LogQuery(
        date_from=parse_calendar_date(date_from, tz),
        date_to=parse_calendar_date(date_to, tz),
        limit=parse_limit(limit),
    )


def parse_limit(raw: str | int | None) -> int | None:
    """Return a positive integer limit or None."""
    if raw is None:
        return None
    if isinstance(raw, int):
        value = raw
    else:
        cleaned = raw.strip()
        if not _INTEGER.fullmatch(cleaned):
            return None
        value = int(cleaned)
    return value if value > 0 else None
