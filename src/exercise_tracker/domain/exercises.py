"""Domain models for exercise logging."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from exercise_tracker.domain.models import UserRecord


@dataclass(frozen=True)
class ExerciseRecord:
    """Exercise row as persisted."""

    id: UUID
    user_id: UUID
    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class LogQuery:
    """Filters applied when reading a user's exercise log.

    Both bounds are inclusive and independently optional. ``limit`` is either
    ``None`` (no cap) or a positive integer.
    """

    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None


@dataclass(frozen=True)
class ExerciseView:
    """A freshly logged exercise joined with its owner."""

    user: UserRecord
    exercise: ExerciseRecord


@dataclass(frozen=True)
class ExerciseLog:
    """Filtered exercise log for a user."""

    user: UserRecord
    entries: list[ExerciseRecord]

    @property
    def count(self) -> int:
        return len(self.entries)
