"""Supabase repository for exercise entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from exercise_tracker.adapters.supabase_pagination import DEFAULT_PAGE_SIZE, fetch_all
from exercise_tracker.domain.exercises import ExerciseRecord, LogQuery
from exercise_tracker.services.exercises import ExerciseRepository

_COLUMNS = "id, user_id, description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise entries."""

    client: Client
    table: str = "exercises"
    page_size: int = DEFAULT_PAGE_SIZE

    def create_exercise(
        self, user_id: UUID, description: str, duration: int, day: date
    ) -> ExerciseRecord:
        """Create an exercise row and return it."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "user_id": str(user_id),
                    "description": description,
                    "duration": duration,
                    "date": day.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise in Supabase")
        return _parse_row(response.data[0])

    def list_exercises(self, user_id: UUID, query: LogQuery) -> list[ExerciseRecord]:
        """Return exercises for a user in insertion order."""

        def build_request():
            request = (
                self.client.table(self.table)
                .select(_COLUMNS)
                .eq("user_id", str(user_id))
            )
            if query.date_from is not None:
                request = request.gte("date", query.date_from.isoformat())
            if query.date_to is not None:
                request = request.lte("date", query.date_to.isoformat())
            return request.order("created_at", desc=False)

        rows = fetch_all(build_request, page_size=self.page_size, limit=query.limit)
        return [_parse_row(row) for row in rows]


def _parse_row(row: dict[str, object]) -> ExerciseRecord:
    return ExerciseRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        description=str(row.get("description", "")),
        duration=int(row.get("duration", 0)),
        date=date.fromisoformat(str(row["date"])[:10]),
    )
