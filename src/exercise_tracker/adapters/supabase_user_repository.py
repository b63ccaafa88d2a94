"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from exercise_tracker.adapters.supabase_pagination import DEFAULT_PAGE_SIZE, fetch_all
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client
    table: str = "users"
    page_size: int = DEFAULT_PAGE_SIZE

    def create_user(self, username: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table(self.table).insert({"username": username}).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""
        rows = fetch_all(
            lambda: self.client.table(self.table)
            .select("id, username")
            .order("created_at", desc=False),
            page_size=self.page_size,
        )
        return [_parse_user(row) for row in rows]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table(self.table)
            .select("id, username")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(id=UUID(str(row["id"])), username=str(row["username"]))
