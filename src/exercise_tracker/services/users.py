"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Raised when a referenced user does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in storage order."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""


@dataclass
class UserService:
    """Application service for the user directory."""

    repository: UserRepository

    def create_user(self, username: str) -> UserRecord:
        """Create a user. Duplicate usernames are allowed."""
        cleaned = username.strip()
        if not cleaned:
            raise ValueError("username must not be empty")
        user = self.repository.create_user(cleaned)
        logger.info("Created user", extra={"user_id": str(user.id)})
        return user

    def list_users(self) -> list[UserRecord]:
        """Return every user."""
        return self.repository.list_users()

    def get_user(self, user_id: str | UUID) -> UserRecord:
        """Return a user or raise UserNotFoundError."""
        parsed = parse_user_id(user_id)
        user = self.repository.get_user(parsed) if parsed else None
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user


def parse_user_id(raw: str | UUID) -> UUID | None:
    """Parse an identifier from a request path, or None if malformed."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(raw.strip())
    except ValueError:
        return None
