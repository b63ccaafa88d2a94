"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from exercise_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from exercise_tracker.adapters.supabase_store import SupabaseStore
from exercise_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from exercise_tracker.config import Settings
from exercise_tracker.domain.dates import resolve_timezone
from exercise_tracker.services.exercises import ExerciseLogService
from exercise_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    exercise_log_service: ExerciseLogService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = SupabaseStore.create(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(
        store.client, table=resolved_settings.users_table
    )
    exercise_repository = SupabaseExerciseRepository(
        store.client, table=resolved_settings.exercises_table
    )
    user_service = UserService(user_repository)
    exercise_log_service = ExerciseLogService(
        user_service=user_service,
        repository=exercise_repository,
        timezone=resolve_timezone(resolved_settings.timezone),
    )

    async def close_resources() -> None:
        store.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        exercise_log_service=exercise_log_service,
        close_resources=close_resources,
    )
