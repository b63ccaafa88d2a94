"""Tests for container wiring."""

import asyncio

from exercise_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from exercise_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from exercise_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    settings.exercises_table = "workouts"
    container = build_container(settings)

    assert isinstance(container.user_service.repository, SupabaseUserRepository)
    repository = container.exercise_log_service.repository
    assert isinstance(repository, SupabaseExerciseRepository)
    assert repository.table == "workouts"
    assert container.exercise_log_service.user_service is container.user_service
    asyncio.run(container.close_resources())
