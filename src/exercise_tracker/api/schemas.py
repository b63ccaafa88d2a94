"""Request payload models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Body of POST /api/users."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    username: str = Field(min_length=1)


class ExerciseCreate(BaseModel):
    """Body of POST /api/users/{id}/exercises."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    description: str = Field(min_length=1)
    duration: int = Field(gt=0)
    date: str | None = None
