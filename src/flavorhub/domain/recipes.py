"""Recipe model and difficulty levels.

The store owns the recipe lifecycle. This model only validates field
values on the way in and gives rows a typed shape on the way out.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

NAME_MAX_LENGTH = 200


class DifficultyLevel(StrEnum):
    """Difficulty levels accepted for a recipe."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


def normalize_difficulty(level: str) -> str:
    """Upper-case and validate a difficulty level.

    Raises:
        ValueError: *level* is not one of :class:`DifficultyLevel`.
    """
    normalized = level.strip().upper()
    try:
        return DifficultyLevel(normalized).value
    except ValueError:
        allowed = ", ".join(d.value for d in DifficultyLevel)
        msg = f"Unknown difficulty level '{level}' (expected one of: {allowed})"
        raise ValueError(msg) from None


class Recipe(BaseModel):
    """A persisted (or about to be persisted) recipe."""

    model_config = {"frozen": True}

    id: int | None = None
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = None
    instructions: str | None = None
    difficulty_level: str | None = None
    cuisine_type: str | None = None
    prep_time_minutes: int | None = Field(default=None, ge=0)
    cook_time_minutes: int | None = Field(default=None, ge=0)
    servings: int | None = Field(default=None, ge=1)
    created: str | None = None
    modified: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("difficulty_level", mode="before")
    @classmethod
    def _check_difficulty(cls, value: Any) -> Any:
        if isinstance(value, str):
            return normalize_difficulty(value)
        return value

    @field_validator("cuisine_type", mode="before")
    @classmethod
    def _blank_cuisine_is_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @property
    def total_time_minutes(self) -> int | None:
        """Prep plus cook time, or None when neither is known."""
        if self.prep_time_minutes is None and self.cook_time_minutes is None:
            return None
        return (self.prep_time_minutes or 0) + (self.cook_time_minutes or 0)

    def to_row(self) -> dict[str, Any]:
        """Column values for the store, excluding id and timestamps."""
        return self.model_dump(exclude={"id", "created", "modified"})
