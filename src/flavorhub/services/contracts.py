"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so shape
regressions (a renamed key, a missing count) fail fast in tests.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class RecipeItem(BaseModel):
    """One recipe as returned to callers."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    description: str | None = None
    instructions: str | None = None
    difficulty_level: str | None = None
    cuisine_type: str | None = None
    prep_time_minutes: int | None = None
    cook_time_minutes: int | None = None
    total_time_minutes: int | None = None
    servings: int | None = None
    created: str
    modified: str


class RecipeListData(BaseModel):
    """Payload contract for list and search operations."""

    count: int
    items: list[RecipeItem]
    filters: dict[str, str] = Field(default_factory=dict)


class DailyRecipeData(BaseModel):
    """Payload contract for ``RecipeService.daily``.

    ``seed`` is the raw date seed; ``index`` is its position in the
    catalogue. Both ``index`` and ``recipe`` are None when the catalogue
    is empty.
    """

    date: str
    seed: int
    total: int
    index: int | None = None
    recipe: RecipeItem | None = None


class DeleteRecipeData(BaseModel):
    """Payload contract for ``RecipeService.delete``."""

    id: int
    name: str
    deleted: bool
