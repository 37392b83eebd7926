"""RecipeService — catalogue CRUD, queries, and the recipe of the day.

Reads go straight to the repository (no transaction overhead). Writes
run inside ``Cookbook.transaction()``. Field validation is delegated to
the :class:`~flavorhub.domain.recipes.Recipe` model.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from flavorhub.domain.daily import InvalidDateError, as_date, date_seed, select_daily
from flavorhub.domain.recipes import Recipe, normalize_difficulty
from flavorhub.infrastructure.database.schema import WRITABLE_COLUMNS
from flavorhub.services._helpers import now_iso
from flavorhub.services.base import BaseService
from flavorhub.services.contracts import (
    DailyRecipeData,
    DeleteRecipeData,
    RecipeItem,
    RecipeListData,
    dump_validated,
)
from flavorhub.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _to_item(recipe: Recipe) -> dict[str, Any]:
    item = recipe.model_dump()
    item["total_time_minutes"] = recipe.total_time_minutes
    return item


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "recipe"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class RecipeService(BaseService):
    """Recipe catalogue operations."""

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _list_result(
        self,
        op: str,
        rows: list[dict[str, Any]],
        filters: dict[str, str] | None = None,
    ) -> ServiceResult:
        items = [_to_item(Recipe.model_validate(row)) for row in rows]
        data = dump_validated(
            RecipeListData,
            {"count": len(items), "items": items, "filters": filters or {}},
        )
        return ServiceResult(ok=True, op=op, data=data)

    def list_recipes(self) -> ServiceResult:
        """Every recipe in the catalogue, ordered by id."""
        return self._list_result("list_recipes", self._cookbook.recipes.find_all())

    def get(self, recipe_id: int) -> ServiceResult:
        """Retrieve one recipe by id."""
        op = "get_recipe"
        row = self._cookbook.recipes.find_by_id(recipe_id)
        if row is None:
            return ServiceResult.failure(
                op, "NOT_FOUND", f"No recipe with id {recipe_id}", id=recipe_id
            )
        data = dump_validated(RecipeItem, _to_item(Recipe.model_validate(row)))
        return ServiceResult(ok=True, op=op, data=data)

    def by_difficulty(self, level: str) -> ServiceResult:
        """Recipes at one difficulty level (EASY, MEDIUM, HARD; any case)."""
        op = "list_recipes"
        try:
            normalized = normalize_difficulty(level)
        except ValueError as exc:
            return ServiceResult.failure(op, "VALIDATION_ERROR", str(exc), difficulty=level)
        rows = self._cookbook.recipes.find_by_difficulty_level(normalized)
        return self._list_result(op, rows, {"difficulty_level": normalized})

    def by_cuisine(self, cuisine: str) -> ServiceResult:
        """Recipes with exactly this cuisine type."""
        op = "list_recipes"
        cuisine = cuisine.strip()
        if not cuisine:
            return ServiceResult.failure(op, "VALIDATION_ERROR", "Cuisine type cannot be empty")
        rows = self._cookbook.recipes.find_by_cuisine_type(cuisine)
        return self._list_result(op, rows, {"cuisine_type": cuisine})

    def search(self, term: str) -> ServiceResult:
        """Recipes whose name contains *term*, ignoring case."""
        op = "search_recipes"
        if not term.strip():
            return ServiceResult.failure(op, "EMPTY_QUERY", "Search term cannot be empty")
        rows = self._cookbook.recipes.find_by_name_containing(term)
        return self._list_result(op, rows, {"name_contains": term})

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, fields: dict[str, Any], *, recipe_id: int | None = None) -> ServiceResult:
        """Create a recipe, or update an existing one when *recipe_id* is given.

        On update, *fields* are merged over the stored values; a key set
        to None clears that column.
        """
        op = "save_recipe"
        unknown = sorted(set(fields) - set(WRITABLE_COLUMNS))
        if unknown:
            return ServiceResult.failure(
                op,
                "VALIDATION_ERROR",
                f"Unknown recipe fields: {', '.join(unknown)}",
                fields=unknown,
            )

        existing: dict[str, Any] = {}
        if recipe_id is not None:
            row = self._cookbook.recipes.find_by_id(recipe_id)
            if row is None:
                return ServiceResult.failure(
                    op, "NOT_FOUND", f"No recipe with id {recipe_id}", id=recipe_id
                )
            existing = row

        try:
            recipe = Recipe.model_validate({**existing, **fields})
        except ValidationError as exc:
            return ServiceResult.failure(op, "VALIDATION_ERROR", _validation_message(exc))

        now = now_iso()
        values = recipe.to_row()
        values["modified"] = now
        with self._cookbook.transaction() as conn:
            if recipe_id is None:
                values["created"] = now
                recipe_id = self._cookbook.recipes.insert(values, conn=conn)
                created = True
            else:
                if not self._cookbook.recipes.update(recipe_id, values, conn=conn):
                    return ServiceResult.failure(
                        op, "NOT_FOUND", f"No recipe with id {recipe_id}", id=recipe_id
                    )
                values["created"] = existing["created"]
                created = False

        saved = recipe.model_copy(update={"id": recipe_id, **values})
        logger.info("Saved recipe %s (ID: %s)", saved.name, saved.id)
        data = dump_validated(RecipeItem, _to_item(saved))
        data["created_new"] = created
        return ServiceResult(ok=True, op=op, data=data)

    def delete(self, recipe_id: int) -> ServiceResult:
        """Remove a recipe by id."""
        op = "delete_recipe"
        row = self._cookbook.recipes.find_by_id(recipe_id)
        if row is None:
            return ServiceResult.failure(
                op, "NOT_FOUND", f"No recipe with id {recipe_id}", id=recipe_id
            )

        with self._cookbook.transaction() as conn:
            deleted = self._cookbook.recipes.delete_by_id(recipe_id, conn=conn)

        logger.info("Deleted recipe %s (ID: %s)", row["name"], recipe_id)
        data = dump_validated(
            DeleteRecipeData,
            {"id": recipe_id, "name": row["name"], "deleted": deleted},
        )
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Recipe of the day
    # ------------------------------------------------------------------

    def daily(self) -> ServiceResult:
        """Pick the recipe of the day from a snapshot of the catalogue.

        The same recipe comes back all day as long as the catalogue is
        unchanged. An empty catalogue is not an error: ``recipe`` is None
        and a warning is attached.
        """
        op = "daily_recipe"
        logger.info("Fetching recipe of the day")
        clock_value = self._cookbook.clock.today()

        try:
            today = as_date(clock_value)
        except InvalidDateError as exc:
            return ServiceResult.failure(op, "INVALID_DATE", str(exc), value=repr(clock_value))
        seed = date_seed(today)

        snapshot = [Recipe.model_validate(row) for row in self._cookbook.recipes.find_all()]
        chosen = select_daily(snapshot, today)

        warnings: list[str] = []
        payload: dict[str, Any] = {
            "date": today.isoformat(),
            "seed": seed,
            "total": len(snapshot),
        }
        if chosen is None:
            logger.warning("No recipes available for recipe of the day")
            warnings.append("No recipes available for recipe of the day")
        else:
            logger.info("Selected recipe of the day: %s (ID: %s)", chosen.name, chosen.id)
            payload["index"] = seed % len(snapshot)
            payload["recipe"] = _to_item(chosen)

        data = dump_validated(DailyRecipeData, payload)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
