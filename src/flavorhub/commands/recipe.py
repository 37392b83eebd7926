"""Command group: recipe CRUD, search, filters, and the recipe of the day."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

import click

from flavorhub.commands._base import FlavorGroup
from flavorhub.domain.recipes import DifficultyLevel
from flavorhub.services.recipes import RecipeService

if TYPE_CHECKING:
    from flavorhub.commands._context import AppContext

_RECIPE_EXAMPLES = """\
  flavorhub recipe list
  flavorhub recipe list --difficulty easy
  flavorhub recipe search pasta
  flavorhub recipe add "Spaghetti Carbonara" --cuisine Italian --difficulty medium
  flavorhub recipe update 3 --servings 6
  flavorhub recipe delete 3
  flavorhub recipe daily
  flavorhub --json recipe daily --date 2024-04-09"""

_DIFFICULTY = click.Choice([d.value for d in DifficultyLevel], case_sensitive=False)


def _recipe_options(*, name_option: bool) -> Any:
    """Shared field options for ``add`` and ``update``."""

    def decorator(func: Any) -> Any:
        options = [
            click.option("--description", default=None, help="Short description."),
            click.option("--instructions", default=None, help="Preparation steps."),
            click.option(
                "--difficulty",
                "difficulty_level",
                type=_DIFFICULTY,
                default=None,
                help="Difficulty level.",
            ),
            click.option("--cuisine", "cuisine_type", default=None, help="Cuisine type."),
            click.option(
                "--prep",
                "prep_time_minutes",
                type=click.IntRange(min=0),
                default=None,
                help="Prep time in minutes.",
            ),
            click.option(
                "--cook",
                "cook_time_minutes",
                type=click.IntRange(min=0),
                default=None,
                help="Cook time in minutes.",
            ),
            click.option("--servings", type=click.IntRange(min=1), default=None, help="Servings."),
        ]
        if name_option:
            options.append(click.option("--name", default=None, help="New recipe name."))
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


def _provided(**fields: Any) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if v is not None}


@click.group(cls=FlavorGroup, examples=_RECIPE_EXAMPLES)
@click.pass_obj
def recipe(app: AppContext) -> None:
    """Manage and query recipes."""


@recipe.command(
    name="list",
    examples="""\
  flavorhub recipe list
  flavorhub recipe list --difficulty hard
  flavorhub recipe list --cuisine Italian
  flavorhub -q recipe list""",
)
@click.option("--difficulty", type=_DIFFICULTY, default=None, help="Filter by difficulty.")
@click.option("--cuisine", default=None, help="Filter by cuisine type (exact match).")
@click.pass_obj
def list_cmd(app: AppContext, difficulty: str | None, cuisine: str | None) -> None:
    """List recipes, optionally filtered by difficulty or cuisine."""
    if difficulty and cuisine:
        raise click.UsageError("Use either --difficulty or --cuisine, not both.")
    svc = RecipeService(app.cookbook)
    if difficulty:
        result = svc.by_difficulty(difficulty)
    elif cuisine is not None:
        result = svc.by_cuisine(cuisine)
    else:
        result = svc.list_recipes()
    app.emit(result)


@recipe.command(
    examples="""\
  flavorhub recipe get 1
  flavorhub --json recipe get 1"""
)
@click.argument("recipe_id", type=int)
@click.pass_obj
def get(app: AppContext, recipe_id: int) -> None:
    """Show a single recipe by ID."""
    app.emit(RecipeService(app.cookbook).get(recipe_id))


@recipe.command(
    examples="""\
  flavorhub recipe search curry
  flavorhub --json recipe search cake"""
)
@click.argument("term")
@click.pass_obj
def search(app: AppContext, term: str) -> None:
    """Find recipes whose name contains TERM (case-insensitive)."""
    app.emit(RecipeService(app.cookbook).search(term))


@recipe.command(
    examples="""\
  flavorhub recipe add "Pad Thai" --cuisine Thai --difficulty medium
  flavorhub recipe add "Porridge" --prep 2 --cook 8 --servings 1"""
)
@click.argument("name")
@_recipe_options(name_option=False)
@click.pass_obj
def add(app: AppContext, name: str, **fields: Any) -> None:
    """Add a new recipe."""
    app.emit(RecipeService(app.cookbook).save(_provided(name=name, **fields)))


@recipe.command(
    examples="""\
  flavorhub recipe update 2 --name "Pad Thai (vegan)"
  flavorhub recipe update 2 --difficulty easy --servings 4"""
)
@click.argument("recipe_id", type=int)
@_recipe_options(name_option=True)
@click.pass_obj
def update(app: AppContext, recipe_id: int, **fields: Any) -> None:
    """Update fields of an existing recipe."""
    app.emit(RecipeService(app.cookbook).save(_provided(**fields), recipe_id=recipe_id))


@recipe.command(
    examples="""\
  flavorhub recipe delete 4"""
)
@click.argument("recipe_id", type=int)
@click.pass_obj
def delete(app: AppContext, recipe_id: int) -> None:
    """Delete a recipe by ID."""
    app.emit(RecipeService(app.cookbook).delete(recipe_id))


@recipe.command(
    examples="""\
  flavorhub recipe daily
  flavorhub recipe daily --date 2025-12-25
  flavorhub -q recipe daily"""
)
@click.option(
    "--date",
    "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Pick for this day instead of today (YYYY-MM-DD).",
)
@click.pass_obj
def daily(app: AppContext, on_date: datetime | None) -> None:
    """Show the recipe of the day."""
    if on_date is not None:
        from flavorhub.infrastructure.clock import FixedClock

        app.clock = FixedClock(on_date.date())
    app.emit(RecipeService(app.cookbook).daily())
