"""Command: cookbook initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from flavorhub.commands._base import FlavorCommand

if TYPE_CHECKING:
    from flavorhub.commands._context import AppContext

_INIT_EXAMPLES = """\
  flavorhub init
  flavorhub init ~/cookbook --timezone Europe/Rome
  flavorhub init . --db data/recipes.db
  flavorhub init . --force"""


@click.command("init", cls=FlavorCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option(
    "--timezone",
    default="UTC",
    show_default=True,
    help="IANA timezone that decides when the recipe of the day changes.",
)
@click.option("--db", "db_path", default=None, help="Database file path relative to PATH.")
@click.option("--force", is_flag=True, help="Overwrite an existing flavorhub.toml.")
@click.pass_obj
def init_cmd(
    app: AppContext,
    path: str,
    timezone: str,
    db_path: str | None,
    force: bool,
) -> None:
    """Initialize a new flavorhub cookbook."""
    from flavorhub.services.init import InitService

    app.emit(
        InitService.init_cookbook(
            Path(path),
            timezone=timezone,
            db_path=db_path,
            force=force,
        )
    )
