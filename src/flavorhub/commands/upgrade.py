"""Command: database schema migration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flavorhub.commands._base import FlavorCommand

if TYPE_CHECKING:
    from flavorhub.commands._context import AppContext


@click.command(
    cls=FlavorCommand,
    examples="""\
  flavorhub upgrade
  flavorhub upgrade --check
  flavorhub --json upgrade --check""",
)
@click.option(
    "--check", "check_only", is_flag=True, help="Show pending migrations without applying."
)
@click.pass_obj
def upgrade(app: AppContext, check_only: bool) -> None:
    """Run pending database migrations."""
    from flavorhub.services.upgrade import UpgradeService

    svc = UpgradeService(app.cookbook)
    app.emit(svc.check_pending() if check_only else svc.apply())
