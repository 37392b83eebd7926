"""Subcommand modules for flavorhub.

Provides register_commands(); imports are deferred so ``flavorhub --help``
never loads SQLAlchemy or Alembic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the recipe group and the standalone commands on the root group."""
    from flavorhub.commands.init_cmd import init_cmd
    from flavorhub.commands.recipe import recipe
    from flavorhub.commands.upgrade import upgrade

    cli.add_command(recipe)
    cli.add_command(init_cmd)
    cli.add_command(upgrade)
