"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Opens the Cookbook lazily and routes ServiceResult
output (stdout/stderr + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flavorhub.config.logging import configure_logging
from flavorhub.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from flavorhub.config.settings import FlavorhubSettings
    from flavorhub.domain.daily import Clock
    from flavorhub.infrastructure.cookbook import Cookbook
    from flavorhub.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The cookbook is opened on first use so ``--help``, ``--version`` and
    ``--examples`` never touch the database.
    """

    def __init__(self, settings: FlavorhubSettings) -> None:
        self.settings = settings
        self._cookbook: Cookbook | None = None
        # Overrides the configured system clock when set before first use.
        self.clock: Clock | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def cookbook(self) -> Cookbook:
        """The cookbook instance (opened lazily on first access)."""
        if self._cookbook is None:
            from flavorhub.infrastructure.cookbook import Cookbook

            try:
                self._cookbook = Cookbook(self.settings, clock=self.clock)
            except ValueError as exc:
                # Unknown timezone in [daily] config
                raise click.ClickException(str(exc)) from exc
        return self._cookbook

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries warnings in the payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        if self._cookbook is not None:
            self._cookbook.close()
            self._cookbook = None
