"""Output mode selection for ServiceResult.

JSON for machines (``--json``), IDs or a status line for ``--quiet``,
and op-specific Rich rendering otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from flavorhub.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from flavorhub.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the CLI root group."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    When *settings* is given it wins; *json_output* is only consulted
    without it.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
