"""Tests for --examples flag on CLI commands.

Parametrized to cover all commands that define examples text.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from flavorhub.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["recipe", "--examples"], ["flavorhub recipe list", "flavorhub recipe daily"]),
    (["recipe", "list", "--examples"], ["--difficulty hard", "--cuisine Italian"]),
    (["recipe", "get", "--examples"], ["flavorhub recipe get 1"]),
    (["recipe", "search", "--examples"], ["flavorhub recipe search curry"]),
    (["recipe", "add", "--examples"], ["--servings 1"]),
    (["recipe", "update", "--examples"], ["flavorhub recipe update 2"]),
    (["recipe", "delete", "--examples"], ["flavorhub recipe delete 4"]),
    (["recipe", "daily", "--examples"], ["--date 2025-12-25"]),
    (["init", "--examples"], ["flavorhub init", "--timezone Europe/Rome"]),
    (["upgrade", "--examples"], ["flavorhub upgrade --check"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS, ids=lambda v: str(v))
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_examples_not_in_short_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["recipe", "add", "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
    assert "Examples for" not in result.output
