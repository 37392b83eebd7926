"""Shared pytest fixtures and test helpers for flavorhub tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from flavorhub.config.settings import FlavorhubSettings
from flavorhub.infrastructure.clock import FixedClock
from flavorhub.infrastructure.cookbook import Cookbook
from flavorhub.infrastructure.database.engine import init_database

# Day 100 of 2024 (seed 2024100).
TEST_DAY = date(2024, 4, 9)


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Generator[None]:
    """Drop handlers installed by configure_logging() during a test.

    CliRunner swaps sys.stderr per invocation, so a handler left behind
    would point at a closed stream in later tests.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def cookbook_root(tmp_path: Path) -> Path:
    """Temporary cookbook directory.

    All cookbook-related fixtures (cookbook, _isolated_cookbook) build on this.
    """
    return tmp_path


@pytest.fixture
def cookbook(cookbook_root: Path) -> Generator[Cookbook]:
    """Cookbook on a temp directory with a clock pinned to TEST_DAY."""
    settings = FlavorhubSettings.from_cli(root=cookbook_root)
    cb = Cookbook(settings, clock=FixedClock(TEST_DAY))
    try:
        yield cb
    finally:
        cb.close()


@pytest.fixture
def _isolated_cookbook(cookbook_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp cookbook root so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_cookbook")`` on command test
    classes.
    """
    monkeypatch.delenv("FLAVORHUB_CONFIG", raising=False)
    monkeypatch.chdir(cookbook_root)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service test modules)
# ---------------------------------------------------------------------------


def add_recipe(cookbook: Cookbook, name: str, **fields: Any) -> dict[str, Any]:
    """Create a recipe via RecipeService, asserting success."""
    from flavorhub.services.recipes import RecipeService

    result = RecipeService(cookbook).save({"name": name, **fields})
    assert result.ok, result.error
    return result.data
