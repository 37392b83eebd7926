"""Cookbook — the single dependency injected into every service.

Owns the database engine, the recipe repository, and the clock. Services
reach storage only through it, and open write transactions with
:meth:`Cookbook.transaction`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from flavorhub.infrastructure.clock import SystemClock
from flavorhub.infrastructure.database.engine import init_database
from flavorhub.infrastructure.repositories.recipes import RecipeRepository

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from flavorhub.config.settings import FlavorhubSettings
    from flavorhub.domain.daily import Clock

logger = logging.getLogger(__name__)


class Cookbook:
    """Storage, repository, and clock for one settings root.

    The database is created on construction if it does not exist.
    """

    def __init__(self, settings: FlavorhubSettings, *, clock: Clock | None = None) -> None:
        self._settings = settings
        self._engine = init_database(settings.root, settings.database.path)
        self._recipes = RecipeRepository(self._engine)
        self._clock: Clock = clock if clock is not None else SystemClock(settings.daily.timezone)
        logger.debug("Opened cookbook database at %s", self.db_path)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def recipes(self) -> RecipeRepository:
        return self._recipes

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def db_path(self) -> Path:
        return self._settings.db_path

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside one transaction.

        Commits on normal exit and rolls back if the block raises.
        """
        with self._engine.begin() as conn:
            yield conn

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
