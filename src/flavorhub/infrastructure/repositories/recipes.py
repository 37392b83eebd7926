"""Recipe repository — the persistent recipe store.

Rows come back as plain dicts; the service layer turns them into
:class:`~flavorhub.domain.recipes.Recipe` models.

INVARIANT: Every list query orders by ``id`` so repeated reads of an
unchanged table return rows in the same order. The recipe-of-the-day
selection relies on this.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, insert, select, update

from flavorhub.infrastructure.database.schema import WRITABLE_COLUMNS, recipes

if TYPE_CHECKING:
    from sqlalchemy import Connection, Select
    from sqlalchemy.engine import Engine


class RecipeRepository:
    """Encapsulates SQL for recipe reads and writes."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _fetch(self, stmt: Select[Any]) -> list[dict[str, Any]]:
        with self._engine.connect() as conn:
            rows = conn.execute(stmt.order_by(recipes.c.id)).mappings().all()
        return [dict(row) for row in rows]

    def find_all(self) -> list[dict[str, Any]]:
        """Snapshot of every recipe, ordered by id."""
        return self._fetch(select(recipes))

    def find_by_id(self, recipe_id: int) -> dict[str, Any] | None:
        stmt = select(recipes).where(recipes.c.id == recipe_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def find_by_difficulty_level(self, level: str) -> list[dict[str, Any]]:
        return self._fetch(select(recipes).where(recipes.c.difficulty_level == level))

    def find_by_cuisine_type(self, cuisine: str) -> list[dict[str, Any]]:
        return self._fetch(select(recipes).where(recipes.c.cuisine_type == cuisine))

    def find_by_name_containing(self, term: str) -> list[dict[str, Any]]:
        """Case-insensitive substring match on name.

        LIKE wildcards in *term* are escaped and match literally.
        """
        stmt = select(recipes).where(recipes.c.name.icontains(term, autoescape=True))
        return self._fetch(stmt)

    def count(self) -> int:
        with self._engine.connect() as conn:
            return int(conn.execute(select(func.count(recipes.c.id))).scalar_one() or 0)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @contextmanager
    def _begin(self, conn: Connection | None) -> Iterator[Connection]:
        """Join *conn* if given, else run inside a fresh transaction."""
        if conn is not None:
            yield conn
            return
        with self._engine.begin() as own:
            yield own

    @staticmethod
    def _writable(values: dict[str, Any]) -> dict[str, Any]:
        allowed = (*WRITABLE_COLUMNS, "created", "modified")
        return {k: v for k, v in values.items() if k in allowed}

    def insert(self, values: dict[str, Any], *, conn: Connection | None = None) -> int:
        """Insert a recipe row and return its new id."""
        with self._begin(conn) as c:
            result = c.execute(insert(recipes).values(**self._writable(values)))
            (new_id,) = result.inserted_primary_key or (None,)
        if new_id is None:
            msg = "Insert did not return a primary key"
            raise RuntimeError(msg)
        return int(new_id)

    def update(
        self,
        recipe_id: int,
        values: dict[str, Any],
        *,
        conn: Connection | None = None,
    ) -> bool:
        """Update columns of an existing row. Returns False if no row matched."""
        changes = self._writable(values)
        with self._begin(conn) as c:
            if not changes:
                row = c.execute(select(recipes.c.id).where(recipes.c.id == recipe_id)).first()
                return row is not None
            result = c.execute(update(recipes).where(recipes.c.id == recipe_id).values(**changes))
        return result.rowcount > 0

    def delete_by_id(self, recipe_id: int, *, conn: Connection | None = None) -> bool:
        """Delete one row. Returns False if no row matched."""
        with self._begin(conn) as c:
            result = c.execute(delete(recipes).where(recipes.c.id == recipe_id))
        return result.rowcount > 0
