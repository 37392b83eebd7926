"""Database engine setup for SQLite with WAL mode.

SQLAlchemy Core (not ORM) is used because flavorhub is a short-lived
CLI process — no benefit from session management or identity maps.
The DB lives at ``{root}/.flavorhub/flavorhub.db`` unless configured
otherwise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from flavorhub.infrastructure.database.schema import metadata

DEFAULT_DB_RELPATH = Path(".flavorhub") / "flavorhub.db"


def set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
    """Connect listener: WAL journal and enforced foreign keys."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    event.listen(engine, "connect", set_sqlite_pragma)
    return engine


def resolve_db_path(root: Path, db_relpath: Path | str = DEFAULT_DB_RELPATH) -> Path:
    """Resolve the database file location relative to *root*.

    Absolute *db_relpath* values are returned unchanged.
    """
    path = Path(db_relpath)
    return path if path.is_absolute() else root / path


def init_database(root: Path, db_relpath: Path | str = DEFAULT_DB_RELPATH) -> Engine:
    """Initialize the flavorhub database under *root*.

    Creates the parent directory, a ``backups/`` sibling directory, and
    all tables from :data:`schema.metadata`.

    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    db_path = resolve_db_path(root, db_relpath)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    (db_path.parent / "backups").mkdir(exist_ok=True)

    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    return engine
