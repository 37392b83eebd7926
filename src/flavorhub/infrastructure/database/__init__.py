"""SQLite database engine and schema via SQLAlchemy Core."""

from flavorhub.infrastructure.database.engine import create_db_engine, init_database
from flavorhub.infrastructure.database.schema import metadata, recipes

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "recipes",
]
