"""Alembic migrations, configured in code (no alembic.ini).

Revision scripts live in ``versions/`` next to this module.
"""

from __future__ import annotations

from pathlib import Path

from alembic.config import Config


def sqlite_url(db_path: Path) -> str:
    return f"sqlite:///{db_path}"


def build_config(db_path: Path) -> Config:
    """Alembic Config for the database file at *db_path*."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).parent))
    cfg.set_main_option("sqlalchemy.url", sqlite_url(db_path))
    return cfg
