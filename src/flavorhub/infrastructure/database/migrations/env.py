"""Alembic environment for flavorhub migrations."""

from __future__ import annotations

from alembic import context
from sqlalchemy import create_engine, event, pool

from flavorhub.infrastructure.database.engine import set_sqlite_pragma
from flavorhub.infrastructure.database.schema import metadata


def _offline(url: str | None) -> None:
    context.configure(
        url=url,
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _online(url: str | None) -> None:
    assert url is not None, "sqlalchemy.url must be set in Alembic config"

    connectable = create_engine(url, poolclass=pool.NullPool)
    event.listen(connectable, "connect", set_sqlite_pragma)

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=metadata)
        with context.begin_transaction():
            context.run_migrations()


_url = context.config.get_main_option("sqlalchemy.url")
if context.is_offline_mode():
    _offline(_url)
else:
    _online(_url)
