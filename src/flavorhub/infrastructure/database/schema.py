"""SQLAlchemy Core table definitions for the flavorhub database.

Timestamps are stored as ISO-8601 text, matching what the service layer
writes. The Alembic baseline revision mirrors this module.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

recipes = Table(
    "recipes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("description", Text),
    Column("instructions", Text),
    Column("difficulty_level", Text),  # EASY | MEDIUM | HARD
    Column("cuisine_type", Text),
    Column("prep_time_minutes", Integer),
    Column("cook_time_minutes", Integer),
    Column("servings", Integer),
    Column("created", Text, nullable=False),
    Column("modified", Text, nullable=False),
)

Index("ix_recipes_difficulty_level", recipes.c.difficulty_level)
Index("ix_recipes_cuisine_type", recipes.c.cuisine_type)

# Columns callers may write; id and timestamps are managed separately.
WRITABLE_COLUMNS: tuple[str, ...] = (
    "name",
    "description",
    "instructions",
    "difficulty_level",
    "cuisine_type",
    "prep_time_minutes",
    "cook_time_minutes",
    "servings",
)
