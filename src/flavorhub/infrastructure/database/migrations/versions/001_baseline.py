"""Baseline schema — the recipes table.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-18

Databases created by ``flavorhub init`` are stamped at this revision
without running it; databases created before version tracking get it
stamped during ``flavorhub upgrade``.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("instructions", sa.Text),
        sa.Column("difficulty_level", sa.Text),
        sa.Column("cuisine_type", sa.Text),
        sa.Column("prep_time_minutes", sa.Integer),
        sa.Column("cook_time_minutes", sa.Integer),
        sa.Column("servings", sa.Integer),
        sa.Column("created", sa.Text, nullable=False),
        sa.Column("modified", sa.Text, nullable=False),
    )
    op.create_index("ix_recipes_difficulty_level", "recipes", ["difficulty_level"])
    op.create_index("ix_recipes_cuisine_type", "recipes", ["cuisine_type"])


def downgrade() -> None:
    op.drop_index("ix_recipes_cuisine_type", table_name="recipes")
    op.drop_index("ix_recipes_difficulty_level", table_name="recipes")
    op.drop_table("recipes")
