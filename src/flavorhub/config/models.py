"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``flavorhub.toml`` only holds
overrides. A fresh catalogue needs no config at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the settings root.
    path: Path = Path(".flavorhub") / "flavorhub.db"


class DailyConfig(BaseModel):
    """[daily] section."""

    model_config = {"frozen": True}

    timezone: str = "UTC"

    @field_validator("timezone")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("timezone cannot be blank")
        return value
