"""InitService — cookbook initialization.

Pipeline: VALIDATE → WRITE CONFIG → CREATE DATABASE → STAMP → REPORT

A failed database step leaves no new config behind, so a retry is not
reported as ALREADY_INITIALIZED.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from flavorhub.config.discovery import CONFIG_FILENAME, render_config
from flavorhub.config.settings import FlavorhubSettings
from flavorhub.infrastructure.clock import SystemClock
from flavorhub.infrastructure.cookbook import Cookbook
from flavorhub.services.result import ServiceResult
from flavorhub.services.upgrade import UpgradeService

logger = logging.getLogger(__name__)


class InitService:
    """Creates a cookbook directory with config and a stamped database."""

    @staticmethod
    def init_cookbook(
        path: Path,
        *,
        timezone: str = "UTC",
        db_path: str | None = None,
        force: bool = False,
    ) -> ServiceResult:
        """Initialize a cookbook at *path*.

        Writes a sparse ``flavorhub.toml`` (only non-default values), then
        opens the database so its tables exist and stamps it at the
        current Alembic head.
        """
        op = "init"
        root = path.resolve()

        try:
            SystemClock(timezone)
        except ValueError as exc:
            return ServiceResult.failure(op, "VALIDATION_ERROR", str(exc), timezone=timezone)

        toml_path = root / CONFIG_FILENAME
        if toml_path.exists() and not force:
            return ServiceResult.failure(
                op,
                "ALREADY_INITIALIZED",
                f"{CONFIG_FILENAME} already exists in {root} (use --force to overwrite)",
                config_path=str(toml_path),
            )

        try:
            text = render_config(timezone=timezone, db_path=db_path)
        except ValueError as exc:
            return ServiceResult.failure(op, "VALIDATION_ERROR", str(exc))

        previous = toml_path.read_text(encoding="utf-8") if toml_path.exists() else None
        try:
            root.mkdir(parents=True, exist_ok=True)
            toml_path.write_text(text, encoding="utf-8")
            settings = FlavorhubSettings.from_cli(config_path=str(toml_path), root=root)
            cookbook = Cookbook(settings)
        except (OSError, SQLAlchemyError) as exc:
            _restore_config(toml_path, previous)
            return ServiceResult.failure(
                op, "INIT_FAILED", f"Failed to create database: {exc}", root=str(root)
            )
        try:
            stamp = UpgradeService(cookbook).stamp_current()
        finally:
            cookbook.close()
        if not stamp.ok:
            _restore_config(toml_path, previous)
            return stamp

        logger.info("Initialized cookbook at %s", root)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "root": str(root),
                "config_path": str(toml_path),
                "db_path": str(settings.db_path),
                "timezone": settings.daily.timezone,
                "current": stamp.data["current"],
            },
        )


def _restore_config(toml_path: Path, previous: str | None) -> None:
    """Put the config file back the way it was before a failed init."""
    if previous is None:
        toml_path.unlink(missing_ok=True)
    else:
        toml_path.write_text(previous, encoding="utf-8")
