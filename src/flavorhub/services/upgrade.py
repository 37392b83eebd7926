"""UpgradeService — database migration with Alembic.

Pipeline: CHECK → BACKUP → MIGRATE (or STAMP) → REPORT
"""

from __future__ import annotations

import logging
import shutil
from typing import TYPE_CHECKING, Any

from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import inspect

from flavorhub.infrastructure.database.migrations import build_config
from flavorhub.services._helpers import now_compact
from flavorhub.services.base import BaseService
from flavorhub.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class UpgradeService(BaseService):
    """Handles database schema migrations via Alembic."""

    def _tables_exist(self) -> bool:
        """True when the recipes table predates Alembic version tracking."""
        return "recipes" in inspect(self._cookbook.engine).get_table_names()

    def _backup_db(self) -> Path:
        """Copy the database file into the ``backups/`` directory beside it."""
        db_path = self._cookbook.db_path
        backup_dir = db_path.parent / "backups"
        backup_dir.mkdir(parents=True, exist_ok=True)
        backup_path = backup_dir / f"{db_path.stem}-{now_compact()}{db_path.suffix}"
        shutil.copy2(db_path, backup_path)
        return backup_path

    def check_pending(self) -> ServiceResult:
        """List pending migrations without applying."""
        op = "upgrade"

        try:
            script = ScriptDirectory.from_config(build_config(self._cookbook.db_path))
            head = script.get_current_head()

            with self._cookbook.engine.connect() as conn:
                current = MigrationContext.configure(conn).get_current_revision()

            # Walk from head down to the current revision
            pending: list[dict[str, Any]] = []
            if current != head and head is not None:
                rev_obj = script.get_revision(head)
                while rev_obj is not None and rev_obj.revision != current:
                    pending.append({"revision": rev_obj.revision, "description": rev_obj.doc or ""})
                    down = rev_obj.down_revision
                    if down is None:
                        break
                    rev_obj = script.get_revision(str(down))
        except Exception as exc:
            return ServiceResult.failure(op, "CHECK_FAILED", f"Failed to check migrations: {exc}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pending_count": len(pending),
                "pending": pending,
                "current": current,
                "head": head,
            },
        )

    def apply(self) -> ServiceResult:
        """Back up the database, then bring it to the head revision."""
        op = "upgrade"

        check_result = self.check_pending()
        if not check_result.ok:
            return check_result

        pending_count = check_result.data["pending_count"]
        head = check_result.data["head"]
        if pending_count == 0:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "current": head,
                    "message": "Database is already up to date",
                },
            )

        try:
            backup_path = self._backup_db()
        except OSError as exc:
            return ServiceResult.failure(op, "BACKUP_FAILED", f"Backup failed: {exc}")

        stamped = False
        try:
            cfg = build_config(self._cookbook.db_path)
            if check_result.data["current"] is None and self._tables_exist():
                # Tables were created from schema.metadata without version
                # tracking; record head instead of re-creating them.
                command.stamp(cfg, "head")
                stamped = True
            else:
                command.upgrade(cfg, "head")
        except Exception as exc:
            return ServiceResult.failure(
                op,
                "MIGRATION_FAILED",
                f"Migration failed: {exc}. Backup at: {backup_path}",
                backup_path=str(backup_path),
            )

        logger.info("Database upgraded to %s (backup: %s)", head, backup_path)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "applied_count": 0 if stamped else pending_count,
                "stamped": stamped,
                "current": head,
                "backup_path": str(backup_path),
            },
        )

    def stamp_current(self) -> ServiceResult:
        """Stamp the database as at head (for freshly created databases)."""
        op = "upgrade"

        try:
            cfg = build_config(self._cookbook.db_path)
            command.stamp(cfg, "head")
            head = ScriptDirectory.from_config(cfg).get_current_head()
        except Exception as exc:
            return ServiceResult.failure(op, "STAMP_FAILED", f"Failed to stamp database: {exc}")

        return ServiceResult(ok=True, op=op, data={"stamped": True, "current": head})
