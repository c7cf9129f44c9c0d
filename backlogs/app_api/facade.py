"""Application facade for task workflow maintenance.

Responsibilities:
  - Run every reconciliation inside one SQLite write transaction.
  - Turn settings and per-project status changes into synchronizations.
  - Report a held write lock (after the connection timeout) as PersistenceError.
Must not:
  - Implement diffing; that lives in core.workflow.reconciler.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

import structlog

from backlogs.config.settings import BacklogsSettings, settings_from_payload
from backlogs.core.domain.errors import PersistenceError, SettingsError
from backlogs.core.domain.models import SyncResult, Transition
from backlogs.core.workflow.reconciler import missing_workflows, synchronize, unused_workflows
from backlogs.infra.sqlite.repos.issue_status_reader import IssueStatusReader
from backlogs.infra.sqlite.repos.project_task_status_repo import ProjectTaskStatusRepo
from backlogs.infra.sqlite.repos.settings_repo import SettingsRepo
from .ports import RoleProvider, StatusUniverseProvider, TransitionStore

log = structlog.get_logger()


class BacklogsApplication:
    def __init__(
        self,
        conn: sqlite3.Connection,
        store: TransitionStore,
        status_provider: StatusUniverseProvider,
        role_provider: RoleProvider,
    ) -> None:
        self._conn = conn
        self._store = store
        self._status_provider = status_provider
        self._role_provider = role_provider
        self._settings_repo = SettingsRepo(conn)
        self._project_repo = ProjectTaskStatusRepo(conn)
        self._status_reader = IssueStatusReader(conn)

    @contextmanager
    def _write_transaction(self) -> Iterator[None]:
        # Write lock is held from before the diff is read until commit.
        try:
            self._conn.execute("BEGIN IMMEDIATE")
        except sqlite3.OperationalError as exc:
            log.error("backlogs_write_lock_unavailable", error=str(exc))
            raise PersistenceError("begin", None, str(exc)) from exc
        try:
            yield
            self._conn.commit()
        except Exception as exc:
            self._conn.rollback()
            log.error("backlogs_transaction_rolled_back", error=str(exc), error_type=type(exc).__name__)
            raise

    def _require_known_statuses(self, status_ids: list[int]) -> None:
        unknown = self._status_reader.unknown_ids(status_ids)
        if unknown:
            raise SettingsError(f"Unknown issue status ids: {unknown}")

    def settings(self) -> BacklogsSettings:
        return self._settings_repo.load()

    def ensure_configured(self) -> int:
        return self.settings().require_task_tracker()

    def _synchronize(self) -> SyncResult:
        tracker_id = self.ensure_configured()
        return synchronize(
            self._store,
            tracker_id,
            self._status_provider.status_ids(),
            self._role_provider.role_ids(),
        )

    def synchronize_task_workflows(self) -> SyncResult:
        """Synchronize unconditionally; any pending notices are satisfied too."""
        with self._write_transaction():
            self._settings_repo.consume_notices()
            return self._synchronize()

    def preview(self) -> tuple[list[Transition], list[Transition]]:
        """Return (unused, missing) without writing anything."""
        tracker_id = self.ensure_configured()
        status_ids = self._status_provider.status_ids()
        role_ids = self._role_provider.role_ids()
        return (
            unused_workflows(self._store, tracker_id, status_ids, role_ids),
            missing_workflows(self._store, tracker_id, status_ids, role_ids),
        )

    def configure(self, settings: BacklogsSettings) -> None:
        with self._write_transaction():
            previous = self._settings_repo.load()
            self._settings_repo.save(settings)
            if (
                previous.task_tracker != settings.task_tracker
                or set(previous.default_task_statuses) != set(settings.default_task_statuses)
            ):
                self._settings_repo.add_notice()
                log.info("task_statuses_changed_notice_added", source="configure")

    def set_default_task_statuses(self, status_ids: Iterable[int]) -> None:
        with self._write_transaction():
            current = self._settings_repo.load()
            payload = current.to_payload()
            payload["default_task_statuses"] = list(status_ids)
            updated = settings_from_payload(payload)
            self._require_known_statuses(updated.default_task_statuses)
            self._settings_repo.save(updated)
            self._settings_repo.add_notice()
            log.info("task_statuses_changed_notice_added", source="default_task_statuses")

    def set_project_task_statuses(
        self, project_id: int, status_ids: Iterable[int]
    ) -> Optional[SyncResult]:
        statuses = list(status_ids)
        with self._write_transaction():
            self._require_known_statuses(statuses)
            self._project_repo.replace_statuses(project_id, statuses)
            if not self.settings().is_configured():
                log.warning("task_workflow_sync_skipped", project_id=project_id, reason="not_configured")
                return None
            return self._synchronize()

    def process_pending_changes(self) -> Optional[SyncResult]:
        """Consume pending notices and synchronize once if there were any."""
        with self._write_transaction():
            consumed = self._settings_repo.consume_notices()
            if consumed == 0:
                return None
            log.info("task_statuses_changed_notices_consumed", count=consumed)
            return self._synchronize()
