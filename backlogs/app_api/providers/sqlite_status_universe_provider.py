"""SQLite-backed provider for the task-status universe.

Responsibilities:
  - Union the default task statuses with every per-project override.
Must not:
  - Touch workflow rows.
"""

from __future__ import annotations

import sqlite3

from backlogs.core.workflow.ports import StatusUniverseProvider
from backlogs.infra.sqlite.repos.project_task_status_repo import ProjectTaskStatusRepo
from backlogs.infra.sqlite.repos.settings_repo import SettingsRepo


class SQLiteStatusUniverseProvider(StatusUniverseProvider):
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._settings_repo = SettingsRepo(conn)
        self._project_repo = ProjectTaskStatusRepo(conn)

    def status_ids(self) -> set[int]:
        defaults = set(self._settings_repo.load().default_task_statuses)
        return defaults | self._project_repo.all_override_status_ids()
