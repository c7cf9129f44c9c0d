"""SQLite repository for per-project task status overrides.

Responsibilities:
  - Store the task statuses a project uses instead of the defaults.
Must not:
  - Synchronize workflows; the app facade does that in the same transaction.
"""

from __future__ import annotations

import sqlite3
from typing import Iterable


class ProjectTaskStatusRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def statuses_for(self, project_id: int) -> list[int]:
        rows = self._conn.execute(
            """
            SELECT issue_status_id
            FROM rb_project_task_statuses
            WHERE project_id = ?
            ORDER BY issue_status_id
            """,
            (project_id,),
        ).fetchall()
        return [int(row[0]) for row in rows]

    def replace_statuses(self, project_id: int, status_ids: Iterable[int]) -> None:
        self._conn.execute(
            "DELETE FROM rb_project_task_statuses WHERE project_id = ?",
            (project_id,),
        )
        self._conn.executemany(
            """
            INSERT INTO rb_project_task_statuses (project_id, issue_status_id)
            VALUES (?, ?)
            """,
            [(project_id, status_id) for status_id in sorted(set(status_ids))],
        )

    def all_override_status_ids(self) -> set[int]:
        rows = self._conn.execute(
            "SELECT DISTINCT issue_status_id FROM rb_project_task_statuses"
        ).fetchall()
        return {int(row[0]) for row in rows}
