"""SQLite repository for workflow transition rows.

Responsibilities:
  - Read, insert, and delete workflow rows for one tracker.
Must not:
  - Commit or roll back; the caller owns the transaction.
"""

from __future__ import annotations

import sqlite3

from backlogs.core.domain.errors import PersistenceError
from backlogs.core.domain.models import Transition
from backlogs.core.workflow.ports import TransitionStore


class SqliteWorkflowRepo(TransitionStore):
    def __init__(self, conn: sqlite3.Connection, table_name: str = "workflows") -> None:
        self._conn = conn
        self._table = table_name

    def find(self, tracker_id: int) -> set[Transition]:
        rows = self._conn.execute(
            f"""
            SELECT tracker_id, role_id, old_status_id, new_status_id
            FROM {self._table}
            WHERE tracker_id = ?
            """,
            (tracker_id,),
        ).fetchall()
        return {
            Transition(
                tracker_id=int(row[0]),
                role_id=int(row[1]),
                old_status_id=int(row[2]),
                new_status_id=int(row[3]),
            )
            for row in rows
        }

    def create(self, transition: Transition) -> None:
        try:
            self._conn.execute(
                f"""
                INSERT INTO {self._table} (tracker_id, role_id, old_status_id, new_status_id)
                VALUES (?, ?, ?, ?)
                """,
                transition.as_tuple(),
            )
        except sqlite3.Error as exc:
            raise PersistenceError("create", transition, str(exc)) from exc

    def delete(self, transition: Transition) -> bool:
        try:
            cur = self._conn.execute(
                f"""
                DELETE FROM {self._table}
                WHERE tracker_id = ? AND role_id = ? AND old_status_id = ? AND new_status_id = ?
                """,
                transition.as_tuple(),
            )
        except sqlite3.Error as exc:
            raise PersistenceError("delete", transition, str(exc)) from exc
        return cur.rowcount > 0

    def count(self, tracker_id: int) -> int:
        row = self._conn.execute(
            f"SELECT COUNT(*) FROM {self._table} WHERE tracker_id = ?",
            (tracker_id,),
        ).fetchone()
        return int(row[0])
