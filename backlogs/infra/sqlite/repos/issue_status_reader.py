"""SQLite reader for host issue statuses."""

from __future__ import annotations

import sqlite3
from typing import Iterable


class IssueStatusReader:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def unknown_ids(self, status_ids: Iterable[int]) -> list[int]:
        wanted = sorted(set(status_ids))
        if not wanted:
            return []
        placeholders = ",".join("?" for _ in wanted)
        rows = self._conn.execute(
            f"SELECT id FROM issue_statuses WHERE id IN ({placeholders})",
            wanted,
        ).fetchall()
        known = {int(row[0]) for row in rows}
        return [status_id for status_id in wanted if status_id not in known]
