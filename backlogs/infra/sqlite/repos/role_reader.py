"""SQLite reader for roles that receive task workflows."""

from __future__ import annotations

import sqlite3


class RoleReader:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def givable_role_ids(self) -> set[int]:
        # Builtin roles (non-member, anonymous) never hold task workflows.
        rows = self._conn.execute("SELECT id FROM roles WHERE builtin = 0").fetchall()
        return {int(row[0]) for row in rows}
