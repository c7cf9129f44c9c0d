"""SQLite-backed provider for roles that receive task workflows."""

from __future__ import annotations

import sqlite3

from backlogs.core.workflow.ports import RoleProvider
from backlogs.infra.sqlite.repos.role_reader import RoleReader


class SQLiteRoleProvider(RoleProvider):
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._reader = RoleReader(conn)

    def role_ids(self) -> set[int]:
        return self._reader.givable_role_ids()
