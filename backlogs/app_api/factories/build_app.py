"""Construct a fully wired app instance for workflow maintenance.

Responsibilities:
  - Assemble the transition store and the status/role providers.
Must not:
  - Implement reconciliation logic; composition only.
"""

from __future__ import annotations

import sqlite3

from backlogs.app_api.facade import BacklogsApplication
from backlogs.app_api.providers.sqlite_role_provider import SQLiteRoleProvider
from backlogs.app_api.providers.sqlite_status_universe_provider import SQLiteStatusUniverseProvider
from backlogs.infra.sqlite.repos.workflow_repo import SqliteWorkflowRepo


def build_backlogs_app(conn: sqlite3.Connection) -> BacklogsApplication:
    """
    Composition root: build and wire the store and providers and return the
    application facade.
    """
    return BacklogsApplication(
        conn=conn,
        store=SqliteWorkflowRepo(conn),
        status_provider=SQLiteStatusUniverseProvider(conn),
        role_provider=SQLiteRoleProvider(conn),
    )
