"""SQLite repository for plugin settings and pending-change notices.

Responsibilities:
  - Persist BacklogsSettings as one JSON value per setting key.
  - Record and consume "task statuses changed" notices.
Must not:
  - Commit; the caller owns the transaction.
"""

from __future__ import annotations

import datetime
import json
import sqlite3

from backlogs.config.settings import SETTING_KEYS, BacklogsSettings, settings_from_payload
from backlogs.core.domain.errors import SettingsError

TASK_STATUSES_CHANGED = "task_statuses_changed"

_DEFAULTS = BacklogsSettings().to_payload()


def _now() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


class SettingsRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def load(self) -> BacklogsSettings:
        rows = self._conn.execute("SELECT name, value_json FROM backlogs_settings").fetchall()
        payload = dict(_DEFAULTS)
        for row in rows:
            name = row[0]
            if name not in SETTING_KEYS:
                continue
            try:
                payload[name] = json.loads(row[1])
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Stored setting '{name}' is not valid JSON") from exc
        return settings_from_payload(payload)

    def save(self, settings: BacklogsSettings) -> None:
        for name, value in settings.to_payload().items():
            self._conn.execute(
                """
                INSERT INTO backlogs_settings (name, value_json)
                VALUES (?, ?)
                ON CONFLICT(name) DO UPDATE SET value_json = excluded.value_json
                """,
                (name, json.dumps(value, separators=(",", ":"))),
            )

    def add_notice(self, notice_type: str = TASK_STATUSES_CHANGED) -> None:
        self._conn.execute(
            "INSERT INTO backlogs_notices (notice_type, created_at) VALUES (?, ?)",
            (notice_type, _now()),
        )

    def pending_notices(self, notice_type: str = TASK_STATUSES_CHANGED) -> int:
        row = self._conn.execute(
            """
            SELECT COUNT(*)
            FROM backlogs_notices
            WHERE notice_type = ? AND consumed_at IS NULL
            """,
            (notice_type,),
        ).fetchone()
        return int(row[0])

    def consume_notices(self, notice_type: str = TASK_STATUSES_CHANGED) -> int:
        cur = self._conn.execute(
            """
            UPDATE backlogs_notices
            SET consumed_at = ?
            WHERE notice_type = ? AND consumed_at IS NULL
            """,
            (_now(), notice_type),
        )
        return cur.rowcount
