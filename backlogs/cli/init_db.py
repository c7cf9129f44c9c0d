"""Create or upgrade the backlogs schema and optionally seed plugin settings.

Purpose:
  - Apply SQL migrations and store settings from a JSON file.
Inputs:
  - CLI args (--db, optional --settings).
Outputs:
  - Printed status to stdout.
Example:
  - PYTHONPATH=. python3 backlogs/cli/init_db.py --db redmine.db --settings backlogs.json
"""

from __future__ import annotations

import argparse
from pathlib import Path

from backlogs.app_api.factories.build_app import build_backlogs_app
from backlogs.config.settings import load_settings
from backlogs.infra.observability.logging import configure_structlog
from backlogs.infra.sqlite.db import get_connection
from backlogs.infra.sqlite.migrator import apply_migrations


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Initialize backlogs tables")
    parser.add_argument("--db", required=True, help="Path to SQLite database")
    parser.add_argument("--settings", help="Path to settings JSON file")
    parser.add_argument("--log-env", default="development", choices=["development", "production"])
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_structlog(args.log_env)
    conn = get_connection(args.db)
    try:
        apply_migrations(conn)
        print("MIGRATIONS=applied")
        if args.settings:
            settings = load_settings(Path(args.settings))
            app = build_backlogs_app(conn)
            app.configure(settings)
            print(f"CONFIGURED={settings.is_configured()}")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
