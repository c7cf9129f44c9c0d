"""Set the default or per-project task statuses.

Purpose:
  - Update default task statuses (queues a change notice) or a project's override
    (synchronizes immediately).
Inputs:
  - CLI args (--db, --statuses, optional --project).
Outputs:
  - Printed status to stdout.
Example:
  - PYTHONPATH=. python3 backlogs/cli/set_task_statuses.py --db redmine.db --statuses 1,2,3
  - PYTHONPATH=. python3 backlogs/cli/set_task_statuses.py --db redmine.db --project 7 --statuses 1,5
"""

from __future__ import annotations

import argparse

from backlogs.app_api.factories.build_app import build_backlogs_app
from backlogs.infra.observability.logging import configure_structlog
from backlogs.infra.sqlite.db import get_connection


def parse_status_ids(value: str) -> list[int]:
    status_ids: list[int] = []
    for part in value.split(","):
        stripped = part.strip()
        if not stripped:
            continue
        try:
            status_id = int(stripped)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid status id: {stripped!r}") from exc
        if status_id <= 0:
            raise argparse.ArgumentTypeError(f"status id must be positive: {status_id}")
        status_ids.append(status_id)
    return status_ids


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Set task statuses")
    parser.add_argument("--db", required=True, help="Path to SQLite database")
    parser.add_argument(
        "--statuses",
        required=True,
        type=parse_status_ids,
        help="Comma-separated issue status ids",
    )
    parser.add_argument("--project", type=int, help="Project id for a per-project override")
    parser.add_argument("--log-env", default="development", choices=["development", "production"])
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_structlog(args.log_env)
    conn = get_connection(args.db)
    try:
        app = build_backlogs_app(conn)
        if args.project is None:
            app.set_default_task_statuses(args.statuses)
            print("DEFAULT_TASK_STATUSES_UPDATED=1")
            print("PENDING_SYNC=1")
            return
        result = app.set_project_task_statuses(args.project, args.statuses)
        print(f"PROJECT={args.project}")
        if result is None:
            print("SYNC=skipped")
            return
        print(f"INSERTED_COUNT={len(result.inserted)}")
        print(f"DELETED_COUNT={len(result.deleted)}")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
