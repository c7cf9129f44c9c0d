"""Synchronize task tracker workflows with the configured statuses and roles.

Purpose:
  - Consume pending "task statuses changed" notices and reconcile, or force a full run.
Inputs:
  - CLI args (--db, --force, --dry-run).
Outputs:
  - Printed inserted/deleted transitions and counts to stdout.
Example:
  - PYTHONPATH=. python3 backlogs/cli/sync_task_workflows.py --db redmine.db --force
"""

from __future__ import annotations

import argparse

from backlogs.app_api.factories.build_app import build_backlogs_app
from backlogs.core.domain.models import Transition
from backlogs.core.workflow.identity import transition_wid
from backlogs.infra.observability.logging import configure_structlog
from backlogs.infra.sqlite.db import get_connection


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronize task tracker workflows")
    parser.add_argument("--db", required=True, help="Path to SQLite database")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Synchronize even when no change notice is pending",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print unused and missing workflows without writing",
    )
    parser.add_argument("--verbose", action="store_true", help="Print every transition")
    parser.add_argument("--log-env", default="development", choices=["development", "production"])
    return parser.parse_args()


def _print_transitions(label: str, transitions: list[Transition], verbose: bool) -> None:
    if verbose:
        for transition in transitions:
            print(f"{label} {transition_wid(transition)}")
    print(f"{label}_COUNT={len(transitions)}")


def main() -> None:
    args = parse_args()
    configure_structlog(args.log_env)
    conn = get_connection(args.db)
    try:
        app = build_backlogs_app(conn)
        if args.dry_run:
            unused, missing = app.preview()
            _print_transitions("UNUSED", unused, args.verbose)
            _print_transitions("MISSING", missing, args.verbose)
            return

        if args.force:
            result = app.synchronize_task_workflows()
        else:
            result = app.process_pending_changes()
        if result is None:
            print("NO_PENDING_CHANGES")
            return
        _print_transitions("DELETED", sorted(result.deleted), args.verbose)
        _print_transitions("INSERTED", sorted(result.inserted), args.verbose)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
