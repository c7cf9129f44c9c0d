"""Reconciliation of persisted task-tracker workflows against the required set.

Responsibilities:
  - Read the existing transitions for one tracker.
  - Diff them against the required set by wid.
  - Delete unused and create missing transitions through the TransitionStore.

Invariants:
  - After a successful run the tracker's persisted set equals the required set.
  - Transitions of other trackers are never read or written.
  - A transition already absent on delete is a no-op, not an error.
  - The first store failure propagates as PersistenceError; the caller owns
    the transaction and decides whether to roll back.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from ..domain.models import SyncResult, Transition
from .identity import transition_from_wid, transition_wid
from .ports import TransitionStore
from .required import required_workflows

log = structlog.get_logger()


def fetch_existing(store: TransitionStore, tracker_id: int) -> dict[str, Transition]:
    return {
        transition_wid(transition): transition
        for transition in store.find(tracker_id)
        if transition.tracker_id == tracker_id
    }


def _diff(
    store: TransitionStore,
    tracker_id: int,
    status_ids: Iterable[int],
    role_ids: Iterable[int],
) -> tuple[set[str], set[str]]:
    required = required_workflows(tracker_id, status_ids, role_ids)
    existing = fetch_existing(store, tracker_id)
    to_delete = set(existing) - set(required)
    to_insert = set(required) - set(existing)
    return to_delete, to_insert


def unused_workflows(
    store: TransitionStore,
    tracker_id: int,
    status_ids: Iterable[int],
    role_ids: Iterable[int],
) -> list[Transition]:
    """Transitions that exist but are no longer required."""
    to_delete, _ = _diff(store, tracker_id, status_ids, role_ids)
    return sorted(transition_from_wid(wid) for wid in to_delete)


def missing_workflows(
    store: TransitionStore,
    tracker_id: int,
    status_ids: Iterable[int],
    role_ids: Iterable[int],
) -> list[Transition]:
    """Transitions that are required but not persisted yet."""
    _, to_insert = _diff(store, tracker_id, status_ids, role_ids)
    return sorted(transition_from_wid(wid) for wid in to_insert)


def synchronize(
    store: TransitionStore,
    tracker_id: int,
    status_ids: Iterable[int],
    role_ids: Iterable[int],
) -> SyncResult:
    statuses = set(status_ids)
    roles = set(role_ids)
    to_delete, to_insert = _diff(store, tracker_id, statuses, roles)

    deleted: set[Transition] = set()
    for wid in sorted(to_delete):
        transition = transition_from_wid(wid)
        if store.delete(transition):
            deleted.add(transition)
        else:
            log.debug("workflow_already_absent", tracker_id=tracker_id, wid=wid)

    inserted: set[Transition] = set()
    for wid in sorted(to_insert):
        transition = transition_from_wid(wid)
        store.create(transition)
        inserted.add(transition)

    log.info(
        "task_workflows_synchronized",
        tracker_id=tracker_id,
        statuses=len(statuses),
        roles=len(roles),
        inserted=len(inserted),
        deleted=len(deleted),
    )
    return SyncResult(inserted=frozenset(inserted), deleted=frozenset(deleted))
