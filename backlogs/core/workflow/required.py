"""Required-set generation for the task tracker.

Responsibilities:
  - Produce every transition that should exist for the configured statuses and roles.

Invariants:
  - Every unordered pair of distinct statuses yields both directions for every role.
  - No self-transition (old == new) is ever produced.
  - Fewer than two statuses, or no roles, yields an empty set.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

from ..domain.models import Transition
from .identity import transition_wid


def workflows_for(
    tracker_id: int,
    role_ids: Iterable[int],
    status_id1: int,
    status_id2: int,
) -> list[Transition]:
    """Both directions between two statuses, for every role."""
    roles = list(role_ids)
    workflows: list[Transition] = []
    for old_status_id, new_status_id in ((status_id1, status_id2), (status_id2, status_id1)):
        for role_id in roles:
            workflows.append(
                Transition(
                    tracker_id=tracker_id,
                    role_id=role_id,
                    old_status_id=old_status_id,
                    new_status_id=new_status_id,
                )
            )
    return workflows


def required_workflows(
    tracker_id: int,
    status_ids: Iterable[int],
    role_ids: Iterable[int],
) -> dict[str, Transition]:
    """Return the required set keyed by wid.

    Inputs are deduplicated and sorted first so the enumeration order is
    stable across runs; the result itself is a set keyed on the token.
    """
    statuses = sorted(set(status_ids))
    roles = sorted(set(role_ids))
    result: dict[str, Transition] = {}
    if not roles:
        return result
    for status_id1, status_id2 in combinations(statuses, 2):
        for transition in workflows_for(tracker_id, roles, status_id1, status_id2):
            result[transition_wid(transition)] = transition
    return result
