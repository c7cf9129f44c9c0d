"""Tests for required-set generation."""

from __future__ import annotations

from backlogs.core.domain.models import Transition
from backlogs.core.workflow.required import required_workflows, workflows_for

TRACKER = 4


def _tuples(transitions) -> set[tuple[int, int, int]]:
    return {(t.role_id, t.old_status_id, t.new_status_id) for t in transitions}


def test_workflows_for_emits_both_directions_per_role():
    result = workflows_for(TRACKER, [10, 20], 1, 2)
    assert len(result) == 4
    assert _tuples(result) == {(10, 1, 2), (20, 1, 2), (10, 2, 1), (20, 2, 1)}
    assert all(t.tracker_id == TRACKER for t in result)


def test_three_statuses_one_role_yields_six():
    required = required_workflows(TRACKER, {1, 2, 3}, {10})
    assert len(required) == 6
    assert _tuples(required.values()) == {
        (10, 1, 2),
        (10, 2, 1),
        (10, 1, 3),
        (10, 3, 1),
        (10, 2, 3),
        (10, 3, 2),
    }


def test_empty_and_singleton_status_universe_yield_nothing():
    assert required_workflows(TRACKER, set(), {10, 20}) == {}
    assert required_workflows(TRACKER, {5}, {10, 20}) == {}


def test_no_roles_yields_nothing():
    assert required_workflows(TRACKER, {1, 2, 3}, set()) == {}


def test_never_generates_self_transitions():
    required = required_workflows(TRACKER, [1, 2, 2, 3, 4], [10, 10, 20])
    assert all(t.old_status_id != t.new_status_id for t in required.values())
    # 4 statuses -> 6 pairs, x2 directions, x2 roles
    assert len(required) == 24


def test_keys_are_wids_of_values():
    required = required_workflows(TRACKER, {1, 2}, {10})
    assert required == {
        "4-10-1-2": Transition(TRACKER, 10, 1, 2),
        "4-10-2-1": Transition(TRACKER, 10, 2, 1),
    }
