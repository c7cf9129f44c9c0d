"""Workflow identity tokens ("wid").

A wid is the four integers of a transition joined by "-" in the order
tracker, role, old status, new status. Decimal formatting never emits the
separator, so the encoding is injective and decode is its exact inverse.
Tokens are diffing keys only; they are never shown to users.
"""

from __future__ import annotations

import re

from ..domain.errors import MalformedTokenError
from ..domain.models import Transition

WID_SEPARATOR = "-"

_COMPONENT_RE = re.compile(r"[0-9]+")


def encode(tracker_id: int, role_id: int, old_status_id: int, new_status_id: int) -> str:
    parts = (tracker_id, role_id, old_status_id, new_status_id)
    for value in parts:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"wid components must be non-negative ints, got {parts!r}")
    return WID_SEPARATOR.join(str(value) for value in parts)


def decode(token: str) -> tuple[int, int, int, int]:
    if not isinstance(token, str):
        raise MalformedTokenError(repr(token))
    parts = token.split(WID_SEPARATOR)
    if len(parts) != 4:
        raise MalformedTokenError(token)
    for part in parts:
        if not _COMPONENT_RE.fullmatch(part):
            raise MalformedTokenError(token)
    tracker_id, role_id, old_status_id, new_status_id = (int(part) for part in parts)
    return tracker_id, role_id, old_status_id, new_status_id


def transition_wid(transition: Transition) -> str:
    return encode(*transition.as_tuple())


def transition_from_wid(token: str) -> Transition:
    tracker_id, role_id, old_status_id, new_status_id = decode(token)
    return Transition(
        tracker_id=tracker_id,
        role_id=role_id,
        old_status_id=old_status_id,
        new_status_id=new_status_id,
    )
