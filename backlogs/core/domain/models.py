"""Domain models for task-tracker workflow transitions.

Responsibilities:
  - Define the immutable Transition record and the result of a reconciliation run.

Invariants:
  - Transition equality and hashing are over the 4-tuple only.
  - Models are data carriers with no persistence behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Transition:
    tracker_id: int
    role_id: int
    old_status_id: int
    new_status_id: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.tracker_id, self.role_id, self.old_status_id, self.new_status_id)


@dataclass(frozen=True)
class SyncResult:
    inserted: frozenset[Transition] = field(default_factory=frozenset)
    deleted: frozenset[Transition] = field(default_factory=frozenset)

    @property
    def changed(self) -> bool:
        return bool(self.inserted or self.deleted)
