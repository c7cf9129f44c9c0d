"""Port definitions consumed by the workflow reconciler.

Responsibilities:
  - Define interface contracts for the transition store and the status/role providers.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Protocol

from ..domain.models import Transition


class TransitionStore(Protocol):
    def find(self, tracker_id: int) -> set[Transition]:
        """All persisted transitions for tracker_id, read at call time."""
        ...

    def create(self, transition: Transition) -> None:
        """Persist transition; raise PersistenceError if the store rejects it."""
        ...

    def delete(self, transition: Transition) -> bool:
        """Remove transition; False when it was already absent."""
        ...


class StatusUniverseProvider(Protocol):
    def status_ids(self) -> set[int]:
        ...


class RoleProvider(Protocol):
    def role_ids(self) -> set[int]:
        ...
