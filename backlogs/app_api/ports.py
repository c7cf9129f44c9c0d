"""Port re-exports for app-level dependencies.

Responsibilities:
  - Give app wiring one import point for provider and store contracts.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from backlogs.core.workflow.ports import RoleProvider, StatusUniverseProvider, TransitionStore

__all__ = ["RoleProvider", "StatusUniverseProvider", "TransitionStore"]
