"""Error taxonomy for workflow reconciliation and plugin configuration."""

from __future__ import annotations

from typing import Optional

from .models import Transition


class MalformedTokenError(ValueError):
    """A workflow identity token did not decode into four integers."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Malformed workflow token: {token!r}")
        self.token = token


class PersistenceError(RuntimeError):
    """The transition store rejected a create or delete."""

    def __init__(self, operation: str, transition: Optional[Transition], detail: str = "") -> None:
        message = f"Workflow {operation} failed"
        if transition is not None:
            message += f" for {transition.as_tuple()}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.operation = operation
        self.transition = transition


class SettingsError(ValueError):
    pass


class PluginNotConfiguredError(RuntimeError):
    pass
