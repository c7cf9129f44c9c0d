from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from backlogs.core.domain.errors import PluginNotConfiguredError, SettingsError

SETTING_KEYS = ("story_trackers", "task_tracker", "default_task_statuses")


@dataclass(frozen=True)
class BacklogsSettings:
    story_trackers: list[int] = field(default_factory=list)
    task_tracker: Optional[int] = None
    default_task_statuses: list[int] = field(default_factory=list)

    def is_configured(self) -> bool:
        return bool(self.story_trackers) and self.task_tracker is not None

    def require_task_tracker(self) -> int:
        if not self.is_configured() or self.task_tracker is None:
            raise PluginNotConfiguredError(
                "Backlogs is not configured: story_trackers and task_tracker must be set"
            )
        return self.task_tracker

    def to_payload(self) -> dict[str, Any]:
        return {
            "story_trackers": list(self.story_trackers),
            "task_tracker": self.task_tracker,
            "default_task_statuses": list(self.default_task_statuses),
        }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_int_list(payload: dict[str, Any], key: str) -> list[int]:
    if key not in payload:
        raise SettingsError(f"Missing required field '{key}' in settings")
    value = payload[key]
    if not isinstance(value, list):
        raise SettingsError(f"Field '{key}' must be a list of ints")
    for item in value:
        if not _is_int(item) or item <= 0:
            raise SettingsError(f"Field '{key}' must contain positive ints, got {item!r}")
    return list(dict.fromkeys(value))


def _optional_int(payload: dict[str, Any], key: str) -> Optional[int]:
    if key not in payload:
        raise SettingsError(f"Missing required field '{key}' in settings")
    value = payload[key]
    if value is None:
        return None
    if not _is_int(value) or value <= 0:
        raise SettingsError(f"Field '{key}' must be a positive int or null")
    return value


def settings_from_payload(payload: Any) -> BacklogsSettings:
    if not isinstance(payload, dict):
        raise SettingsError("Settings must be a JSON object")
    return BacklogsSettings(
        story_trackers=_require_int_list(payload, "story_trackers"),
        task_tracker=_optional_int(payload, "task_tracker"),
        default_task_statuses=_require_int_list(payload, "default_task_statuses"),
    )


def load_settings(path: Path) -> BacklogsSettings:
    if not path.exists():
        raise SettingsError(f"Settings file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SettingsError(f"Settings file is not valid JSON: {path}") from exc
    return settings_from_payload(payload)
