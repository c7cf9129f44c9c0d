"""Tests for plugin settings validation and persistence."""

from __future__ import annotations

import json
import sqlite3

import pytest

from backlogs.config.settings import BacklogsSettings, load_settings, settings_from_payload
from backlogs.core.domain.errors import PluginNotConfiguredError, SettingsError
from backlogs.infra.sqlite.migrator import apply_migrations
from backlogs.infra.sqlite.repos.settings_repo import SettingsRepo


def _payload(**overrides):
    payload = {"story_trackers": [2, 3], "task_tracker": 4, "default_task_statuses": [1, 2, 2, 5]}
    payload.update(overrides)
    return payload


def test_payload_is_validated_and_deduplicated():
    settings = settings_from_payload(_payload())
    assert settings.story_trackers == [2, 3]
    assert settings.task_tracker == 4
    assert settings.default_task_statuses == [1, 2, 5]
    assert settings.is_configured()
    assert settings.require_task_tracker() == 4


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"story_trackers": [2], "task_tracker": 4},
        _payload(task_tracker="4"),
        _payload(task_tracker=True),
        _payload(story_trackers="2"),
        _payload(default_task_statuses=[1, -2]),
        _payload(default_task_statuses=[1.0]),
    ],
)
def test_invalid_payload_raises(payload):
    with pytest.raises(SettingsError):
        settings_from_payload(payload)


def test_unconfigured_settings_refuse_task_tracker():
    for settings in [
        BacklogsSettings(),
        BacklogsSettings(story_trackers=[2], task_tracker=None),
        BacklogsSettings(story_trackers=[], task_tracker=4),
    ]:
        assert not settings.is_configured()
        with pytest.raises(PluginNotConfiguredError):
            settings.require_task_tracker()


def test_load_settings_from_file(tmp_path):
    path = tmp_path / "backlogs.json"
    path.write_text(json.dumps(_payload()), encoding="utf-8")
    assert load_settings(path).task_tracker == 4

    with pytest.raises(SettingsError):
        load_settings(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(broken)


def test_settings_repo_round_trip_and_notices():
    conn = sqlite3.connect(":memory:")
    apply_migrations(conn)
    repo = SettingsRepo(conn)

    assert repo.load() == BacklogsSettings()

    settings = settings_from_payload(_payload())
    repo.save(settings)
    assert repo.load() == settings

    assert repo.pending_notices() == 0
    repo.add_notice()
    repo.add_notice()
    assert repo.pending_notices() == 2
    assert repo.consume_notices() == 2
    assert repo.pending_notices() == 0
    assert repo.consume_notices() == 0
