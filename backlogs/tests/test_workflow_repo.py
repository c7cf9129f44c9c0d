"""Tests for the SQLite workflow repository."""

from __future__ import annotations

import sqlite3

import pytest

from backlogs.core.domain.errors import PersistenceError
from backlogs.core.domain.models import Transition
from backlogs.infra.sqlite.migrator import apply_migrations
from backlogs.infra.sqlite.repos.workflow_repo import SqliteWorkflowRepo


def _repo() -> tuple[sqlite3.Connection, SqliteWorkflowRepo]:
    conn = sqlite3.connect(":memory:")
    apply_migrations(conn)
    return conn, SqliteWorkflowRepo(conn)


def test_find_is_scoped_to_tracker() -> None:
    conn, repo = _repo()
    repo.create(Transition(4, 10, 1, 2))
    repo.create(Transition(4, 10, 2, 1))
    repo.create(Transition(9, 10, 1, 2))

    assert repo.find(4) == {Transition(4, 10, 1, 2), Transition(4, 10, 2, 1)}
    assert repo.find(9) == {Transition(9, 10, 1, 2)}
    assert repo.count(4) == 2


def test_duplicate_create_raises_persistence_error() -> None:
    conn, repo = _repo()
    transition = Transition(4, 10, 1, 2)
    repo.create(transition)

    with pytest.raises(PersistenceError) as excinfo:
        repo.create(transition)

    assert excinfo.value.operation == "create"
    assert excinfo.value.transition == transition
    assert isinstance(excinfo.value.__cause__, sqlite3.IntegrityError)
    assert repo.count(4) == 1


def test_delete_reports_whether_row_existed() -> None:
    conn, repo = _repo()
    transition = Transition(4, 10, 1, 2)
    repo.create(transition)

    assert repo.delete(transition) is True
    assert repo.delete(transition) is False
    assert repo.find(4) == set()


def test_missing_table_surfaces_as_persistence_error() -> None:
    conn = sqlite3.connect(":memory:")
    repo = SqliteWorkflowRepo(conn)

    with pytest.raises(PersistenceError):
        repo.create(Transition(4, 10, 1, 2))
    with pytest.raises(PersistenceError):
        repo.delete(Transition(4, 10, 1, 2))


def test_migrations_are_repeatable() -> None:
    conn, repo = _repo()
    repo.create(Transition(4, 10, 1, 2))
    conn.commit()

    apply_migrations(conn)

    assert repo.count(4) == 1
