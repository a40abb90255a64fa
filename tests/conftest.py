# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tickbox.core.state import AppState
from tickbox.tasks.task_file import TaskFile
from tickbox.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the user's home directory.
    """
    data_dir = tmp_path / ".tickbox"
    return SimpleNamespace(
        app_name="tickbox",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        log_dir=data_dir,
    )


@pytest.fixture()
def task_file(settings: SimpleNamespace) -> TaskFile:
    return TaskFile(settings.tasks_path)


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def state(repo: FakeTaskRepo) -> AppState:
    """Empty AppState wired to the in-memory repo."""
    return AppState(store=TaskStore(), repo=repo)


@pytest.fixture()
def make_state(repo: FakeTaskRepo):
    """Build an AppState pre-filled with the given titles."""

    def _make(*titles: str) -> AppState:
        store = TaskStore()
        for title in titles:
            store.add(title)
        return AppState(store=store, repo=repo)

    return _make
