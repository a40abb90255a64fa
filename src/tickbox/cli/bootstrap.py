# src/tickbox/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the task file into a TaskStore,
- builds the AppState the interaction loop runs on.

Startup never fails because of the task file: unreadable or malformed
content is backed up and the app starts with an empty list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import StoreFormatError, StoreReadError, StoreWriteError
from ..tasks.task_file import TaskFile
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def load_or_empty(task_file: TaskFile) -> tuple[list[Task], str | None]:
    """
    Load tasks, degrading to an empty list on read/format errors.

    Returns (tasks, notice); notice is None when loading went fine.
    """
    try:
        return task_file.load(), None
    except (StoreReadError, StoreFormatError) as e:
        logger.warning("Could not load %s, starting with an empty list: %s", task_file.path, e)
        notice = f"Could not load {task_file.path}; started with an empty list."

    try:
        backup = task_file.backup()
    except StoreWriteError as e:
        logger.warning("Backup of unreadable task file failed: %s", e)
        backup = None

    if backup is not None:
        notice = f"{notice} Old file kept as {backup.name}."
    return [], notice


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings() (which may raise
    HomeDirectoryUnavailable).
    """
    if settings is None:
        settings = get_settings()

    task_file = TaskFile(settings.tasks_path)
    tasks, notice = load_or_empty(task_file)

    store = TaskStore(tasks)
    logger.debug("State ready tasks=%d next_id=%d", len(store), store.next_id)

    return AppState(
        store=store,
        repo=task_file,
        app_name=getattr(settings, "app_name", "tickbox"),
        notice=notice,
    )

