# src/tickbox/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .task_models import Task, clip_title

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list.

    The only place that assigns ids or mutates the list:
    - ids grow monotonically and are never reused while the store lives
    - next_id starts one past the highest loaded id, so reloading from disk
      keeps that guarantee
    - index-based operations report out-of-range as False instead of raising

    Not thread-safe; the controller owns it exclusively.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

        ids = [t.id for t in self._tasks]
        if len(set(ids)) != len(ids):
            raise ValueError("duplicate task ids in initial sequence")

        self._next_id = max(ids) + 1 if ids else 1
        logger.debug("TaskStore ready total=%d next_id=%d", len(self._tasks), self._next_id)

    # ---- queries ----

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def get_at(self, index: int) -> Task | None:
        if not self._in_range(index):
            return None
        return self._tasks[index]

    def stats(self) -> tuple[int, int]:
        """Return (completed_count, total_count)."""
        completed = sum(1 for t in self._tasks if t.completed)
        return completed, len(self._tasks)

    # ---- mutations ----

    def add(self, title: str) -> Task | None:
        """Append a new task; blank titles are ignored (returns None)."""
        if not title or not title.strip():
            return None

        task = Task.create(self._next_id, title)
        self._tasks.append(task)
        self._next_id += 1
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task

    def remove_at(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        task = self._tasks.pop(index)
        logger.debug("Task removed id=%s index=%d", task.id, index)
        return True

    def remove_by_id(self, task_id: int) -> bool:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return self.remove_at(i)
        return False

    def toggle_at(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        task = self._tasks[index]
        task.completed = not task.completed
        task.touch()
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return True

    def rename_at(self, index: int, new_title: str) -> bool:
        """
        Replace the title of the task at index.

        Unlike add(), a blank title is accepted here and stored as "".
        """
        if not self._in_range(index):
            return False
        task = self._tasks[index]
        task.title = clip_title(new_title)
        task.touch()
        logger.debug("Task renamed id=%s title=%r", task.id, task.title)
        return True
