# src/tickbox/tasks/task_file.py

from __future__ import annotations

import json
import logging
import os
import shutil
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from ..errors import StoreFormatError, StoreReadError, StoreWriteError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFile:
    """
    JSON file holding the whole task list.

    Layout: a pretty-printed JSON array of task records.
    - a missing file means "no tasks yet", not an error
    - save() always rewrites the full list (temp file + os.replace)
    - no business rules here; TaskStore owns ids and mutation
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty.", self._path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise StoreReadError(f"cannot read {self._path}: {e}", self._path) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreFormatError(f"invalid JSON in {self._path}: {e}", self._path) from e

        if not isinstance(data, list):
            raise StoreFormatError(
                f"{self._path}: expected a list of tasks, got {type(data).__name__}", self._path
            )

        tasks: list[Task] = []
        seen: set[int] = set()
        for item in data:
            try:
                task = Task.from_record(item)
            except StoreFormatError as e:
                raise StoreFormatError(f"{self._path}: {e}", self._path) from e
            if task.id in seen:
                raise StoreFormatError(f"{self._path}: duplicate task id {task.id}", self._path)
            seen.add(task.id)
            tasks.append(task)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        records = [t.to_record() for t in tasks]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(json.dumps(records, ensure_ascii=False, indent=2) + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StoreWriteError(f"cannot write {self._path}: {e}", self._path) from e
        logger.debug("Saved %d tasks to %s", len(records), self._path)

    def backup(self) -> Path | None:
        """
        Copy the current file to <name>.backup_YYYYMMDD_HHMMSS.

        Returns the backup path, or None if there is no file to copy.
        """
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        target = self._path.with_name(f"{self._path.name}.backup_{stamp}")
        try:
            if not self._path.exists():
                return None
            shutil.copyfile(self._path, target)
        except OSError as e:
            raise StoreWriteError(f"cannot back up {self._path}: {e}", target) from e
        logger.info("Backed up %s to %s", self._path, target)
        return target
