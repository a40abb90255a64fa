# src/tickbox/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..errors import StoreFormatError

MAX_TITLE_LENGTH = 30


def now_local() -> datetime:
    return datetime.now().astimezone()


def clip_title(raw: str) -> str:
    """Trim surrounding whitespace and cut the title to MAX_TITLE_LENGTH characters."""
    return raw.strip()[:MAX_TITLE_LENGTH]


def _parse_ts(raw: Any, field_name: str) -> datetime:
    if not isinstance(raw, str):
        raise StoreFormatError(f"{field_name} must be an ISO-8601 string, got {raw!r}")
    try:
        ts = datetime.fromisoformat(raw)
    except ValueError as e:
        raise StoreFormatError(f"{field_name} is not a valid timestamp: {raw!r}") from e
    # Naive timestamps (hand-edited files) are read as local time.
    return ts if ts.tzinfo is not None else ts.astimezone()


@dataclass(slots=True)
class Task:
    id: int
    title: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, task_id: int, title: str) -> Task:
        now = now_local()
        return cls(
            id=task_id,
            title=clip_title(title),
            completed=False,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> None:
        self.updated_at = now_local()

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one persisted record.

        Required: integer `id`, string `title`.
        Optional: `completed` (default false), `created_at` (default now),
        `updated_at` (default created_at).
        """
        if not isinstance(raw, dict):
            raise StoreFormatError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise StoreFormatError(f"task id must be an integer, got {task_id!r}")

        title = raw.get("title")
        if not isinstance(title, str):
            raise StoreFormatError(f"task {task_id}: title must be a string")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise StoreFormatError(f"task {task_id}: completed must be a boolean")

        raw_created = raw.get("created_at")
        created_at = now_local() if raw_created is None else _parse_ts(raw_created, "created_at")

        raw_updated = raw.get("updated_at")
        updated_at = created_at if raw_updated is None else _parse_ts(raw_updated, "updated_at")

        return cls(
            id=task_id,
            title=clip_title(title),
            completed=completed,
            created_at=created_at,
            updated_at=updated_at,
        )
