# src/tickbox/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on this Protocol instead of TaskFile directly,
so tests can swap in an in-memory repo.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Durable home of the task list (load-or-empty / full-replace save)."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
