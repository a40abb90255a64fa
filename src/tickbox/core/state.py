# src/tickbox/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import TaskRepo


@dataclass(frozen=True, slots=True)
class Normal:
    pass


@dataclass(frozen=True, slots=True)
class Inserting:
    buffer: str = ""


@dataclass(frozen=True, slots=True)
class Editing:
    target: int
    buffer: str = ""


@dataclass(frozen=True, slots=True)
class ConfirmingDelete:
    pass


Mode = Normal | Inserting | Editing | ConfirmingDelete


@dataclass
class AppState:
    """
    Everything the interaction loop needs, passed explicitly.

    Per-mode data (input buffer, edit target) lives on the mode variant,
    so Normal can never carry a stale buffer.
    """

    store: TaskStore
    repo: TaskRepo

    app_name: str = "tickbox"
    mode: Mode = Normal()
    cursor: int = 0

    # One-frame message for the user (save failures, load fallback, ...).
    notice: str | None = None

    @property
    def input_buffer(self) -> str:
        if isinstance(self.mode, (Inserting, Editing)):
            return self.mode.buffer
        return ""

    @property
    def editing_target(self) -> int | None:
        if isinstance(self.mode, Editing):
            return self.mode.target
        return None

    def clamp_cursor(self) -> None:
        size = len(self.store)
        self.cursor = 0 if size == 0 else max(0, min(self.cursor, size - 1))
