# src/tickbox/core/view.py

"""Pure rendering of AppState into styled text lines (no terminal I/O)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..tasks.task_models import MAX_TITLE_LENGTH
from .state import AppState, ConfirmingDelete, Editing, Inserting

TS_FORMAT = "%Y-%m-%d %H:%M"

MARK_DONE = "✓"
MARK_OPEN = "○"

HELP_NORMAL = "Enter: toggle | n: new | e: edit | d: delete | ↑/↓ k/j: move | q: quit"
HELP_INSERT = "Enter: add | Esc: cancel"
HELP_EDIT = "Enter: save | Esc: cancel"
HELP_DELETE = "y: yes | n: no"
EMPTY_TEXT = "No tasks yet. Press 'n' to add one."


class Style(StrEnum):
    HEADER = "header"
    TASK_OPEN = "task_open"
    TASK_DONE = "task_done"
    DATES = "dates"
    PROMPT = "prompt"
    INPUT = "input"
    FOOTER = "footer"
    NOTICE = "notice"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class Line:
    text: str
    style: Style = Style.PLAIN
    selected: bool = False


def _fmt_ts(ts: datetime) -> str:
    return ts.strftime(TS_FORMAT)


def render_body(state: AppState) -> list[Line]:
    """Header and task list; the part that scrolls."""
    completed, total = state.store.stats()
    lines: list[Line] = [
        Line(f"{state.app_name}    done: {completed} | open: {total - completed}", Style.HEADER),
        Line(""),
    ]

    if total == 0:
        lines.append(Line(EMPTY_TEXT))
    else:
        for i, task in enumerate(state.store):
            selected = i == state.cursor
            mark = MARK_DONE if task.completed else MARK_OPEN
            style = Style.TASK_DONE if task.completed else Style.TASK_OPEN
            lines.append(Line(f"{mark} {task.title}", style, selected))
            lines.append(
                Line(
                    f"    created: {_fmt_ts(task.created_at)} | updated: {_fmt_ts(task.updated_at)}",
                    Style.DATES,
                    selected,
                )
            )
            lines.append(Line(""))

    return lines


def render_footer(state: AppState) -> list[Line]:
    """Mode prompt, key help and notice; always shown in full."""
    lines: list[Line] = [Line("")]
    mode = state.mode
    if isinstance(mode, Inserting):
        lines.append(Line(f"New task (up to {MAX_TITLE_LENGTH} characters):", Style.PROMPT))
        lines.append(Line(f"> {mode.buffer}", Style.INPUT))
        lines.append(Line(""))
        lines.append(Line(HELP_INSERT, Style.FOOTER))
    elif isinstance(mode, Editing):
        lines.append(Line(f"Edit task (up to {MAX_TITLE_LENGTH} characters):", Style.PROMPT))
        lines.append(Line(f"> {mode.buffer}", Style.INPUT))
        lines.append(Line(""))
        lines.append(Line(HELP_EDIT, Style.FOOTER))
    elif isinstance(mode, ConfirmingDelete):
        task = state.store.get_at(state.cursor)
        if task is not None:
            lines.append(Line(f"Delete '{task.title}'?", Style.PROMPT))
            lines.append(Line(HELP_DELETE, Style.FOOTER))
    else:
        lines.append(Line(HELP_NORMAL, Style.FOOTER))

    if state.notice:
        lines.append(Line(""))
        lines.append(Line(state.notice, Style.NOTICE))

    return lines


def render(state: AppState) -> list[Line]:
    return render_body(state) + render_footer(state)


def render_text(state: AppState) -> str:
    return "\n".join(line.text for line in render(state))
