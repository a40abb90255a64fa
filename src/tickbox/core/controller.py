# src/tickbox/core/controller.py

"""
Modal input handling.

handle_event() takes one logical input, applies at most one TaskStore
mutation, saves right after a successful mutation and returns whether
the loop should keep going. Nothing here raises on bad input: guards
turn out-of-range or empty-list cases into no-ops.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import StrEnum

from ..errors import StoreWriteError
from ..tasks.task_models import MAX_TITLE_LENGTH
from .events import Char, Event, Key
from .state import AppState, ConfirmingDelete, Editing, Inserting, Normal

logger = logging.getLogger(__name__)


class Action(StrEnum):
    CONTINUE = "continue"
    QUIT = "quit"


def handle_event(state: AppState, event: Event) -> Action:
    state.notice = None

    mode = state.mode
    if isinstance(mode, Normal):
        return _handle_normal(state, event)
    if isinstance(mode, Inserting):
        _handle_inserting(state, mode, event)
    elif isinstance(mode, Editing):
        _handle_editing(state, mode, event)
    elif isinstance(mode, ConfirmingDelete):
        _handle_confirming_delete(state, event)
    return Action.CONTINUE


def persist(state: AppState) -> bool:
    """Save the full list; a write failure becomes a notice, never an exception."""
    try:
        state.repo.save(state.store.tasks)
    except StoreWriteError as e:
        logger.warning("Save failed, keeping in-memory state: %s", e)
        state.notice = "Could not save tasks (changes kept in memory)."
        return False
    return True


# ---- per-mode handlers ----


def _handle_normal(state: AppState, event: Event) -> Action:
    size = len(state.store)

    if event is Key.QUIT:
        return Action.QUIT

    if event is Key.UP:
        if state.cursor > 0:
            state.cursor -= 1
    elif event is Key.DOWN:
        if state.cursor < size - 1:
            state.cursor += 1
    elif event is Key.CONFIRM:
        if state.store.toggle_at(state.cursor):
            persist(state)
    elif event is Key.NEW:
        state.mode = Inserting()
    elif event is Key.EDIT:
        task = state.store.get_at(state.cursor)
        if task is not None:
            state.mode = Editing(target=state.cursor, buffer=task.title)
    elif event is Key.DELETE:
        if state.store.get_at(state.cursor) is not None:
            state.mode = ConfirmingDelete()

    return Action.CONTINUE


def _edit_buffer(buffer: str, event: Event) -> str:
    """Apply backspace / typed character to a text buffer; other events leave it as is."""
    if event is Key.BACKSPACE:
        return buffer[:-1]
    if isinstance(event, Char) and len(buffer) < MAX_TITLE_LENGTH:
        return buffer + event.text
    return buffer


def _handle_inserting(state: AppState, mode: Inserting, event: Event) -> None:
    if event is Key.CONFIRM:
        if state.store.add(mode.buffer) is not None:
            persist(state)
        state.mode = Normal()
    elif event is Key.CANCEL:
        state.mode = Normal()
    else:
        state.mode = replace(mode, buffer=_edit_buffer(mode.buffer, event))


def _handle_editing(state: AppState, mode: Editing, event: Event) -> None:
    if event is Key.CONFIRM:
        if mode.buffer.strip() and state.store.rename_at(mode.target, mode.buffer):
            persist(state)
        state.mode = Normal()
    elif event is Key.CANCEL:
        state.mode = Normal()
    else:
        state.mode = replace(mode, buffer=_edit_buffer(mode.buffer, event))


def _handle_confirming_delete(state: AppState, event: Event) -> None:
    if event is Key.YES:
        if state.store.remove_at(state.cursor):
            state.clamp_cursor()
            persist(state)
        state.mode = Normal()
    elif event in (Key.NO, Key.CANCEL):
        state.mode = Normal()
