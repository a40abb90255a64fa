# src/tickbox/connectors/keymap.py

"""
Physical key -> logical Event, depending on the current mode.

The same key means different things per mode ('n' is "new" in Normal,
"no" when confirming a delete, and a plain letter while typing), so the
mapping has to look at the mode first.

Keys come from curses get_wch(): a str for characters, an int for
special keys (arrows, KEY_ENTER, KEY_BACKSPACE, ...).
"""

from __future__ import annotations

import curses

from ..core.events import Char, Event, Key
from ..core.state import ConfirmingDelete, Editing, Inserting, Mode

ESC = "\x1b"
ENTER_CHARS = ("\n", "\r")
ENTER_CODES = (curses.KEY_ENTER, 10, 13)
BACKSPACE_CHARS = ("\x7f", "\b")
BACKSPACE_CODES = (curses.KEY_BACKSPACE, 127, 8)

NORMAL_CHARS: dict[str, Key] = {
    "q": Key.QUIT,
    "k": Key.UP,
    "j": Key.DOWN,
    "n": Key.NEW,
    "e": Key.EDIT,
    "d": Key.DELETE,
}

NORMAL_CODES: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
}

CONFIRM_CHARS: dict[str, Key] = {
    "y": Key.YES,
    "Y": Key.YES,
    "n": Key.NO,
    "N": Key.NO,
    ESC: Key.CANCEL,
}


def _common(raw: int | str) -> Key | None:
    if raw in ENTER_CHARS or raw in ENTER_CODES:
        return Key.CONFIRM
    if raw == ESC:
        return Key.CANCEL
    return None


def decode_key(raw: int | str, mode: Mode) -> Event | None:
    """Return the logical event for raw, or None when the key means nothing in mode."""
    if isinstance(mode, (Inserting, Editing)):
        if raw in BACKSPACE_CHARS or raw in BACKSPACE_CODES:
            return Key.BACKSPACE
        common = _common(raw)
        if common is not None:
            return common
        if isinstance(raw, str) and len(raw) == 1 and raw.isprintable():
            return Char(raw)
        return None

    if isinstance(mode, ConfirmingDelete):
        if isinstance(raw, str):
            return CONFIRM_CHARS.get(raw)
        return None

    # Normal
    if isinstance(raw, str):
        if raw in ENTER_CHARS:
            return Key.CONFIRM
        return NORMAL_CHARS.get(raw)
    if raw in ENTER_CODES:
        return Key.CONFIRM
    return NORMAL_CODES.get(raw)
