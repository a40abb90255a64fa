# src/tickbox/core/events.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Key(StrEnum):
    """Logical inputs understood by the controller."""

    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    NEW = "new"
    EDIT = "edit"
    DELETE = "delete"
    BACKSPACE = "backspace"
    YES = "yes"
    NO = "no"


@dataclass(frozen=True, slots=True)
class Char:
    """One printable character typed into the input buffer."""

    text: str


Event = Key | Char
