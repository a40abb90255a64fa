# src/tickbox/errors.py

"""Error kinds shared by the settings layer, persistence and the CLI."""

from __future__ import annotations

from pathlib import Path


class TickboxError(Exception):
    """Base class for all tickbox errors."""


class HomeDirectoryUnavailable(TickboxError):
    """The user's home directory cannot be determined (fatal at startup)."""


class StoreError(TickboxError):
    """Base class for task file failures."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class StoreReadError(StoreError):
    """The task file exists but could not be read."""


class StoreFormatError(StoreError):
    """The task file was read but its content is not a valid task list."""


class StoreWriteError(StoreError):
    """The task file (or its backup) could not be written."""
