# src/tickbox/config.py

"""Settings loaded from environment variables (+ optional .env).

The task file location is fixed (~/.tickbox/tasks.json); only cosmetic
and logging knobs come from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import HomeDirectoryUnavailable

ENV_PREFIX = "TICKBOX"

DATA_DIR_NAME = ".tickbox"
TASKS_FILE_NAME = "tasks.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def home_dir() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryUnavailable(f"cannot determine home directory: {e}") from e
    if not str(home) or str(home) == "~":
        raise HomeDirectoryUnavailable("cannot determine home directory")
    return home


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        data_dir = home_dir() / DATA_DIR_NAME

        return Settings(
            app_name=_env(_k("APP_NAME"), "tickbox"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_dir=data_dir,
            tasks_path=data_dir / TASKS_FILE_NAME,
            log_dir=data_dir,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """
    Build Settings on first use and cache them.

    Raises HomeDirectoryUnavailable instead of failing at import time.
    """
    global _SETTINGS
    if _SETTINGS is None:
        # Real environment wins over .env.
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
