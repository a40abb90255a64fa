# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tickbox import config
from tickbox.cli import main as cli_main
from tickbox.config import Settings
from tickbox.errors import HomeDirectoryUnavailable


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    monkeypatch.setenv("TICKBOX_APP_NAME", "my tasks")
    monkeypatch.setenv("TICKBOX_LOG_LEVEL", "debug")
    monkeypatch.setenv("TICKBOX_LOG_TO_FILE", "off")

    s = Settings.from_env()

    assert s.app_name == "my tasks"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.data_dir == tmp_path / ".tickbox"
    assert s.tasks_path == tmp_path / ".tickbox" / "tasks.json"


def test_settings_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    for name in ("TICKBOX_APP_NAME", "TICKBOX_LOG_LEVEL", "TICKBOX_LOG_TO_FILE"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.app_name == "tickbox"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True


def test_missing_home_is_reported(monkeypatch) -> None:
    def no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(no_home))
    with pytest.raises(HomeDirectoryUnavailable):
        config.home_dir()


def test_main_exits_1_without_home(monkeypatch) -> None:
    def fail():
        raise HomeDirectoryUnavailable("no home")

    monkeypatch.setattr(cli_main, "get_settings", fail)
    assert cli_main.main() == 1


def test_main_runs_loop_and_exits_0(monkeypatch, settings) -> None:
    seen = {}

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kw: seen.setdefault("logging", kw))
    monkeypatch.setattr(cli_main, "run_curses_loop", lambda state: seen.setdefault("state", state))

    assert cli_main.main() == 0
    assert seen["logging"]["console_level"] == logging.WARNING
    assert seen["logging"]["log_to_file"] is False
    assert seen["state"].repo.path == settings.tasks_path
