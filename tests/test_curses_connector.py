# tests/test_curses_connector.py

from __future__ import annotations

import curses

import pytest

from tickbox.connectors import curses_connector
from tickbox.connectors.curses_connector import _draw, _run, _selected_line
from tickbox.core.controller import handle_event
from tickbox.core.events import Char, Key
from tickbox.core.view import Line, render_body, render_footer


class FakeScreen:
    """
    Minimal stand-in for a curses window.

    - Records painted text per row (after erase())
    - Replays a scripted list of get_wch() results
    """

    def __init__(self, height: int = 24, width: int = 80, keys=()) -> None:
        self.height = height
        self.width = width
        self.rows: dict[int, str] = {}
        self.attrs: dict[int, int] = {}
        self.keys = list(keys)

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width

    def erase(self) -> None:
        self.rows.clear()
        self.attrs.clear()

    def refresh(self) -> None:
        pass

    def keypad(self, flag: bool) -> None:
        pass

    def addnstr(self, y: int, x: int, text: str, n: int, attr: int = 0) -> None:
        assert 0 <= y < self.height, f"row {y} outside a {self.height}-row screen"
        self.rows[y] = text[:n]
        self.attrs[y] = attr

    def get_wch(self):
        if not self.keys:
            raise AssertionError("loop asked for more keys than scripted")
        return self.keys.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.rows.get(y, "") for y in range(self.height))


class FakePalette:
    def attr_for(self, line: Line) -> int:
        return curses.A_REVERSE if line.selected else 0


def draw(screen: FakeScreen, state) -> None:
    _draw(screen, render_body(state), render_footer(state), FakePalette())


@pytest.fixture()
def long_state(make_state):
    return make_state(*(f"task {i}" for i in range(20)))


def test_short_list_is_drawn_from_the_top(make_state) -> None:
    state = make_state("alpha", "beta")
    screen = FakeScreen()
    draw(screen, state)

    assert screen.rows[0].startswith("tickbox")
    assert "○ alpha" in screen.text
    assert "q: quit" in screen.rows[screen.height - 1]


def test_input_prompt_visible_with_long_list(long_state) -> None:
    handle_event(long_state, Key.NEW)
    for c in "abc":
        handle_event(long_state, Char(c))

    screen = FakeScreen()
    draw(screen, long_state)

    assert "New task (up to 30 characters):" in screen.text
    assert "> abc" in screen.text
    assert screen.rows[screen.height - 1] == "Enter: add | Esc: cancel"


def test_delete_prompt_visible_with_long_list(long_state) -> None:
    long_state.cursor = 19
    handle_event(long_state, Key.DELETE)

    screen = FakeScreen()
    draw(screen, long_state)

    assert "Delete 'task 19'?" in screen.text


def test_save_failure_notice_visible_with_long_list(long_state, repo) -> None:
    repo.fail_writes = True
    handle_event(long_state, Key.CONFIRM)

    screen = FakeScreen()
    draw(screen, long_state)

    assert "Could not save tasks" in screen.rows[screen.height - 1]


@pytest.mark.parametrize("cursor", [0, 7, 19])
def test_selected_task_stays_on_screen(long_state, cursor: int) -> None:
    long_state.cursor = cursor
    screen = FakeScreen()
    draw(screen, long_state)

    selected_rows = [y for y, attr in screen.attrs.items() if attr & curses.A_REVERSE]
    assert selected_rows, "selected task scrolled out of view"
    assert screen.rows[selected_rows[0]] == f"○ task {cursor}"

    footer_top = screen.height - len(render_footer(long_state))
    assert all(y < footer_top for y in selected_rows)


def test_tiny_screen_keeps_footer_tail(long_state, repo) -> None:
    repo.fail_writes = True
    handle_event(long_state, Key.CONFIRM)

    screen = FakeScreen(height=2, width=40)
    draw(screen, long_state)

    assert set(screen.rows) <= {0, 1}
    assert screen.rows[1].startswith("Could not save tasks")


def test_selected_line_index() -> None:
    lines = [Line("a"), Line("b", selected=True), Line("c", selected=True)]
    assert _selected_line(lines) == 1
    assert _selected_line([Line("a")]) == 0


def test_run_loop_adds_task_and_quits(monkeypatch, state, repo) -> None:
    monkeypatch.setattr(curses_connector, "_Palette", FakePalette)
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    screen = FakeScreen(keys=["n", "h", "i", "\n", "q"])

    _run(screen, state)

    assert [t.title for t in state.store] == ["hi"]
    assert repo.last_saved_titles == ["hi"]
    assert screen.keys == []


def test_run_loop_exits_on_ctrl_c(monkeypatch, state) -> None:
    monkeypatch.setattr(curses_connector, "_Palette", FakePalette)
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)
    screen = FakeScreen()

    def interrupt():
        raise KeyboardInterrupt

    screen.get_wch = interrupt
    _run(screen, state)

    assert len(state.store) == 0
