# src/tickbox/connectors/curses_connector.py

from __future__ import annotations

import contextlib
import curses
import logging
import os

from ..core.controller import Action, handle_event
from ..core.state import AppState
from ..core.view import Line, Style, render_body, render_footer
from ..logging_setup import quiet_console
from .keymap import decode_key

logger = logging.getLogger(__name__)


class _Palette:
    """curses attributes per view Style (colors when the terminal has them)."""

    def __init__(self) -> None:
        self.attrs: dict[Style, int] = {
            Style.HEADER: curses.A_BOLD,
            Style.TASK_DONE: curses.A_NORMAL,
            Style.TASK_OPEN: curses.A_NORMAL,
            Style.DATES: curses.A_DIM,
            Style.PROMPT: curses.A_BOLD,
            Style.INPUT: curses.A_NORMAL,
            Style.FOOTER: curses.A_DIM,
            Style.NOTICE: curses.A_BOLD,
            Style.PLAIN: curses.A_NORMAL,
        }
        if not curses.has_colors():
            return

        curses.start_color()
        with contextlib.suppress(curses.error):
            curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_MAGENTA, -1)
        curses.init_pair(2, curses.COLOR_GREEN, -1)
        curses.init_pair(3, curses.COLOR_YELLOW, -1)
        curses.init_pair(4, curses.COLOR_RED, -1)
        self.attrs[Style.HEADER] |= curses.color_pair(1)
        self.attrs[Style.TASK_DONE] |= curses.color_pair(2)
        self.attrs[Style.TASK_OPEN] |= curses.color_pair(3)
        self.attrs[Style.NOTICE] |= curses.color_pair(4)

    def attr_for(self, line: Line) -> int:
        attr = self.attrs.get(line.style, curses.A_NORMAL)
        if line.selected:
            attr |= curses.A_REVERSE
        return attr


def _draw(stdscr, body: list[Line], footer: list[Line], palette: _Palette) -> None:
    """
    Paint one frame.

    The footer (prompt, key help, notice) takes the bottom rows; the body
    scrolls in the rows above it, keeping the selected task in view.
    """
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    if height < 1 or width < 2:
        stdscr.refresh()
        return

    footer = footer[-height:]
    body_h = height - len(footer)

    top = max(0, min(_selected_line(body) - body_h // 2, len(body) - body_h))
    rows = list(enumerate(body[top : top + body_h]))
    rows += [(body_h + i, line) for i, line in enumerate(footer)]

    for y, line in rows:
        with contextlib.suppress(curses.error):
            stdscr.addnstr(y, 0, line.text, width - 1, palette.attr_for(line))
    stdscr.refresh()


def _selected_line(lines: list[Line]) -> int:
    for i, line in enumerate(lines):
        if line.selected:
            return i
    return 0


def _run(stdscr, state: AppState) -> None:
    with contextlib.suppress(curses.error):
        curses.curs_set(0)
    stdscr.keypad(True)
    palette = _Palette()

    while True:
        _draw(stdscr, render_body(state), render_footer(state), palette)

        try:
            raw = stdscr.get_wch()
        except KeyboardInterrupt:
            logger.info("KeyboardInterrupt, exiting.")
            break
        except curses.error:
            # Interrupted read (e.g. terminal resize); just redraw.
            continue

        event = decode_key(raw, state.mode)
        if event is None:
            continue

        if handle_event(state, event) is Action.QUIT:
            logger.info("Quit requested.")
            break


def run_curses_loop(state: AppState) -> None:
    """Run the full-screen loop until the user quits; restores the terminal on exit."""
    # Esc should cancel immediately instead of waiting for an escape sequence.
    os.environ.setdefault("ESCDELAY", "25")

    logger.info("Curses loop started (tasks=%d).", len(state.store))
    with quiet_console():
        curses.wrapper(_run, state)
    logger.info("Curses loop finished.")
