# src/tickbox/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the curses loop in the
main thread. Exit code 0 on normal quit, 1 when startup cannot proceed.
"""

from __future__ import annotations

import curses
import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.curses_connector import run_curses_loop
from ..errors import HomeDirectoryUnavailable
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    try:
        settings = get_settings()
    except HomeDirectoryUnavailable as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Cannot start: %s", e)
        return 1

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (tasks file: %s)", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)

    try:
        run_curses_loop(state)
    except curses.error as e:
        logger.error("Cannot initialise the terminal: %s", e)
        return 1
    except Exception:
        logger.exception("Unexpected error in the interaction loop.")
        return 1

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
