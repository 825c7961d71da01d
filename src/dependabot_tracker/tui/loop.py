"""The UI loop: read input, update the session, drain the refresh, redraw."""

from __future__ import annotations

import curses
import logging
from typing import Any

from dependabot_tracker.session import Session
from dependabot_tracker.tui.keymap import key_from_code
from dependabot_tracker.tui.render import build_theme, draw

logger = logging.getLogger("dependabot_tracker")


def run(stdscr: Any, session: Session, poll_interval: float = 0.2) -> None:
    """Drive ``session`` until it stops running.

    Blocks on input while idle. While a refresh is in flight, input waits at
    most ``poll_interval`` seconds so the channel is checked and the spinner
    advances between keystrokes.

    Raises:
        WorkerLostError: propagated from the session when the worker dies.
    """
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    theme = build_theme()
    poll_ms = max(1, int(poll_interval * 1000))

    while session.running:
        draw(stdscr, session, theme)

        stdscr.timeout(poll_ms if session.refreshing else -1)
        key = key_from_code(stdscr.getch())
        if key is not None:
            session.handle_key(key)

        session.poll_refresh()

    logger.info("Session ended")
