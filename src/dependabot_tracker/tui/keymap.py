"""Translate curses key codes into logical keys."""

from __future__ import annotations

import curses
from typing import Optional

from dependabot_tracker.keys import Key

_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_ENTER: Key.ENTER,
    ord("\n"): Key.ENTER,
    ord("\r"): Key.ENTER,
    ord("\t"): Key.TAB,
}


def key_from_code(code: int) -> Optional[Key]:
    """Map a ``getch`` result to a Key, or None for anything unbound."""
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if not 0 <= code < 256:
        return None
    try:
        return Key(chr(code))
    except ValueError:
        return None
