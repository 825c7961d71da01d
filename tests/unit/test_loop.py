"""Tests for the UI loop with a scripted screen."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from dependabot_tracker.errors import WorkerLostError
from dependabot_tracker.refresh import RefreshOutcome
from dependabot_tracker.screens import Overview
from dependabot_tracker.session import Session
from dependabot_tracker.tui.loop import run


class ScriptedScreen:
    """A tiny curses window that replays key codes."""

    def __init__(self, codes):
        self.codes = list(codes)
        self.timeouts = []

    def getmaxyx(self):
        return 5, 30

    def erase(self):
        pass

    def refresh(self):
        pass

    def addstr(self, *args):
        pass

    def keypad(self, flag):
        pass

    def timeout(self, delay):
        self.timeouts.append(delay)

    def getch(self):
        return self.codes.pop(0) if self.codes else ord("q")


class ScriptedHandle:
    def __init__(self, *results):
        self.results = list(results)

    def poll(self):
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture(autouse=True)
def no_terminal():
    with patch("dependabot_tracker.tui.loop.curses.curs_set"), patch(
        "dependabot_tracker.tui.loop.build_theme", return_value={}
    ):
        yield


def test_quit_stops_loop(make_repository):
    session = Session([make_repository()], refresher=MagicMock())
    screen = ScriptedScreen([ord("r"), ord("q")])
    run(screen, session)
    assert session.running is False
    assert screen.timeouts == [-1, -1]


def test_polls_with_timeout_while_refreshing(make_repository):
    fresh = [make_repository(5, "fresh")]
    handle = ScriptedHandle(None, None, RefreshOutcome(repositories=fresh))
    session = Session([], refresher=MagicMock(), start_refresh=MagicMock(return_value=handle))
    screen = ScriptedScreen([ord("u"), ord("y"), -1, -1, ord("q")])

    run(screen, session, poll_interval=0.2)

    assert screen.timeouts == [-1, -1, 200, 200, -1]
    assert session.spinner_phase == 2
    assert isinstance(session.screen, Overview)
    assert [r.name for r in session.repositories] == ["fresh"]


def test_worker_lost_ends_loop(make_repository):
    handle = ScriptedHandle(WorkerLostError())
    session = Session([], refresher=MagicMock(), start_refresh=MagicMock(return_value=handle))
    screen = ScriptedScreen([ord("u"), ord("y")])

    with pytest.raises(WorkerLostError):
        run(screen, session)
