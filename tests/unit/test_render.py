"""Tests for frame drawing and key mapping, using a fake curses window."""

from __future__ import annotations

import curses
from unittest.mock import MagicMock

import pytest

from dependabot_tracker.keys import Key
from dependabot_tracker.models import Severity
from dependabot_tracker.session import Session
from dependabot_tracker.tui.keymap import key_from_code
from dependabot_tracker.tui.render import SPINNER_FRAMES, bar_chart_lines, draw, safe_addstr


class FakeWindow:
    def __init__(self, height=30, width=100):
        self.height = height
        self.width = width
        self.rows: dict[int, str] = {}

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.rows.clear()

    def refresh(self):
        pass

    def addstr(self, y, x, text, attr=0):
        row = self.rows.get(y, "").ljust(x)
        self.rows[y] = row[:x] + text + row[x + len(text):]

    def text(self):
        return "\n".join(self.rows.get(y, "") for y in range(self.height))


@pytest.fixture
def session(make_repository):
    return Session(
        [make_repository(1, "alpha", open_alerts=2), make_repository(2, "beta")],
        refresher=MagicMock(),
    )


def test_overview_shows_totals(session):
    window = FakeWindow()
    draw(window, session, {})
    text = window.text()
    assert "Dependabot Tracker" in text
    assert "Alert Levels for 2 Repositories" in text
    assert "High Alerts" in text
    assert "Overview" in text


def test_repository_list_marks_cursor(session):
    session.handle_key(Key.REPOSITORIES)
    session.handle_key(Key.DOWN)
    window = FakeWindow()
    draw(window, session, {})
    lines = window.text().splitlines()
    assert any(line.strip().startswith(">> beta") for line in lines)
    assert any("alpha" in line and "2 alerts" in line and ">>" not in line for line in lines)


def test_alert_detail_reports_viewport(session):
    for key in (Key.REPOSITORIES, Key.ENTER, Key.TAB):
        session.handle_key(key)
    window = FakeWindow(height=20)
    draw(window, session, {})

    # 20 rows minus title, rules, footer and the tab bar
    assert session.viewport_height == 13
    assert session.scrollbar.length == 20 - 13
    assert "Number: 1" in window.text()
    assert "Dependabot Details" in window.text()


def test_repository_detail_shows_info(session):
    for key in (Key.REPOSITORIES, Key.ENTER):
        session.handle_key(key)
    window = FakeWindow()
    draw(window, session, {})

    assert "Name: alpha" in window.text()
    assert "Alert Levels for alpha" in window.text()


def test_refreshing_shows_spinner(session):
    session.handle_key(Key.UPDATE)
    draw_window = FakeWindow()
    draw(draw_window, session, {})
    assert "(y/n)" in draw_window.text()

    session.handle_key(Key.YES)
    session.spinner_phase = 2
    draw(draw_window, session, {})
    assert f"{SPINNER_FRAMES[2]} Fetching GitHub Repositories..." in draw_window.text()


def test_error_is_shown(session):
    session.error = "Failed to fetch repositories: boom"
    window = FakeWindow()
    draw(window, session, {})
    assert "Error: Failed to fetch repositories: boom" in window.text()


def test_small_terminal(session):
    window = FakeWindow(height=5, width=30)
    draw(window, session, {})
    assert window.text().startswith("Terminal too small")


def test_safe_addstr_clips():
    window = FakeWindow(height=2, width=10)
    safe_addstr(window, 0, 0, "x" * 50)
    safe_addstr(window, 5, 0, "offscreen")
    assert window.rows == {0: "x" * 9}


def test_bar_chart_scales_to_peak():
    lines = bar_chart_lines(
        {Severity.LOW: 0, Severity.MEDIUM: 1, Severity.HIGH: 2, Severity.CRITICAL: 4}, width=40
    )
    bars = [text.count("█") for text, _ in lines]
    assert bars[0] == 0
    assert bars[3] == max(bars)
    assert bars[1] < bars[2] < bars[3]
    assert lines[3][0].endswith(" 4")


@pytest.mark.parametrize(
    "code, key",
    [
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_ENTER, Key.ENTER),
        (ord("\n"), Key.ENTER),
        (ord("\t"), Key.TAB),
        (ord("q"), Key.QUIT),
        (ord("u"), Key.UPDATE),
        (ord("y"), Key.YES),
        (ord("x"), None),
        (-1, None),
        (curses.KEY_RESIZE, None),
    ],
)
def test_key_from_code(code, key):
    assert key_from_code(code) is key
