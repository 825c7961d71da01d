"""Draw the session onto a curses window.

Rendering is stateless apart from reporting the alert view height back to the
session, which uses it to resize the scrollbar.
"""

from __future__ import annotations

import curses
from typing import Any, Callable, Dict, List, cast

from dependabot_tracker.models import Severity, total_severity_counts
from dependabot_tracker.screens import (
    AlertDetail,
    ConfirmRefresh,
    Overview,
    Refreshing,
    RepositoryDetail,
    RepositoryList,
)
from dependabot_tracker.session import Session

TITLE = "Dependabot Tracker"
SPINNER_FRAMES = "⠷⠯⠟⠻⠽⠾"
MIN_HEIGHT = 12
MIN_WIDTH = 40

Theme = Dict[str, int]

_SEVERITY_COLORS = {
    Severity.LOW: "low",
    Severity.MEDIUM: "medium",
    Severity.HIGH: "high",
    Severity.CRITICAL: "critical",
}


def build_theme() -> Theme:
    """Color attributes keyed by role. Empty when the terminal has no colors."""
    theme: Theme = {}
    try:
        if not curses.has_colors():
            return theme
        curses.start_color()
        curses.use_default_colors()
    except curses.error:
        return theme

    # pair id -> foreground on the default background
    pair_defs = [
        (1, curses.COLOR_GREEN),  # title, active tab
        (2, curses.COLOR_YELLOW),  # list entries, high
        (3, curses.COLOR_RED),  # key hints, errors, critical
        (4, curses.COLOR_BLUE),  # info text, low
        (5, curses.COLOR_CYAN),  # spinner label
    ]
    for pair_id, fg in pair_defs:
        try:
            curses.init_pair(pair_id, fg, -1)
        except curses.error:
            return {}

    theme["title"] = curses.color_pair(1) | curses.A_BOLD
    theme["tab_active"] = curses.color_pair(1) | curses.A_UNDERLINE
    theme["entry"] = curses.color_pair(2)
    theme["hint"] = curses.color_pair(3)
    theme["error"] = curses.color_pair(3) | curses.A_BOLD
    theme["info"] = curses.color_pair(4)
    theme["spinner"] = curses.color_pair(5)
    theme["low"] = curses.color_pair(4)
    theme["medium"] = curses.color_pair(1)
    theme["high"] = curses.color_pair(2)
    theme["critical"] = curses.color_pair(3)
    return theme


def safe_addstr(window: Any, y: int, x: int, text: str, attr: int = 0) -> None:
    """addstr that clips to the window instead of raising."""
    max_y, max_x = window.getmaxyx()
    if y < 0 or y >= max_y or x < 0 or x >= max_x:
        return
    allowed = max_x - x - 1
    if allowed <= 0:
        return
    try:
        window.addstr(y, x, text[:allowed], attr)
    except curses.error:
        return


def bar_chart_lines(counts: Dict[Severity, int], width: int) -> List[tuple[str, Severity]]:
    """Horizontal bars scaled so the largest count fills ``width`` columns."""
    peak = max(counts.values(), default=0)
    lines = []
    for severity, count in counts.items():
        label = f"{severity.label + ' Alerts':<16}"
        bar_width = max(0, width - len(label) - 8)
        filled = round(count / peak * bar_width) if peak else 0
        lines.append((f"{label}{'█' * filled} {count}", severity))
    return lines


def _draw_bar_chart(window: Any, top: int, title: str, counts: Dict[Severity, int], theme: Theme) -> int:
    _, max_x = window.getmaxyx()
    safe_addstr(window, top, 1, title, theme.get("title", 0))
    row = top + 2
    for text, severity in bar_chart_lines(counts, max_x - 2):
        safe_addstr(window, row, 1, text, theme.get(_SEVERITY_COLORS[severity], 0))
        row += 2
    return row


def _draw_tabs(window: Any, top: int, details_active: bool, theme: Theme) -> None:
    active = theme.get("tab_active", curses.A_UNDERLINE)
    inactive = theme.get("info", 0)
    safe_addstr(window, top, 1, "Project", inactive if details_active else active)
    safe_addstr(window, top, 8, " | ", inactive)
    safe_addstr(window, top, 11, "Dependabot Details", active if details_active else inactive)


def _draw_overview(window: Any, session: Session, top: int, height: int, theme: Theme) -> None:
    repositories = list(session.repositories)
    title = f"Alert Levels for {len(repositories)} Repositories"
    row = _draw_bar_chart(window, top, title, total_severity_counts(repositories), theme)
    if session.last_updated:
        safe_addstr(window, row, 1, f"Last updated: {session.last_updated}", theme.get("info", 0))


def _draw_repository_list(window: Any, session: Session, top: int, height: int, theme: Theme) -> None:
    if not len(session.repositories):
        safe_addstr(window, top, 1, "No repositories. Press (u) to fetch them.", theme.get("info", 0))
        return
    cursor = session.repositories.cursor or 0
    first = max(0, cursor - height + 1)
    for offset, repo in enumerate(session.repositories.items[first : first + height]):
        index = first + offset
        marker = ">> " if index == cursor else "   "
        attr = theme.get("info", curses.A_REVERSE) if index == cursor else theme.get("entry", 0)
        safe_addstr(window, top + offset, 1, f"{marker}{repo.name: <35} : {repo.total_active_alerts} alerts", attr)


def _draw_repository_detail(window: Any, session: Session, top: int, height: int, theme: Theme) -> None:
    screen = cast(RepositoryDetail, session.screen)
    repo = screen.repository
    _draw_tabs(window, top, details_active=False, theme=theme)
    info = [
        f"ID: {repo.id}",
        f"Name: {repo.name}",
        f"Private: {str(repo.private).lower()}",
        f"URL: {repo.url}",
        f"Archived: {str(repo.archived).lower()}",
        f"Total active alerts: {repo.total_active_alerts}",
    ]
    for offset, line in enumerate(info):
        safe_addstr(window, top + 2 + offset, 1, line, theme.get("info", 0))
    _draw_bar_chart(window, top + 3 + len(info), f"Alert Levels for {repo.name}", repo.severity_counts(), theme)


def _draw_alert_detail(window: Any, session: Session, top: int, height: int, theme: Theme) -> None:
    screen = cast(AlertDetail, session.screen)
    _draw_tabs(window, top, details_active=True, theme=theme)
    lines = screen.repository.detail_lines()
    view_top = top + 2
    view_height = max(0, height - 2)
    session.observe_viewport(view_height, len(lines))

    position = session.scrollbar.position
    for offset, line in enumerate(lines[position : position + view_height]):
        attr = theme.get("tab_active", 0) if line.startswith("-") else theme.get("info", 0)
        safe_addstr(window, view_top + offset, 1, line, attr)

    _, max_x = window.getmaxyx()
    length = session.scrollbar.length
    if length and view_height:
        thumb = view_top + round(position / length * (view_height - 1))
        for row in range(view_top, view_top + view_height):
            safe_addstr(window, row, max_x - 2, "█" if row == thumb else "│")


def _draw_popup(window: Any, lines: List[tuple[str, int]]) -> None:
    max_y, max_x = window.getmaxyx()
    width = max(len(text) for text, _ in lines) + 4
    top = max(0, (max_y - len(lines) - 2) // 2)
    left = max(0, (max_x - width) // 2)
    border = "+" + "-" * (width - 2) + "+"
    safe_addstr(window, top, left, border)
    for offset, (text, attr) in enumerate(lines):
        safe_addstr(window, top + 1 + offset, left, f"| {text: <{width - 4}} |", attr)
    safe_addstr(window, top + 1 + len(lines), left, border)


def _draw_confirm_refresh(window: Any, session: Session, top: int, height: int, theme: Theme) -> None:
    _draw_popup(
        window,
        [
            ("Repositories Update", theme.get("title", 0)),
            ("", 0),
            ("Would you like to update the current list of repositories? (y/n)", theme.get("hint", 0)),
        ],
    )


def _draw_refreshing(window: Any, session: Session, top: int, height: int, theme: Theme) -> None:
    frame = SPINNER_FRAMES[session.spinner_phase % len(SPINNER_FRAMES)]
    _draw_popup(window, [(f"{frame} Fetching GitHub Repositories...", theme.get("spinner", 0))])


_BODY_RENDERERS: Dict[type, Callable[[Any, Session, int, int, Theme], None]] = {
    Overview: _draw_overview,
    RepositoryList: _draw_repository_list,
    RepositoryDetail: _draw_repository_detail,
    AlertDetail: _draw_alert_detail,
    ConfirmRefresh: _draw_confirm_refresh,
    Refreshing: _draw_refreshing,
}


def draw(window: Any, session: Session, theme: Theme) -> None:
    """Draw one full frame."""
    window.erase()
    max_y, max_x = window.getmaxyx()
    if max_y < MIN_HEIGHT or max_x < MIN_WIDTH:
        safe_addstr(window, 0, 0, f"Terminal too small (need >={MIN_WIDTH}x{MIN_HEIGHT}).")
        window.refresh()
        return

    rule = "─" * (max_x - 1)
    safe_addstr(window, 0, 1, TITLE, theme.get("title", 0))
    safe_addstr(window, 1, 0, rule)

    body_top = 2
    body_height = max_y - 5
    _BODY_RENDERERS[type(session.screen)](window, session, body_top, body_height, theme)

    safe_addstr(window, max_y - 3, 0, rule)
    label = session.screen.navigation_label()
    safe_addstr(window, max_y - 2, 1, label, theme.get("entry", 0))
    safe_addstr(window, max_y - 2, len(label) + 2, "| " + session.screen.key_hint, theme.get("hint", 0))
    if session.error:
        safe_addstr(window, max_y - 1, 1, f"Error: {session.error}", theme.get("error", 0))
    window.refresh()
