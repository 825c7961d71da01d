"""Session state and the key-driven screen transitions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, cast

from dependabot_tracker.keys import Key
from dependabot_tracker.models import Repository
from dependabot_tracker.refresh import RefreshHandle, Refresher, begin_refresh
from dependabot_tracker.screens import (
    AlertDetail,
    ConfirmRefresh,
    Overview,
    Refreshing,
    RepositoryDetail,
    RepositoryList,
    Screen,
)
from dependabot_tracker.scrollbar import DetailScrollbar
from dependabot_tracker.selection import SelectionList

logger = logging.getLogger("dependabot_tracker")


class Session:
    """Everything the UI loop mutates, owned by the UI thread.

    ``handle_key`` applies one input event, ``poll_refresh`` drains the
    refresh channel. Both run on the UI thread only.
    """

    def __init__(
        self,
        repositories: List[Repository],
        refresher: Refresher,
        last_updated: Optional[str] = None,
        start_refresh: Callable[[Refresher], RefreshHandle] = begin_refresh,
    ):
        self.repositories: SelectionList[Repository] = SelectionList(repositories)
        self.screen: Screen = Overview()
        self.scrollbar = DetailScrollbar()
        self.refresh: Optional[RefreshHandle] = None
        self.spinner_phase = 0
        self.viewport_height = 0
        self.error: Optional[str] = None
        self.last_updated = last_updated
        self.running = True
        self._refresher = refresher
        self._start_refresh = start_refresh
        self._handlers: Dict[type, Callable[[Key], None]] = {
            Overview: self._on_overview,
            RepositoryList: self._on_repository_list,
            RepositoryDetail: self._on_repository_detail,
            AlertDetail: self._on_alert_detail,
            ConfirmRefresh: self._on_confirm_refresh,
            Refreshing: self._on_refreshing,
        }

    @property
    def refreshing(self) -> bool:
        return self.refresh is not None

    def go_to(self, screen: Screen) -> None:
        logger.debug("Screen %s -> %s", type(self.screen).__name__, type(screen).__name__)
        self.screen = screen

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_key(self, key: Key) -> None:
        if key is Key.QUIT:
            self.running = False
            return
        self._handlers[type(self.screen)](key)

    def _on_overview(self, key: Key) -> None:
        if key is Key.REPOSITORIES:
            self.go_to(RepositoryList())
        elif key is Key.UPDATE:
            self.go_to(ConfirmRefresh())

    def _on_repository_list(self, key: Key) -> None:
        if key is Key.UP:
            self.repositories.select_previous()
        elif key is Key.DOWN:
            self.repositories.select_next()
        elif key is Key.ENTER:
            repository = self.repositories.current()
            if repository is None:
                return
            self.scrollbar = DetailScrollbar.for_alerts(repository.total_active_alerts)
            logger.debug("Opened %s, %r", repository.name, self.scrollbar)
            self.go_to(RepositoryDetail(repository=repository.model_copy(deep=True)))
        elif key is Key.OVERVIEW:
            self.go_to(Overview())
        elif key is Key.UPDATE:
            self.go_to(ConfirmRefresh())

    def _on_repository_detail(self, key: Key) -> None:
        screen = cast(RepositoryDetail, self.screen)
        if key is Key.TAB:
            self.go_to(AlertDetail(repository=screen.repository))
        elif key is Key.REPOSITORIES:
            self.go_to(RepositoryList())

    def _on_alert_detail(self, key: Key) -> None:
        screen = cast(AlertDetail, self.screen)
        if key is Key.UP:
            self.scrollbar.scroll_up()
        elif key is Key.DOWN:
            self.scrollbar.scroll_down()
        elif key is Key.TOP:
            self.scrollbar.jump_to_top()
        elif key is Key.TAB:
            self.go_to(RepositoryDetail(repository=screen.repository))
        elif key is Key.OVERVIEW:
            self.go_to(Overview())

    def _on_confirm_refresh(self, key: Key) -> None:
        if key is Key.YES:
            self.refresh = self._start_refresh(self._refresher)
            self.go_to(Refreshing())
        elif key is Key.NO:
            self.go_to(RepositoryList())

    def _on_refreshing(self, key: Key) -> None:
        # Only quit is honoured while a refresh is in flight.
        return

    # ------------------------------------------------------------------
    # Background refresh
    # ------------------------------------------------------------------

    def poll_refresh(self) -> bool:
        """Check the refresh channel once. Returns True while still waiting.

        Raises:
            WorkerLostError: if the worker died without reporting.
        """
        if self.refresh is None:
            return False
        outcome = self.refresh.poll()
        if outcome is None:
            self.spinner_phase += 1
            return True

        self.refresh = None
        if outcome.ok:
            self.repositories.replace(outcome.repositories)
            self.error = None
            self.last_updated = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            logger.info("Refresh finished with %d repositories", len(self.repositories))
        else:
            self.error = outcome.error
            logger.error("Refresh failed, keeping previous data: %s", outcome.error)
        self.go_to(Overview())
        return False

    # ------------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------------

    def observe_viewport(self, height: int, content_lines: int) -> None:
        """Resize the scrollbar when the alert view's height changed since the last frame."""
        if not isinstance(self.screen, AlertDetail):
            return
        if height != self.viewport_height:
            self.scrollbar.resize(content_lines, height)
            logger.debug("Viewport %d -> %d, %r", self.viewport_height, height, self.scrollbar)
        self.viewport_height = height
