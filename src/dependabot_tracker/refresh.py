"""Run a refresh on a worker thread and hand the result back to the UI thread.

The worker sends exactly one RefreshOutcome through a one-slot queue. The UI
thread polls the queue without blocking; it never joins the worker.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from dependabot_tracker.errors import WorkerLostError
from dependabot_tracker.models import Repository

logger = logging.getLogger("dependabot_tracker")

Refresher = Callable[[], List[Repository]]


class RefreshOutcome(BaseModel):
    """The single message a refresh worker sends back."""

    model_config = {"frozen": True}

    repositories: List[Repository] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _run_refresh(refresher: Refresher, channel: "queue.Queue[RefreshOutcome]") -> None:
    try:
        repositories = refresher()
    except Exception as e:
        logger.exception("Refresh failed")
        channel.put(RefreshOutcome(error=str(e) or type(e).__name__))
        return
    channel.put(RefreshOutcome(repositories=repositories))


class RefreshHandle:
    """The UI thread's end of an in-flight refresh."""

    def __init__(self, thread: threading.Thread, channel: "queue.Queue[RefreshOutcome]"):
        self._thread = thread
        self._channel = channel
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def poll(self) -> Optional[RefreshOutcome]:
        """Return the outcome if it is ready, else None. Never blocks.

        Raises:
            WorkerLostError: if the worker exited without sending an outcome.
        """
        if self._consumed:
            return None
        try:
            outcome = self._channel.get_nowait()
        except queue.Empty:
            if self._thread.is_alive():
                return None
            # The worker may have sent and exited between the two checks.
            try:
                outcome = self._channel.get_nowait()
            except queue.Empty:
                raise WorkerLostError() from None
        self._consumed = True
        return outcome


def begin_refresh(refresher: Refresher) -> RefreshHandle:
    """Start one worker thread running ``refresher``."""
    channel: "queue.Queue[RefreshOutcome]" = queue.Queue(maxsize=1)
    thread = threading.Thread(
        target=_run_refresh,
        args=(refresher, channel),
        name="dependabot-refresh",
        daemon=True,
    )
    thread.start()
    logger.info("Started refresh worker %s", thread.name)
    return RefreshHandle(thread, channel)
