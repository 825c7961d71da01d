"""Scroll position over the lines of the alert detail view."""

from __future__ import annotations

from dependabot_tracker.models import ALERT_LINE_BLOCK


class DetailScrollbar:
    """A position in ``[0, length]`` where ``length`` is the last valid offset."""

    def __init__(self, length: int = 0):
        self._length = max(0, length)
        self.position = 0

    @classmethod
    def for_alerts(cls, alert_count: int) -> DetailScrollbar:
        # Sized from the fixed per-alert block. The alert view resizes it
        # only when it observes a different viewport height.
        return cls(alert_count * ALERT_LINE_BLOCK)

    @property
    def length(self) -> int:
        return self._length

    def scroll_down(self) -> None:
        if self.position < self._length:
            self.position += 1
        else:
            self.position = 0

    def scroll_up(self) -> None:
        if self.position > 0:
            self.position -= 1
        else:
            self.position = self._length

    def jump_to_top(self) -> None:
        self.position = 0

    def resize(self, content_lines: int, viewport_height: int) -> None:
        self._length = max(0, content_lines - viewport_height)
        self.position = 0

    def __repr__(self) -> str:
        return f"DetailScrollbar(position={self.position}, length={self._length})"
