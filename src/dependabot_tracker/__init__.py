"""Terminal dashboard for Dependabot alerts across your GitHub repositories."""

from dependabot_tracker.models import Alert, AlertState, Repository, Severity
from dependabot_tracker.session import Session
from dependabot_tracker.settings import TrackerSettings

__all__ = ["Alert", "AlertState", "Repository", "Severity", "Session", "TrackerSettings"]
