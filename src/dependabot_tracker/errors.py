"""Tracker exception hierarchy."""


class TrackerError(Exception):
    """Base exception for dependabot-tracker errors."""


class StartupDataError(TrackerError):
    """Raised when the snapshot file is missing or cannot be parsed."""


class RefreshError(TrackerError):
    """Raised when a refresh cannot produce a new data set."""


class RefreshTransportError(RefreshError):
    """Raised when fetching from GitHub fails during a refresh."""


class WorkerLostError(TrackerError):
    """Raised when the refresh worker exits without reporting a result."""

    def __init__(self, message: str = "Fetch thread terminated unexpectedly."):
        super().__init__(message)
