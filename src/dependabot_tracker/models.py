"""Domain models for repositories and their Dependabot alerts."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

# Lines produced by Alert.to_lines(); used to size the alert detail scrollbar.
ALERT_LINE_BLOCK = 10


class AlertState(str, Enum):
    AUTO_DISMISSED = "auto_dismissed"
    DISMISSED = "dismissed"
    FIXED = "fixed"
    OPEN = "open"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title().replace(" ", "")


class Severity(str, Enum):
    """Advisory severity, ordered low < medium < high < critical."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value.title()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_ORDER = [Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL]


class Alert(BaseModel):
    """A single Dependabot alert as shown in the alert detail view."""

    model_config = {"frozen": True}

    number: int
    state: AlertState
    severity: Severity
    html_url: str
    created_at: str
    updated_at: str
    dismissed_at: Optional[str] = None
    dependency_ecosystem: str
    dependency_name: str

    @property
    def is_open(self) -> bool:
        return self.state is AlertState.OPEN

    def to_lines(self) -> List[str]:
        """Render the alert as a fixed block of ALERT_LINE_BLOCK lines."""
        return [
            "-" * 20,
            f"Number: {self.number}",
            f"State: {self.state.label}",
            f"Severity: {self.severity.label}",
            f"URL: {self.html_url}",
            f"Created At: {self.created_at}",
            f"Updated At: {self.updated_at}",
            f"Dismissed At: {self.dismissed_at or 'N/A'}",
            f"Dependency Ecosystem: {self.dependency_ecosystem}",
            f"Dependency Name: {self.dependency_name}",
        ]


class Repository(BaseModel):
    """
    A repository and its Dependabot alerts.

    The severity counts are derived from ``alerts`` and only include open
    alerts. They are serialized into the snapshot for readability but are
    always recomputed on load, so a hand-edited snapshot cannot make them
    disagree with the alert list.
    """

    model_config = {"frozen": True}

    id: int
    name: str
    full_name: str
    private: bool = False
    url: str
    archived: bool = False
    alerts: List[Alert] = Field(default_factory=list)

    def _open_count(self, severity: Severity) -> int:
        return sum(1 for a in self.alerts if a.is_open and a.severity is severity)

    @computed_field
    @property
    def low_alerts(self) -> int:
        return self._open_count(Severity.LOW)

    @computed_field
    @property
    def medium_alerts(self) -> int:
        return self._open_count(Severity.MEDIUM)

    @computed_field
    @property
    def high_alerts(self) -> int:
        return self._open_count(Severity.HIGH)

    @computed_field
    @property
    def critical_alerts(self) -> int:
        return self._open_count(Severity.CRITICAL)

    @computed_field
    @property
    def total_active_alerts(self) -> int:
        return self.low_alerts + self.medium_alerts + self.high_alerts + self.critical_alerts

    def severity_counts(self) -> dict[Severity, int]:
        return {
            Severity.LOW: self.low_alerts,
            Severity.MEDIUM: self.medium_alerts,
            Severity.HIGH: self.high_alerts,
            Severity.CRITICAL: self.critical_alerts,
        }

    def detail_lines(self) -> List[str]:
        return [line for alert in self.alerts for line in alert.to_lines()]


def total_severity_counts(repositories: List[Repository]) -> dict[Severity, int]:
    """Sum open-alert counts per severity across all repositories."""
    totals = {severity: 0 for severity in _SEVERITY_ORDER}
    for repo in repositories:
        for severity, count in repo.severity_counts().items():
            totals[severity] += count
    return totals
