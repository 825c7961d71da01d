"""Pydantic models for GitHub REST API responses."""

from __future__ import annotations

from pydantic import BaseModel

from dependabot_tracker.models import Alert, AlertState, Repository, Severity


class GitHubRepository(BaseModel):
    id: int
    name: str
    full_name: str
    private: bool = False
    html_url: str
    archived: bool = False


class GitHubPackage(BaseModel):
    ecosystem: str
    name: str


class GitHubSecurityVulnerability(BaseModel):
    severity: Severity
    package: GitHubPackage


class GitHubDependabotAlert(BaseModel):
    number: int
    state: AlertState
    security_vulnerability: GitHubSecurityVulnerability
    html_url: str
    created_at: str
    updated_at: str
    dismissed_at: str | None = None

    def to_alert(self) -> Alert:
        vulnerability = self.security_vulnerability
        return Alert(
            number=self.number,
            state=self.state,
            severity=vulnerability.severity,
            html_url=self.html_url,
            created_at=self.created_at,
            updated_at=self.updated_at,
            dismissed_at=self.dismissed_at,
            dependency_ecosystem=vulnerability.package.ecosystem,
            dependency_name=vulnerability.package.name,
        )


def to_repository(
    repository: GitHubRepository, alerts: list[GitHubDependabotAlert]
) -> Repository:
    """Combine a repository listing entry with its alerts."""
    return Repository(
        id=repository.id,
        name=repository.name,
        full_name=repository.full_name,
        private=repository.private,
        url=repository.html_url,
        archived=repository.archived,
        alerts=[alert.to_alert() for alert in alerts],
    )
