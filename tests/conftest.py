"""Shared pytest configuration."""

import pytest

from dependabot_tracker.models import Alert, AlertState, Repository, Severity


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if not config.getoption("-m", default=None) or "integration" not in config.getoption("-m", default=""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def _make_alert(number=1, state=AlertState.OPEN, severity=Severity.HIGH, **overrides):
    fields = {
        "number": number,
        "state": state,
        "severity": severity,
        "html_url": f"https://github.com/me/repo/security/dependabot/{number}",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "dependency_ecosystem": "pip",
        "dependency_name": "requests",
    }
    fields.update(overrides)
    return Alert(**fields)


def _make_repository(repo_id=1, name="repo", open_alerts=0, alerts=None):
    if alerts is None:
        alerts = [_make_alert(number=i + 1) for i in range(open_alerts)]
    return Repository(
        id=repo_id,
        name=name,
        full_name=f"me/{name}",
        url=f"https://github.com/me/{name}",
        alerts=alerts,
    )


@pytest.fixture
def make_alert():
    return _make_alert


@pytest.fixture
def make_repository():
    return _make_repository
