"""Fetch every owned repository and its Dependabot alerts, then persist them."""

from __future__ import annotations

import logging
from typing import List

import httpx
from pydantic import ValidationError

from dependabot_tracker.errors import RefreshTransportError
from dependabot_tracker.github.client import GitHubClient
from dependabot_tracker.github.errors import GitHubAPIError
from dependabot_tracker.github.models import GitHubDependabotAlert, GitHubRepository, to_repository
from dependabot_tracker.models import Repository
from dependabot_tracker.settings import TrackerSettings
from dependabot_tracker.snapshot import save_repositories
from dependabot_tracker.utils.timing import timed

logger = logging.getLogger("dependabot_tracker")


def _fetch_alerts(
    client: GitHubClient, owner: str, repository: GitHubRepository
) -> List[GitHubDependabotAlert]:
    logger.info("Fetching dependabot alerts for %s", repository.name)
    try:
        return client.list_dependabot_alerts(owner, repository.name)
    except GitHubAPIError as e:
        if not e.is_client_error:
            raise
        # 4xx here means Dependabot alerts are disabled for the repository.
        logger.warning("Dependabot alerts not enabled for %s (%s)", repository.name, e.status_code)
        return []


def fetch_repositories(client: GitHubClient, owner: str) -> List[Repository]:
    """Fetch all owned repositories with their alerts and severity counts.

    Raises:
        RefreshTransportError: on network failures, server errors, a failed
            repository listing, or malformed payloads.
    """
    try:
        listed = client.list_owned_repositories()
        logger.info("Found %d owned repositories", len(listed))
        return [to_repository(repo, _fetch_alerts(client, owner, repo)) for repo in listed]
    except (GitHubAPIError, httpx.HTTPError, ValidationError, ValueError) as e:
        raise RefreshTransportError(f"Failed to fetch repositories: {e}") from e


@timed
def refresh_snapshot(settings: TrackerSettings) -> List[Repository]:
    """Run a full refresh: fetch from GitHub and overwrite the snapshot."""
    with GitHubClient(
        token=settings.token,
        base_url=settings.api_url,
        timeout=settings.timeout,
        per_page=settings.per_page,
    ) as client:
        repositories = fetch_repositories(client, settings.username)
    save_repositories(settings.snapshot_path, repositories)
    return repositories
