"""Synchronous GitHub REST API client using httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dependabot_tracker.github.errors import (
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubNotFoundError,
    GitHubPermissionError,
    GitHubValidationError,
)
from dependabot_tracker.github.models import GitHubDependabotAlert, GitHubRepository

logger = logging.getLogger("dependabot_tracker")

GITHUB_API = "https://api.github.com"

_ERROR_MAP: dict[int, type[GitHubAPIError]] = {
    400: GitHubValidationError,
    401: GitHubAuthenticationError,
    403: GitHubPermissionError,
    404: GitHubNotFoundError,
    422: GitHubValidationError,
}


def _auth_headers(token: str) -> dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": "dependabot-tracker/1.0",
    }


def next_page_url(link: str) -> str | None:
    """Return the rel="next" target of a Link header, if any."""
    for part in [p.strip() for p in link.split(",")]:
        if 'rel="next"' in part:
            lt, gt = part.find("<"), part.find(">")
            if lt >= 0 and gt > lt:
                return part[lt + 1 : gt]
            break
    return None


class GitHubClient:
    """Wrapper around the parts of the GitHub REST API the tracker reads."""

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API,
        timeout: int = 30,
        per_page: int = 100,
    ):
        self._per_page = per_page
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=_auth_headers(token),
            timeout=timeout,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *_args: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        response = self._client.request(method, url, **kwargs)
        if response.status_code >= 400:
            error_cls = _ERROR_MAP.get(response.status_code, GitHubAPIError)
            error = error_cls(
                f"GitHub API {method} {url} failed ({response.status_code}): {response.text}"
            )
            error.status_code = response.status_code
            raise error
        return response

    def _get_paginated(self, path: str, **params: Any) -> list[Any]:
        """GET every page of a list endpoint, following Link rel="next"."""
        items: list[Any] = []
        next_url: str | None = path
        next_params: dict[str, Any] | None = {"per_page": self._per_page, **params}
        page_count = 0

        while next_url:
            page_count += 1
            response = self._request("GET", next_url, params=next_params)
            batch = response.json()
            if isinstance(batch, dict):
                batch = batch.get("items", [])
            items.extend(batch)
            logger.debug("Retrieved %d items from page %d of %s", len(batch), page_count, path)

            next_url = next_page_url(response.headers.get("Link", ""))
            # The next link already carries the query string.
            next_params = None

        return items

    # ------------------------------------------------------------------
    # Repositories
    # ------------------------------------------------------------------

    def list_owned_repositories(self) -> list[GitHubRepository]:
        items = self._get_paginated("/user/repos", affiliation="owner")
        return [GitHubRepository.model_validate(item) for item in items]

    # ------------------------------------------------------------------
    # Dependabot
    # ------------------------------------------------------------------

    def list_dependabot_alerts(self, owner: str, repo: str) -> list[GitHubDependabotAlert]:
        items = self._get_paginated(f"/repos/{owner}/{repo}/dependabot/alerts")
        return [GitHubDependabotAlert.model_validate(item) for item in items]
