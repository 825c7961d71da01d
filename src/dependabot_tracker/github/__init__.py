from dependabot_tracker.github.client import GitHubClient
from dependabot_tracker.github.errors import (
    GitHubAPIError,
    GitHubAuthenticationError,
    GitHubNotFoundError,
    GitHubPermissionError,
    GitHubValidationError,
)

__all__ = [
    "GitHubClient",
    "GitHubAPIError",
    "GitHubAuthenticationError",
    "GitHubNotFoundError",
    "GitHubPermissionError",
    "GitHubValidationError",
]
