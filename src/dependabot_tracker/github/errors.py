"""GitHub API exception hierarchy."""


class GitHubAPIError(Exception):
    """Base exception for GitHub API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        return self.status_code is not None and 400 <= self.status_code < 500


class GitHubValidationError(GitHubAPIError):
    """Raised when the request is malformed (400) or unprocessable (422)."""

    def __init__(self, message: str = "Validation error."):
        super().__init__(message, status_code=400)


class GitHubAuthenticationError(GitHubAPIError):
    """Raised when authentication fails (401)."""

    def __init__(self, message: str = "Authentication failed. Check PAT."):
        super().__init__(message, status_code=401)


class GitHubPermissionError(GitHubAPIError):
    """Raised when the token lacks access to the resource (403)."""

    def __init__(self, message: str = "Permission denied."):
        super().__init__(message, status_code=403)


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a resource is not found (404)."""

    def __init__(self, message: str = "Resource not found."):
        super().__init__(message, status_code=404)
