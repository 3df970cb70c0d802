"""Exceptions for GitHub portfolio fetching."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class NetworkError(GitHubAPIError):
    """Connectivity failure or per-attempt timeout."""

    def __init__(self, message: str, timed_out: bool = False):
        self.timed_out = timed_out
        super().__init__(message)


class RateLimitError(GitHubAPIError):
    """GitHub answered 403, usually because the rate limit window is exhausted."""

    def __init__(self, message: str = "GitHub API rate limit exceeded", rate_limit_reset: int | None = None):
        super().__init__(message, 403, rate_limit_reset=rate_limit_reset)


class NotFoundError(GitHubAPIError):
    """GitHub answered 404 (unknown username or missing resource).

    Never retried: the username will not appear between attempts.
    """

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Resource not found: {resource}", 404)


class MalformedCacheError(GitHubAPIError):
    """Session cache entry is corrupt, incomplete or expired.

    Raised inside the cache store and always converted to a cache miss.
    """


class ValidationError(GitHubAPIError):
    """Upstream payload does not have the expected shape."""
