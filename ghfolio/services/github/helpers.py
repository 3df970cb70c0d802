"""
GitHub API helper utilities.

Rate limit header parsing and translation of HTTP statuses into the
exception taxonomy used by the retrying fetcher.
"""

import logging

import httpx

from ghfolio.services.github.exceptions import (
    GitHubAPIError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)


def _parse_int(value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if missing or malformed."""
        return _parse_int(self.reset)

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted. A malformed header counts as not exhausted."""
        return _parse_int(self.remaining) == 0


def error_for_response(response: httpx.Response, resource: str) -> GitHubAPIError | None:
    """
    Map a response to the error it represents.

    Args:
        response: The HTTP response
        resource: URL or name used in error messages

    Returns:
        None for 2xx responses, otherwise the matching exception instance
    """
    if response.is_success:
        return None

    if response.status_code == 403:
        rate_info = RateLimitInfo(response)
        if rate_info.is_exhausted:
            return RateLimitError(rate_limit_reset=rate_info.reset_timestamp)
        return RateLimitError(f"Rate limited: {response.status_code}")
    elif response.status_code == 404:
        return NotFoundError(resource)

    return GitHubAPIError(
        f"HTTP {response.status_code}: {response.reason_phrase}", response.status_code
    )
