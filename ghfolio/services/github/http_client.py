"""
Shared HTTP client for GitHub API and raw content requests.

Provides a singleton AsyncClient with connection pooling. The profile and
repository requests are issued concurrently, so both reuse the same pool.

The same client fetches the profile README from raw.githubusercontent.com.
That host redirects renamed profile repositories to their new location, so
redirects are followed; otherwise a 301 would reach the retrying fetcher as
an error status and be retried three times before the README is dropped.
"""

import logging

import httpx

logger = logging.getLogger(__name__)

# Module-level singleton client
_client: httpx.AsyncClient | None = None


def get_github_client() -> httpx.AsyncClient:
    """
    Get or create the shared HTTP client for GitHub calls.

    Per-attempt timeouts are passed on each request by the retrying fetcher;
    the client-level timeout is only an upper bound.

    Returns:
        Shared httpx.AsyncClient
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(30.0, connect=5.0),
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            http2=True,
            follow_redirects=True,
        )
        logger.debug("Created new GitHub HTTP client with connection pooling")
    return _client


async def close_github_client() -> None:
    """
    Close the shared HTTP client.

    Call on app shutdown for graceful termination.
    """
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        _client = None
        logger.debug("Closed GitHub HTTP client")
