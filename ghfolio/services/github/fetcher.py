"""
Retrying fetcher for GitHub requests.

Every request goes through `RetryingFetcher.fetch_with_retry`, which bounds
each attempt with a timeout and backs off between attempts:

- 403 (rate limited): linear wait of `rate_limit_backoff * attempt`
- other statuses and network errors: exponential wait of `retry_backoff * 2**attempt`
- 404: raised immediately, never retried

No wait happens after the final attempt. When the budget is exhausted the
last observed error is raised.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from ghfolio.config import settings
from ghfolio.services.github.exceptions import (
    GitHubAPIError,
    NetworkError,
    NotFoundError,
    RateLimitError,
)
from ghfolio.services.github.helpers import error_for_response
from ghfolio.services.github.http_client import get_github_client

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class RetryingFetcher:
    """Issues GET requests with per-attempt timeout and backoff."""

    API_VERSION = "2022-11-28"

    def __init__(
        self,
        max_attempts: int | None = None,
        timeout: float | None = None,
        rate_limit_backoff: float | None = None,
        retry_backoff: float | None = None,
        token: str | None = None,
        sleep: SleepFunc = asyncio.sleep,
        client_factory: Callable[[], httpx.AsyncClient] = get_github_client,
    ):
        self.max_attempts = max_attempts if max_attempts is not None else settings.fetch_max_attempts
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        self.timeout = timeout if timeout is not None else settings.fetch_timeout_seconds
        self.rate_limit_backoff = (
            rate_limit_backoff
            if rate_limit_backoff is not None
            else settings.rate_limit_backoff_seconds
        )
        self.retry_backoff = (
            retry_backoff if retry_backoff is not None else settings.retry_backoff_seconds
        )
        self._sleep = sleep
        self._client_factory = client_factory

        token = token if token is not None else settings.github_token
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    def backoff_for(self, error: GitHubAPIError, attempt: int) -> float:
        """Seconds to wait after a failed attempt (1-indexed)."""
        if isinstance(error, RateLimitError):
            return self.rate_limit_backoff * attempt
        return self.retry_backoff * (2**attempt)

    async def _attempt(self, url: str, options: dict[str, Any]) -> httpx.Response:
        client = self._client_factory()
        headers = {**self._headers, **options.pop("headers", {})}
        try:
            async with asyncio.timeout(self.timeout):
                return await client.get(url, headers=headers, timeout=self.timeout, **options)
        except (TimeoutError, httpx.TimeoutException) as e:
            raise NetworkError(f"Request timed out after {self.timeout:g}s: {url}", timed_out=True) from e
        except httpx.RequestError as e:
            raise NetworkError(f"Network error for {url}: {e}") from e

    async def fetch_with_retry(self, url: str, **options: Any) -> httpx.Response:
        """
        GET a URL, retrying on failure.

        Args:
            url: Absolute URL
            **options: Extra keyword arguments for httpx (params, headers)

        Returns:
            The first successful response

        Raises:
            NotFoundError: Immediately on 404
            RateLimitError: If the last attempt was rate limited
            NetworkError: If the last attempt timed out or could not connect
            GitHubAPIError: If the last attempt returned another error status
        """
        last_error: GitHubAPIError
        attempt = 0
        while True:
            attempt += 1
            try:
                response = await self._attempt(url, dict(options))
            except NetworkError as e:
                last_error = e
            else:
                error = error_for_response(response, url)
                if error is None:
                    return response
                if isinstance(error, NotFoundError):
                    raise error
                last_error = error

            if attempt >= self.max_attempts:
                logger.error(
                    f"Giving up on {url} after {self.max_attempts} attempts: {last_error.message}"
                )
                raise last_error

            delay = self.backoff_for(last_error, attempt)
            if isinstance(last_error, RateLimitError):
                logger.warning(
                    f"Rate limited by GitHub API, waiting {delay:g}s before retry "
                    f"({attempt}/{self.max_attempts})"
                )
            else:
                logger.warning(
                    f"Attempt {attempt}/{self.max_attempts} failed for {url}: "
                    f"{last_error.message}. Retrying in {delay:g}s"
                )
            await self._sleep(delay)
