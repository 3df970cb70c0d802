"""
GitHub API read operations.

Provides the read-only calls the portfolio needs:
- User profile
- Public repository list
- Profile README (about section source)

Every request goes through the RetryingFetcher. Payloads are returned raw;
shape validation happens in the normalizer.
"""

import asyncio
import logging
from typing import Any

from ghfolio.config import settings
from ghfolio.services.github.cache import cached_github_call, readme_cache
from ghfolio.services.github.exceptions import GitHubAPIError, ValidationError
from ghfolio.services.github.fetcher import RetryingFetcher

logger = logging.getLogger(__name__)


def _decode_json(response: Any, resource: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ValidationError(f"Invalid JSON from GitHub for {resource}") from e


def _raise_for_error_payload(data: Any, resource: str) -> None:
    """GitHub sometimes reports errors as a 200 body with a `message` field."""
    if isinstance(data, dict) and "message" in data:
        raise ValidationError(f"GitHub API error for {resource}: {data['message']}")


class GitHubReadOperations:
    """
    Read-only operations for the GitHub REST API.

    Uses a RetryingFetcher, which in turn uses the shared HTTP client.
    """

    def __init__(
        self,
        fetcher: RetryingFetcher | None = None,
        base_url: str | None = None,
        raw_base_url: str | None = None,
    ):
        self.fetcher = fetcher or RetryingFetcher()
        self.base_url = (base_url or settings.github_api_base).rstrip("/")
        self.raw_base_url = (raw_base_url or settings.github_raw_base).rstrip("/")

    async def get_user(self, username: str) -> dict[str, Any]:
        """
        Fetch a user's public profile.

        Args:
            username: GitHub login

        Returns:
            Raw profile payload
        """
        url = f"{self.base_url}/users/{username}"
        response = await self.fetcher.fetch_with_retry(url)
        data = _decode_json(response, url)
        _raise_for_error_payload(data, url)

        if not isinstance(data, dict):
            raise ValidationError(f"Expected an object for {url}, got {type(data).__name__}")
        return data

    async def get_user_repos(
        self,
        username: str,
        per_page: int = 100,
        sort: str = "updated",
        direction: str = "desc",
    ) -> list[dict[str, Any]]:
        """
        Fetch a user's public repositories.

        Args:
            username: GitHub login
            per_page: Items per page (max 100)
            sort: Server-side sort ('created', 'updated', 'pushed', 'full_name')
            direction: Sort direction ('asc', 'desc')

        Returns:
            Raw repository payloads
        """
        url = f"{self.base_url}/users/{username}/repos"
        params: dict[str, str | int] = {
            "sort": sort,
            "direction": direction,
            "per_page": min(per_page, 100),
        }
        response = await self.fetcher.fetch_with_retry(url, params=params)
        data = _decode_json(response, url)
        _raise_for_error_payload(data, url)

        if not isinstance(data, list):
            raise ValidationError(f"Expected a list for {url}, got {type(data).__name__}")
        return data

    async def get_user_and_repos(
        self, username: str
    ) -> tuple[dict[str, Any], list[dict[str, Any]]]:
        """
        Fetch profile and repositories concurrently.

        Both must succeed. If either fails the other request is cancelled and
        the first error is raised.
        """
        user_task = asyncio.create_task(self.get_user(username))
        repos_task = asyncio.create_task(self.get_user_repos(username))
        try:
            user, repos = await asyncio.gather(user_task, repos_task)
        except Exception:
            for task in (user_task, repos_task):
                task.cancel()
            raise
        return user, repos

    @cached_github_call(readme_cache)
    async def get_profile_readme(self, username: str, branch: str = "main") -> str | None:
        """
        Fetch the README of the user's profile repository (`<user>/<user>`).

        Results are cached for an hour. Failures are logged and yield None so
        the caller can fall back to default about content.
        """
        url = f"{self.raw_base_url}/{username}/{username}/refs/heads/{branch}/README.md"
        try:
            response = await self.fetcher.fetch_with_retry(url)
        except GitHubAPIError as e:
            logger.warning(f"Error fetching README for {username}: {e.message}")
            return None

        return response.text
