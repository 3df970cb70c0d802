"""Unit tests for GitHub read operations.

The fetcher is mocked, so these tests cover URL construction, payload
shape checks, the concurrent profile + repository fetch and README caching.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from ghfolio.services.github.exceptions import (
    NetworkError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from ghfolio.services.github.read_operations import GitHubReadOperations
from tests.helpers.factories import make_response, repo_json, user_json

API = "https://api.github.com"
RAW = "https://raw.githubusercontent.com"


@pytest.fixture
def fetcher() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def reader(fetcher) -> GitHubReadOperations:
    return GitHubReadOperations(fetcher=fetcher, base_url=API, raw_base_url=RAW)


class TestGetUser:
    @pytest.mark.anyio
    async def test_returns_payload(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(json_data=user_json())

        data = await reader.get_user("octocat")

        assert data["login"] == "octocat"
        fetcher.fetch_with_retry.assert_awaited_once_with(f"{API}/users/octocat")

    @pytest.mark.anyio
    async def test_message_payload_raises_validation_error(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(
            json_data={"message": "API rate limit exceeded", "documentation_url": "x"}
        )

        with pytest.raises(ValidationError, match="API rate limit exceeded"):
            await reader.get_user("octocat")

    @pytest.mark.anyio
    async def test_non_json_body_raises_validation_error(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(text="<html>oops</html>")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            await reader.get_user("octocat")


class TestGetUserRepos:
    @pytest.mark.anyio
    async def test_requests_sorted_page_of_100(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(json_data=[repo_json()])

        repos = await reader.get_user_repos("octocat")

        assert repos[0]["name"] == "my-repo"
        fetcher.fetch_with_retry.assert_awaited_once_with(
            f"{API}/users/octocat/repos",
            params={"sort": "updated", "direction": "desc", "per_page": 100},
        )

    @pytest.mark.anyio
    async def test_caps_per_page(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(json_data=[])

        await reader.get_user_repos("octocat", per_page=500)

        assert fetcher.fetch_with_retry.call_args.kwargs["params"]["per_page"] == 100

    @pytest.mark.anyio
    async def test_object_instead_of_list_raises(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(json_data={"id": 1})

        with pytest.raises(ValidationError, match="Expected a list"):
            await reader.get_user_repos("octocat")


class TestGetUserAndRepos:
    @pytest.mark.anyio
    async def test_returns_both_payloads(self, reader, fetcher):
        async def fake_fetch(url, **_kwargs):
            if url.endswith("/repos"):
                return make_response(json_data=[repo_json()])
            return make_response(json_data=user_json())

        fetcher.fetch_with_retry.side_effect = fake_fetch

        user, repos = await reader.get_user_and_repos("octocat")

        assert user["login"] == "octocat"
        assert len(repos) == 1
        assert fetcher.fetch_with_retry.await_count == 2

    @pytest.mark.anyio
    async def test_either_failure_fails_the_whole_operation(self, reader, fetcher):
        async def fake_fetch(url, **_kwargs):
            if url.endswith("/repos"):
                raise RateLimitError()
            return make_response(json_data=user_json())

        fetcher.fetch_with_retry.side_effect = fake_fetch

        with pytest.raises(RateLimitError):
            await reader.get_user_and_repos("octocat")

    @pytest.mark.anyio
    async def test_failure_cancels_the_other_request(self, reader, fetcher):
        slow_started = asyncio.Event()
        slow_cancelled = asyncio.Event()

        async def fake_fetch(url, **_kwargs):
            if url.endswith("/repos"):
                slow_started.set()
                try:
                    await asyncio.sleep(60)
                except asyncio.CancelledError:
                    slow_cancelled.set()
                    raise
            await slow_started.wait()
            raise NotFoundError(url)

        fetcher.fetch_with_retry.side_effect = fake_fetch

        with pytest.raises(NotFoundError):
            await reader.get_user_and_repos("ghost")

        await asyncio.sleep(0)
        assert slow_cancelled.is_set()


class TestGetProfileReadme:
    @pytest.mark.anyio
    async def test_fetches_raw_readme(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(text="# Hi")

        content = await reader.get_profile_readme("octocat")

        assert content == "# Hi"
        fetcher.fetch_with_retry.assert_awaited_once_with(
            f"{RAW}/octocat/octocat/refs/heads/main/README.md"
        )

    @pytest.mark.anyio
    async def test_failure_returns_none(self, reader, fetcher):
        fetcher.fetch_with_retry.side_effect = NetworkError("down")

        assert await reader.get_profile_readme("octocat") is None

    @pytest.mark.anyio
    async def test_result_is_cached(self, reader, fetcher):
        fetcher.fetch_with_retry.return_value = make_response(text="# Hi")

        await reader.get_profile_readme("octocat")
        await reader.get_profile_readme("octocat")

        assert fetcher.fetch_with_retry.await_count == 1

    @pytest.mark.anyio
    async def test_missing_readme_is_not_cached(self, reader, fetcher):
        fetcher.fetch_with_retry.side_effect = [
            NotFoundError("README"),
            make_response(text="# Later"),
        ]

        assert await reader.get_profile_readme("octocat") is None
        assert await reader.get_profile_readme("octocat") == "# Later"
