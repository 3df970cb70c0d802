"""Root conftest: shared fixtures for all tests.

Provides:
- anyio backend selection (asyncio only)
- Autouse reset of the README TTL cache
- A PortfolioSession wired to mocked GitHub reads and in-memory storage
- API client with the session dependency overridden
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from ghfolio.services.github.cache import clear_all_caches
from ghfolio.services.portfolio.cache_store import CacheStore, MemorySessionStorage
from ghfolio.services.portfolio.session import PortfolioSession
from tests.helpers.factories import NOW_MS, repo_json, user_json


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_caches():
    """Clear the README TTL cache before each test to prevent cross-test pollution."""
    clear_all_caches()
    yield
    clear_all_caches()


@pytest.fixture
def clock():
    """Mutable clock: set `clock.now` to move time."""

    class _Clock:
        now = NOW_MS

        def __call__(self) -> int:
            return self.now

    return _Clock()


@pytest.fixture
def cache_store(clock) -> CacheStore:
    return CacheStore(MemorySessionStorage(), "github_portfolio_octocat", ttl_seconds=900, clock=clock)


@pytest.fixture
def mock_reader() -> AsyncMock:
    """GitHubReadOperations stand-in returning three public repos and one private."""
    reader = AsyncMock()
    reader.get_user_and_repos.return_value = (
        user_json(),
        [
            repo_json(1, "portfolio-app", language="JavaScript", stargazers_count=10),
            repo_json(2, "go-tools", language="Go", stargazers_count=4),
            repo_json(3, "dotfiles", language=None, stargazers_count=0, topics=[]),
            repo_json(4, "secret", private=True),
        ],
    )
    reader.get_profile_readme.return_value = "## About\n- Builds things\n- Ships things\n"
    return reader


@pytest.fixture
def portfolio_session(mock_reader, cache_store) -> PortfolioSession:
    return PortfolioSession(
        username="octocat",
        reader=mock_reader,
        cache=cache_store,
        page_size=2,
        retry_limit=2,
        retry_delay=3.0,
        locale="en",
        sleep=AsyncMock(),
    )


@pytest.fixture
async def api_client(portfolio_session):
    """HTTP client against the app with the portfolio session overridden."""
    from ghfolio.api.deps import get_portfolio_session
    from ghfolio.main import app

    app.dependency_overrides[get_portfolio_session] = lambda: portfolio_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
