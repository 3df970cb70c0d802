"""
Portfolio session: the single object that owns everything a page needs.

One session per consumer holds the cache store, the GitHub reader, the
loaded portfolio, the about content and the repository listing state.
Nothing is kept in module globals.

Loading order:
1. Session cache (unless forced)
2. Concurrent profile + repository fetch, normalization, cache write
3. Profile README for the about section (never fails the load; kept as is
   when the portfolio comes from the session cache)

A plain load joins one already in flight; a forced load (refresh) cancels
it and starts over. `run()` wraps `load()` in a bounded retry loop with a
doubling delay and ends in a terminal `failed` state.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum

from ghfolio.config import settings
from ghfolio.services.github.cache import clear_all_caches
from ghfolio.services.github.exceptions import GitHubAPIError, NotFoundError
from ghfolio.services.github.read_operations import GitHubReadOperations
from ghfolio.services.github.types import (
    AboutContent,
    AggregateStatistics,
    Portfolio,
    Repository,
)
from ghfolio.services.portfolio.about import parse_about
from ghfolio.services.portfolio.cache_store import (
    CacheStore,
    cache_key_for,
    default_storage,
)
from ghfolio.services.portfolio.messages import user_message
from ghfolio.services.portfolio.normalizer import (
    build_portfolio,
    language_options,
    normalize,
)
from ghfolio.services.portfolio.pipeline import RepositoryListing

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    RETRYING = "retrying"  # a load failed, another attempt is scheduled
    FAILED = "failed"  # terminal; only refresh() leaves this state


class PortfolioSession:
    """Loads one user's portfolio and tracks the listing state over it."""

    def __init__(
        self,
        username: str | None = None,
        reader: GitHubReadOperations | None = None,
        cache: CacheStore | None = None,
        page_size: int | None = None,
        retry_limit: int | None = None,
        retry_delay: float | None = None,
        locale: str | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.username = username or settings.github_username
        self.reader = reader or GitHubReadOperations()
        self.cache = cache or CacheStore(default_storage(), cache_key_for(self.username))
        self.retry_limit = retry_limit if retry_limit is not None else settings.load_retry_limit
        self.retry_delay = (
            retry_delay if retry_delay is not None else settings.load_retry_delay_seconds
        )
        self.locale = locale or settings.locale
        self._sleep = sleep

        self.listing = RepositoryListing(page_size=page_size or settings.page_size)
        self.portfolio: Portfolio | None = None
        self.about: AboutContent | None = None
        self.status = LoadStatus.IDLE
        self.error: GitHubAPIError | None = None
        self.error_message = ""
        self.from_cache = False
        self._load_task: asyncio.Task[Portfolio] | None = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def _fetch(self) -> Portfolio:
        raw_user, raw_repos = await self.reader.get_user_and_repos(self.username)
        portfolio = normalize(raw_user, raw_repos)
        self.cache.store(portfolio)
        logger.info(
            f"Fetched {portfolio.statistics.total_repos} repositories for {self.username} "
            f"from GitHub API"
        )
        return portfolio

    async def _load(self, force: bool) -> Portfolio:
        self.status = LoadStatus.LOADING

        entry = None if force else self.cache.read()
        if entry is not None:
            portfolio = build_portfolio(entry.data.user, entry.data.repos)
            self.from_cache = True
            logger.info(f"Loaded portfolio for {self.username} from session cache")
        else:
            portfolio = await self._fetch()
            self.from_cache = False

        self.portfolio = portfolio
        self.listing.set_repositories(portfolio.repositories)
        if not self.from_cache or self.about is None:
            self.about = parse_about(await self.reader.get_profile_readme(self.username))

        self.status = LoadStatus.READY
        self.error = None
        self.error_message = ""
        return portfolio

    def _start_load(self, force: bool) -> asyncio.Task[Portfolio]:
        if self._load_task is not None and not self._load_task.done():
            if not force:
                logger.debug(f"Joining in-flight load for {self.username}")
                return self._load_task
            logger.info(f"Cancelling in-flight load for {self.username}")
            self._load_task.cancel()
        self._load_task = asyncio.create_task(self._load(force))
        return self._load_task

    async def load(self, force: bool = False) -> Portfolio:
        """
        Load the portfolio, from cache when fresh unless `force` is set.

        A load already in flight is joined rather than restarted, unless
        `force` is set, in which case it is cancelled. A caller whose load is
        superseded that way receives the result of the newer load. Cancelling
        a caller does not cancel the shared load.

        Raises:
            GitHubAPIError: Any taxonomy error from fetching or normalizing
        """
        task = self._start_load(force)
        while True:
            try:
                return await asyncio.shield(task)
            except GitHubAPIError as e:
                self._record_error(e)
                self.status = LoadStatus.FAILED
                raise
            except asyncio.CancelledError:
                current = asyncio.current_task()
                superseded = task is not self._load_task and self._load_task is not None
                if not superseded or (current is not None and current.cancelling()):
                    raise
                task = self._load_task

    async def refresh(self) -> Portfolio:
        """Drop the session cache and the README cache, then fetch again."""
        self.cache.clear()
        clear_all_caches()
        return await self.load(force=True)

    def _record_error(self, error: GitHubAPIError) -> None:
        self.error = error
        self.error_message = user_message(error, self.username, self.locale)

    async def run(self) -> Portfolio | None:
        """
        Load with automatic retries.

        After a failure the load is retried after `retry_delay` seconds, with
        the delay doubling each time, at most `retry_limit` times. Not-found
        errors are terminal immediately.

        Returns:
            The portfolio, or None once the session is in the failed state
        """
        delay = self.retry_delay
        failures = 0
        while True:
            try:
                return await self.load()
            except GitHubAPIError as e:
                failures += 1
                self._record_error(e)

                if isinstance(e, NotFoundError) or failures > self.retry_limit:
                    self.status = LoadStatus.FAILED
                    logger.error(
                        f"Giving up loading portfolio for {self.username} after "
                        f"{failures} failure(s): {e.message}"
                    )
                    return None

                self.status = LoadStatus.RETRYING
                logger.warning(
                    f"Loading portfolio for {self.username} failed ({e.message}), "
                    f"retrying in {delay:g}s ({failures}/{self.retry_limit})"
                )
                await self._sleep(delay)
                delay *= 2

    # ------------------------------------------------------------------
    # Listing state
    # ------------------------------------------------------------------

    @property
    def statistics(self) -> AggregateStatistics | None:
        return self.portfolio.statistics if self.portfolio else None

    def language_options(self) -> list[tuple[str, int]]:
        return language_options(self.portfolio.statistics) if self.portfolio else []

    @property
    def displayed(self) -> list[Repository]:
        return self.listing.displayed

    def set_query(self, query: str) -> None:
        self.listing.set_query(query)

    def clear_search(self) -> None:
        self.listing.clear_search()

    def set_language(self, language: str) -> None:
        self.listing.set_language(language)

    def set_sort(self, sort: str) -> None:
        self.listing.set_sort(sort)

    def reset_filters(self) -> None:
        self.listing.reset_filters()

    def load_more(self) -> list[Repository]:
        return self.listing.load_more()
