"""
Filter, sort and paginate the repository collection.

`apply` is a pure function of the collection and a FilterState. Sorting is
stable, so ties keep the upstream order (most recently updated first).
`RepositoryListing` adds the only mutable piece, the page counter, and
resets it whenever the filter state changes.
"""

import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Literal, get_args

from ghfolio.services.github.constants import ALL_LANGUAGES
from ghfolio.services.github.types import Repository
from ghfolio.services.portfolio.utils import EPOCH, parse_timestamp

SortKey = Literal["updated", "stars", "name"]
SORT_KEYS: tuple[str, ...] = get_args(SortKey)
DEFAULT_SORT: SortKey = "updated"
PAGE_SIZE = 12


@dataclass(frozen=True)
class FilterState:
    """Current query, language and sort selection."""

    query: str = ""
    language: str = ALL_LANGUAGES
    sort: SortKey = DEFAULT_SORT


def matches_query(repo: Repository, query: str) -> bool:
    """Case-insensitive substring match on name, description or any topic."""
    needle = query.strip().casefold()
    if not needle:
        return True
    if needle in repo.name.casefold():
        return True
    if repo.description and needle in repo.description.casefold():
        return True
    return any(needle in topic.casefold() for topic in repo.topics)


def matches_language(repo: Repository, language: str) -> bool:
    return language == ALL_LANGUAGES or repo.language == language


def name_sort_key(name: str) -> tuple[str, str]:
    """Accent- and case-insensitive collation key, raw name as tie-breaker."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name)


def updated_sort_key(repo: Repository):
    return parse_timestamp(repo.updated_at) or EPOCH


def sort_repositories(repos: Sequence[Repository], sort: str) -> list[Repository]:
    """Sort by stars (desc), name (asc) or update time (desc, the default)."""
    if sort == "stars":
        return sorted(repos, key=lambda r: r.stars, reverse=True)
    if sort == "name":
        return sorted(repos, key=lambda r: name_sort_key(r.name))
    return sorted(repos, key=updated_sort_key, reverse=True)


def apply(collection: Sequence[Repository], state: FilterState) -> list[Repository]:
    """Filter by query and language, then sort. Never mutates the collection."""
    filtered = [
        repo
        for repo in collection
        if matches_query(repo, state.query) and matches_language(repo, state.language)
    ]
    return sort_repositories(filtered, state.sort)


def paginate(items: Sequence[Repository], page: int, page_size: int = PAGE_SIZE) -> list[Repository]:
    """Leading `page_size * (page + 1)` items."""
    return list(items[: page_size * (max(page, 0) + 1)])



class RepositoryListing:
    """Filter state plus the page counter over one repository collection."""

    def __init__(self, repositories: Sequence[Repository] = (), page_size: int = PAGE_SIZE):
        self.page_size = page_size
        self._repositories: list[Repository] = list(repositories)
        self.state = FilterState()
        self.page = 0
        self._filtered: list[Repository] = []
        self._displayed: list[Repository] = []
        self._recompute()

    def _recompute(self) -> None:
        self.page = 0
        self._displayed = []
        self._filtered = apply(self._repositories, self.state)
        self._displayed = paginate(self._filtered, self.page, self.page_size)

    def _update(self, **changes: str) -> None:
        self.state = replace(self.state, **changes)
        self._recompute()

    @property
    def repositories(self) -> list[Repository]:
        return list(self._repositories)

    @property
    def filtered(self) -> list[Repository]:
        return list(self._filtered)

    @property
    def displayed(self) -> list[Repository]:
        return list(self._displayed)

    @property
    def total(self) -> int:
        return len(self._filtered)

    @property
    def remaining(self) -> int:
        return len(self._filtered) - len(self._displayed)

    @property
    def has_more(self) -> bool:
        return self.remaining > 0

    def set_repositories(self, repositories: Sequence[Repository]) -> None:
        self._repositories = list(repositories)
        self._recompute()

    def set_query(self, query: str) -> None:
        self._update(query=query.strip())

    def set_language(self, language: str) -> None:
        self._update(language=language)

    def set_sort(self, sort: str) -> None:
        if sort not in SORT_KEYS:
            raise ValueError(f"Unknown sort key {sort!r}, expected one of {', '.join(SORT_KEYS)}")
        self._update(sort=sort)

    def clear_search(self) -> None:
        self.set_query("")

    def reset_filters(self) -> None:
        self.state = FilterState()
        self._recompute()

    def load_more(self) -> list[Repository]:
        """Surface the next page and return the whole displayed subset."""
        if self.has_more:
            self.page += 1
            self._displayed = paginate(self._filtered, self.page, self.page_size)
        return self.displayed
