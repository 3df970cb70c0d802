"""Pydantic schemas for upstream payloads, the session cache and API responses."""

from ghfolio.schemas.cache_entry import CacheEntry, CachedPortfolio
from ghfolio.schemas.github_payloads import RawRepo, RawUser
from ghfolio.schemas.portfolio import (
    AboutResponse,
    AboutSectionResponse,
    LanguageOption,
    PortfolioResponse,
    ProfileResponse,
    RepositoriesResponse,
    RepositoryItem,
    StatisticsResponse,
)

__all__ = [
    "AboutResponse",
    "AboutSectionResponse",
    "CacheEntry",
    "CachedPortfolio",
    "LanguageOption",
    "PortfolioResponse",
    "ProfileResponse",
    "RawRepo",
    "RawUser",
    "RepositoriesResponse",
    "RepositoryItem",
    "StatisticsResponse",
]
