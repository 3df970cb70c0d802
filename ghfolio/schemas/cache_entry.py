"""Pydantic schema for the serialized session cache entry."""

from pydantic import BaseModel

from ghfolio.services.github.types import Profile, Repository


class CachedPortfolio(BaseModel):
    """Cached payload: the profile and the visible repositories."""

    user: Profile
    repos: list[Repository]


class CacheEntry(BaseModel):
    """Session cache entry, serialized as `{"timestamp": ms, "data": {...}}`."""

    timestamp: int  # epoch milliseconds of the fetch
    data: CachedPortfolio

    def age_seconds(self, now_ms: int) -> float:
        return (now_ms - self.timestamp) / 1000
