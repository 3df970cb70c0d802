"""
Session cache for the fetched portfolio.

A single string key in a key-value session storage holds
`{"timestamp": <epoch ms>, "data": {"user": {...}, "repos": [...]}}`.

Reads fail soft: a corrupt, incomplete or expired entry is removed and
reported as a miss. Writes are best-effort.
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from ghfolio.config import settings
from ghfolio.schemas.cache_entry import CacheEntry, CachedPortfolio
from ghfolio.services.github.exceptions import MalformedCacheError
from ghfolio.services.github.types import Portfolio

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def now_ms() -> int:
    return int(time.time() * 1000)


class SessionStorage(Protocol):
    """Minimal string key-value store, shaped like a browser sessionStorage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemorySessionStorage:
    """Process-local storage; lives as long as the session object."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileSessionStorage:
    """One JSON file per key inside a directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        try:
            return self._path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def default_storage() -> SessionStorage:
    """File storage when a cache directory is configured, memory otherwise."""
    if settings.file_cache_enabled:
        return FileSessionStorage(settings.cache_dir)
    return MemorySessionStorage()


def cache_key_for(username: str) -> str:
    return f"github_portfolio_{username}"


class CacheStore:
    """Read/write/clear of the single portfolio cache entry."""

    def __init__(
        self,
        storage: SessionStorage,
        key: str,
        ttl_seconds: int | None = None,
        clock: Clock = now_ms,
    ):
        self.storage = storage
        self.key = key
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        self._clock = clock

    def _parse(self, raw: str) -> CacheEntry:
        try:
            entry = CacheEntry.model_validate_json(raw)
        except PydanticValidationError as e:
            raise MalformedCacheError(f"Invalid cache entry: {e.error_count()} error(s)") from e

        age = entry.age_seconds(self._clock())
        if age >= self.ttl_seconds:
            raise MalformedCacheError(f"Cache entry expired ({age:.0f}s old)")
        return entry

    def _get_raw(self) -> str | None:
        try:
            return self.storage.get_item(self.key)
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedCacheError(f"Unreadable cache entry: {e}") from e

    def read(self) -> CacheEntry | None:
        """
        Return the cached entry if present, well-formed and fresh.

        Any other entry, including one the storage cannot read back, is
        removed and None is returned.
        """
        try:
            raw = self._get_raw()
            if raw is None:
                return None
            entry = self._parse(raw)
        except MalformedCacheError as e:
            logger.info(f"Discarding session cache {self.key}: {e.message}")
            self.clear()
            return None

        logger.debug(f"Session cache hit: {self.key}")
        return entry

    def write(self, entry: CacheEntry) -> None:
        """Overwrite the cached entry. Storage failures are logged, not raised."""
        try:
            self.storage.set_item(self.key, entry.model_dump_json())
        except OSError as e:
            logger.warning(f"Error saving session cache {self.key}: {e}")

    def store(self, portfolio: Portfolio) -> CacheEntry:
        """Build an entry stamped with the current time and write it."""
        entry = CacheEntry(
            timestamp=self._clock(),
            data=CachedPortfolio(user=portfolio.user, repos=portfolio.repositories),
        )
        self.write(entry)
        return entry

    def clear(self) -> None:
        try:
            self.storage.remove_item(self.key)
        except OSError as e:
            logger.warning(f"Error clearing session cache {self.key}: {e}")
