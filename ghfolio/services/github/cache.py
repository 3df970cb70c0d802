"""
TTL caching for GitHub content that changes rarely.

The profile README backing the about section is memoised for an hour so a
refresh of the repository data does not refetch it. The session cache of
profile and repositories lives in `ghfolio.services.portfolio.cache_store`.
"""

import hashlib
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from cachetools import TTLCache  # type: ignore[import-untyped]

from ghfolio.config import settings

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

_readme_cache: TTLCache[str, Any] = TTLCache(maxsize=50, ttl=settings.readme_cache_ttl_seconds)


def _make_cache_key(func_name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """
    Generate a cache key from function name and arguments.

    Skips 'self' (first positional arg) since we're caching by username, not instance.
    """
    cache_args = args[1:] if args else ()
    key_data = f"{func_name}:{cache_args}:{sorted(kwargs.items())}"
    return hashlib.md5(key_data.encode()).hexdigest()


def cached_github_call(
    cache: TTLCache[str, Any],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for caching async GitHub calls.

    Usage:
        @cached_github_call(readme_cache)
        async def get_profile_readme(self, username: str) -> str | None:
            ...

    None results are not stored, so a missing README is retried on the next load.
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            key = _make_cache_key(func.__name__, args, kwargs)

            if key in cache:
                logger.debug(f"Cache HIT: {func.__name__}")
                cached_result: T = cache[key]
                return cached_result

            logger.debug(f"Cache MISS: {func.__name__}")
            result = await func(*args, **kwargs)
            if result is not None:
                cache[key] = result
            return result

        return wrapper

    return decorator


def clear_all_caches() -> None:
    """Clear all content caches. Useful for testing or on forced refresh."""
    _readme_cache.clear()
    logger.debug("Cleared GitHub content caches")


def get_cache_stats() -> dict[str, dict[str, int]]:
    """Get current cache statistics for monitoring."""
    return {
        "readme": {"size": len(_readme_cache), "maxsize": _readme_cache.maxsize},
    }


readme_cache = _readme_cache
