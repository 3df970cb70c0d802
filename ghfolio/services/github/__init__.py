"""
GitHub service package.

Re-exports the public types and classes.
Usage: `from ghfolio.services.github import GitHubReadOperations, RetryingFetcher`

Module structure:
- fetcher.py: Retrying fetcher (timeout, linear/exponential backoff)
- read_operations.py: Profile, repository list and README reads
- helpers.py: Rate limit parsing and status-to-error mapping
- http_client.py: Shared httpx client
- cache.py: TTL cache for the profile README
- types.py: Normalized portfolio data types
- exceptions.py: Error taxonomy
- constants.py: Language colors and normalizer defaults
"""

from ghfolio.services.github.cache import clear_all_caches as clear_github_caches
from ghfolio.services.github.cache import get_cache_stats as get_github_cache_stats
from ghfolio.services.github.constants import GITHUB_LANGUAGE_COLORS, language_color
from ghfolio.services.github.exceptions import (
    GitHubAPIError,
    MalformedCacheError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from ghfolio.services.github.fetcher import RetryingFetcher
from ghfolio.services.github.helpers import RateLimitInfo, error_for_response
from ghfolio.services.github.http_client import close_github_client
from ghfolio.services.github.read_operations import GitHubReadOperations
from ghfolio.services.github.types import (
    AboutContent,
    AboutSection,
    AggregateStatistics,
    Portfolio,
    Profile,
    Repository,
)

__all__ = [
    # Operations
    "GitHubReadOperations",
    "RetryingFetcher",
    # HTTP client lifecycle
    "close_github_client",
    # Cache management
    "clear_github_caches",
    "get_github_cache_stats",
    # Utilities
    "error_for_response",
    "language_color",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    "MalformedCacheError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
    # Types
    "AboutContent",
    "AboutSection",
    "AggregateStatistics",
    "Portfolio",
    "Profile",
    "Repository",
    # Constants
    "GITHUB_LANGUAGE_COLORS",
]
