"""
Portfolio services: session cache, normalization, about parsing,
filter/sort pipeline and the session object tying them together.
"""

from ghfolio.services.portfolio.about import default_about, parse_about
from ghfolio.services.portfolio.cache_store import (
    CacheStore,
    FileSessionStorage,
    MemorySessionStorage,
    SessionStorage,
    cache_key_for,
)
from ghfolio.services.portfolio.messages import user_message
from ghfolio.services.portfolio.normalizer import (
    compute_statistics,
    extract_title,
    language_options,
    normalize,
)
from ghfolio.services.portfolio.pipeline import (
    FilterState,
    RepositoryListing,
    apply,
    paginate,
)
from ghfolio.services.portfolio.session import LoadStatus, PortfolioSession

__all__ = [
    "CacheStore",
    "FileSessionStorage",
    "FilterState",
    "LoadStatus",
    "MemorySessionStorage",
    "PortfolioSession",
    "RepositoryListing",
    "SessionStorage",
    "apply",
    "cache_key_for",
    "compute_statistics",
    "default_about",
    "extract_title",
    "language_options",
    "normalize",
    "paginate",
    "parse_about",
    "user_message",
]
