"""
Normalization of raw GitHub payloads into the portfolio shape.

Raw payloads are validated with pydantic first; anything that does not
match raises ValidationError. Private repositories never reach the
normalized collection, and statistics are always derived from that
collection rather than stored.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ghfolio.schemas.github_payloads import RawRepo, RawUser
from ghfolio.services.github.constants import (
    DEFAULT_BIO,
    DEFAULT_LOCATION,
    DEFAULT_TITLE,
    TITLE_PATTERNS,
    TITLE_WORD,
)
from ghfolio.services.github.exceptions import ValidationError
from ghfolio.services.github.types import (
    AggregateStatistics,
    Portfolio,
    Profile,
    Repository,
)

logger = logging.getLogger(__name__)

_repo_list_adapter = TypeAdapter(list[RawRepo])


def extract_title(bio: str | None) -> str:
    """
    Derive a professional title from a bio.

    When any role keyword appears, the bio words that are title words
    (senior, full, developer, ...) are joined in their original order.
    """
    if not bio:
        return DEFAULT_TITLE

    if any(pattern.search(bio) for pattern in TITLE_PATTERNS):
        title_words = [word for word in bio.split() if TITLE_WORD.match(word)]
        if title_words:
            return " ".join(title_words)

    return DEFAULT_TITLE


def compute_statistics(repositories: Iterable[Repository]) -> AggregateStatistics:
    """Totals and per-language counts in a single pass."""
    total_repos = total_stars = total_forks = 0
    languages: Counter[str] = Counter()

    for repo in repositories:
        total_repos += 1
        total_stars += repo.stars
        total_forks += repo.forks
        if repo.language:
            languages[repo.language] += 1

    return AggregateStatistics(
        total_repos=total_repos,
        total_stars=total_stars,
        total_forks=total_forks,
        languages=dict(languages),
    )


def build_portfolio(user: Profile, repositories: Iterable[Repository]) -> Portfolio:
    """Assemble a portfolio, dropping private repositories and deriving statistics."""
    visible = [repo for repo in repositories if not repo.private]
    return Portfolio(user=user, repositories=visible, statistics=compute_statistics(visible))


def normalize_user(raw: RawUser) -> Profile:
    return Profile(
        name=raw.name or raw.login,
        username=raw.login,
        title=extract_title(raw.bio),
        bio=raw.bio or DEFAULT_BIO,
        location=raw.location or DEFAULT_LOCATION,
        followers=raw.followers or 0,
        following=raw.following or 0,
        public_repos=raw.public_repos or 0,
        avatar_url=raw.avatar_url,
        html_url=raw.html_url,
        blog=raw.blog or None,
        twitter_username=raw.twitter_username,
        company=raw.company,
        email=raw.email,
    )


def normalize_repo(raw: RawRepo) -> Repository:
    return Repository(
        id=raw.id,
        name=raw.name,
        description=raw.description,
        language=raw.language,
        stars=raw.stargazers_count or 0,
        forks=raw.forks_count or 0,
        html_url=raw.html_url,
        updated_at=raw.updated_at,
        created_at=raw.created_at,
        homepage=raw.homepage or None,
        topics=tuple(raw.topics or ()),
        private=raw.private,
    )


def normalize(raw_user: Any, raw_repos: Any) -> Portfolio:
    """
    Map raw GitHub payloads to a Portfolio.

    Args:
        raw_user: Payload of GET /users/{username}
        raw_repos: Payload of GET /users/{username}/repos

    Returns:
        Portfolio with public repositories only

    Raises:
        ValidationError: If either payload has an unexpected shape
    """
    try:
        user = RawUser.model_validate(raw_user)
    except PydanticValidationError as e:
        raise ValidationError(f"Unexpected user payload: {e.error_count()} error(s)") from e

    try:
        repos = _repo_list_adapter.validate_python(raw_repos)
    except PydanticValidationError as e:
        raise ValidationError(f"Unexpected repository payload: {e.error_count()} error(s)") from e

    portfolio = build_portfolio(normalize_user(user), (normalize_repo(r) for r in repos))
    hidden = len(repos) - len(portfolio.repositories)
    if hidden:
        logger.debug(f"Excluded {hidden} private repositories for {user.login}")
    return portfolio


def language_options(statistics: AggregateStatistics) -> list[tuple[str, int]]:
    """Languages for the filter, most used first, ties by name."""
    return sorted(statistics.languages.items(), key=lambda item: (-item[1], item[0]))
