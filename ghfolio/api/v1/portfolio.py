"""
Portfolio endpoints: profile summary, repository listing and refresh.

The listing endpoint is stateless: every request carries its own query,
language, sort and page, and the pipeline is applied to the session's
repository collection.
"""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ghfolio.api.deps import Session
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
from ghfolio.services.github.constants import ALL_LANGUAGES, language_color
from ghfolio.services.github.exceptions import (
    GitHubAPIError,
    NetworkError,
    NotFoundError,
    RateLimitError,
)
from ghfolio.services.github.types import Portfolio, Repository
from ghfolio.services.portfolio.messages import user_message
from ghfolio.services.portfolio.pipeline import FilterState, SortKey, apply, paginate
from ghfolio.services.portfolio.session import PortfolioSession
from ghfolio.services.portfolio.utils import extract_linkedin, format_date

router = APIRouter(prefix="/portfolio", tags=["portfolio"])
logger = logging.getLogger(__name__)


def _http_error(e: GitHubAPIError, session: PortfolioSession) -> HTTPException:
    if isinstance(e, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(e, RateLimitError):
        code = status.HTTP_429_TOO_MANY_REQUESTS
    elif isinstance(e, NetworkError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_502_BAD_GATEWAY

    logger.warning(f"Portfolio load failed for {session.username}: {e.message}")
    return HTTPException(status_code=code, detail=user_message(e, session.username, session.locale))


async def _ensure_loaded(session: PortfolioSession, force: bool = False) -> Portfolio:
    try:
        if force:
            return await session.refresh()
        return await session.load()
    except GitHubAPIError as e:
        raise _http_error(e, session) from None


def _portfolio_response(session: PortfolioSession, portfolio: Portfolio) -> PortfolioResponse:
    user = portfolio.user
    stats = portfolio.statistics
    about = session.about

    return PortfolioResponse(
        user=ProfileResponse(
            name=user.name,
            username=user.username,
            title=user.title,
            bio=user.bio,
            location=user.location,
            followers=user.followers,
            following=user.following,
            public_repos=user.public_repos,
            avatar_url=user.avatar_url,
            html_url=user.html_url,
            blog=user.blog,
            company=user.company,
            email=user.email,
            twitter_username=user.twitter_username,
            linkedin_url=extract_linkedin(user.bio),
        ),
        statistics=StatisticsResponse(
            total_repos=stats.total_repos,
            total_stars=stats.total_stars,
            total_forks=stats.total_forks,
            followers=user.followers,
        ),
        languages=[
            LanguageOption(name=name, count=count, color=language_color(name))
            for name, count in session.language_options()
        ],
        about=AboutResponse(
            greeting=about.greeting,
            intro=about.intro,
            sections=[
                AboutSectionResponse(title=s.title, content=s.content, is_list=s.is_list)
                for s in about.sections
            ],
        )
        if about
        else None,
        from_cache=session.from_cache,
    )


def _repository_item(repo: Repository) -> RepositoryItem:
    return RepositoryItem(
        id=repo.id,
        name=repo.name,
        description=repo.description,
        language=repo.language,
        language_color=language_color(repo.language),
        stars=repo.stars,
        forks=repo.forks,
        html_url=repo.html_url,
        homepage=repo.homepage,
        topics=list(repo.topics),
        updated_at=repo.updated_at,
        updated_label=format_date(repo.updated_at),
    )


@router.get("", response_model=PortfolioResponse)
async def get_portfolio(session: Session) -> PortfolioResponse:
    """Profile, aggregate statistics, language options and about content."""
    portfolio = await _ensure_loaded(session)
    return _portfolio_response(session, portfolio)


@router.get("/repositories", response_model=RepositoriesResponse)
async def list_repositories(
    session: Session,
    query: str = Query("", description="Substring of name, description or topic"),
    language: str = Query(ALL_LANGUAGES, description="Exact language, or 'all'"),
    sort: SortKey = Query("updated", description="Sort by: updated, stars, name"),
    page: int = Query(0, ge=0, description="Zero-based page counter"),
) -> RepositoriesResponse:
    """
    Filtered, sorted repositories.

    Returns the leading `page_size * (page + 1)` matches, so a client that
    increments `page` keeps everything it has already shown.
    """
    portfolio = await _ensure_loaded(session)
    state = FilterState(query=query.strip(), language=language, sort=sort)
    matches = apply(portfolio.repositories, state)
    page_size = session.listing.page_size
    shown = paginate(matches, page, page_size)

    return RepositoriesResponse(
        items=[_repository_item(repo) for repo in shown],
        total=len(matches),
        page=page,
        page_size=page_size,
        remaining=len(matches) - len(shown),
        has_more=len(shown) < len(matches),
        query=state.query,
        language=state.language,
        sort=state.sort,
    )


@router.post("/refresh", response_model=PortfolioResponse)
async def refresh_portfolio(session: Session) -> PortfolioResponse:
    """Drop the session cache and fetch fresh data from GitHub."""
    portfolio = await _ensure_loaded(session, force=True)
    logger.info(f"Refreshed portfolio for {session.username}")
    return _portfolio_response(session, portfolio)
