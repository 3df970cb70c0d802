"""Pydantic response schemas for the portfolio endpoints."""

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """Normalized GitHub profile."""

    name: str
    username: str
    title: str
    bio: str
    location: str
    followers: int
    following: int
    public_repos: int
    avatar_url: str | None
    html_url: str | None
    blog: str | None = None
    company: str | None = None
    email: str | None = None
    twitter_username: str | None = None
    linkedin_url: str | None = None  # First LinkedIn profile mentioned in the bio


class StatisticsResponse(BaseModel):
    total_repos: int
    total_stars: int
    total_forks: int
    followers: int


class LanguageOption(BaseModel):
    """Language filter option, most used first."""

    name: str
    count: int
    color: str  # Hex color for display


class AboutSectionResponse(BaseModel):
    title: str
    content: list[str]  # "<hr>" items mark horizontal rules
    is_list: bool


class AboutResponse(BaseModel):
    greeting: str
    intro: str
    sections: list[AboutSectionResponse] = []


class PortfolioResponse(BaseModel):
    """Response for GET /portfolio and POST /portfolio/refresh."""

    user: ProfileResponse
    statistics: StatisticsResponse
    languages: list[LanguageOption]
    about: AboutResponse | None
    from_cache: bool


class RepositoryItem(BaseModel):
    id: int
    name: str
    description: str | None
    language: str | None
    language_color: str
    stars: int
    forks: int
    html_url: str
    homepage: str | None
    topics: list[str]
    updated_at: str | None
    updated_label: str  # dd/mm/yyyy, empty when unknown


class RepositoriesResponse(BaseModel):
    """Response for GET /portfolio/repositories."""

    items: list[RepositoryItem]
    total: int
    page: int
    page_size: int
    remaining: int
    has_more: bool
    query: str
    language: str
    sort: str
