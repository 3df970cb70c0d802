"""Pydantic schemas for the raw GitHub REST payloads we consume.

Only the fields the normalizer reads are declared; everything else GitHub
returns is ignored.
"""

from pydantic import BaseModel, ConfigDict


class RawUser(BaseModel):
    """Payload of GET /users/{username}."""

    model_config = ConfigDict(extra="ignore")

    login: str
    name: str | None = None
    bio: str | None = None
    location: str | None = None
    followers: int | None = None
    following: int | None = None
    public_repos: int | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    blog: str | None = None
    twitter_username: str | None = None
    company: str | None = None
    email: str | None = None


class RawRepo(BaseModel):
    """One element of GET /users/{username}/repos."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int | None = None
    forks_count: int | None = None
    updated_at: str | None = None
    created_at: str | None = None
    homepage: str | None = None
    topics: list[str] | None = None
    private: bool = False
