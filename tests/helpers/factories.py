"""Payload and object factories shared by unit and API tests.

Raw builders mirror the GitHub REST shapes; `make_*` builders return the
normalized dataclasses directly.
"""

from __future__ import annotations

import httpx

from ghfolio.services.github.types import Profile, Repository

# Fixed "now" for cache tests: 2026-01-20T00:00:00Z in epoch ms
NOW_MS = 1_768_867_200_000


def make_response(
    status_code: int = 200,
    json_data: object = None,
    headers: dict[str, str] | None = None,
    text: str | None = None,
) -> httpx.Response:
    """Build a fake httpx.Response with the given status, body and headers."""
    if text is not None:
        return httpx.Response(status_code=status_code, text=text, headers=headers or {})
    return httpx.Response(
        status_code=status_code,
        json=json_data,
        headers=headers or {},
    )


def user_json(login: str = "octocat", **overrides: object) -> dict:
    """Minimal GET /users/{username} payload."""
    base = {
        "login": login,
        "name": "The Octocat",
        "bio": "Senior Software Engineer at GitHub",
        "location": "San Francisco",
        "followers": 120,
        "following": 9,
        "public_repos": 8,
        "avatar_url": f"https://avatars.githubusercontent.com/{login}",
        "html_url": f"https://github.com/{login}",
        "blog": "",
        "twitter_username": None,
        "company": "@github",
        "email": None,
    }
    base.update(overrides)
    return base


def repo_json(repo_id: int = 1, name: str = "my-repo", **overrides: object) -> dict:
    """Minimal element of GET /users/{username}/repos."""
    base = {
        "id": repo_id,
        "name": name,
        "full_name": f"octocat/{name}",
        "description": "A test repo",
        "html_url": f"https://github.com/octocat/{name}",
        "homepage": None,
        "language": "Python",
        "stargazers_count": 3,
        "forks_count": 1,
        "updated_at": "2026-01-15T00:00:00Z",
        "created_at": "2025-06-01T00:00:00Z",
        "topics": ["portfolio"],
        "private": False,
    }
    base.update(overrides)
    return base


def make_profile(**overrides: object) -> Profile:
    fields: dict = {
        "name": "The Octocat",
        "username": "octocat",
        "title": "Senior Software Engineer",
        "bio": "Senior Software Engineer at GitHub",
        "location": "San Francisco",
        "followers": 120,
        "following": 9,
        "public_repos": 8,
        "avatar_url": "https://avatars.githubusercontent.com/octocat",
        "html_url": "https://github.com/octocat",
    }
    fields.update(overrides)
    return Profile(**fields)


def make_repo(repo_id: int = 1, name: str = "my-repo", **overrides: object) -> Repository:
    fields: dict = {
        "id": repo_id,
        "name": name,
        "description": None,
        "language": None,
        "stars": 0,
        "forks": 0,
        "html_url": f"https://github.com/octocat/{name}",
        "updated_at": "2026-01-01T00:00:00Z",
    }
    fields.update(overrides)
    return Repository(**fields)
