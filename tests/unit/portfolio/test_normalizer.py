"""Unit tests for payload normalization and statistics."""

from __future__ import annotations

import pytest

from ghfolio.services.github.constants import DEFAULT_BIO, DEFAULT_LOCATION, DEFAULT_TITLE
from ghfolio.services.github.exceptions import ValidationError
from ghfolio.services.portfolio.normalizer import (
    build_portfolio,
    compute_statistics,
    extract_title,
    language_options,
    normalize,
)
from tests.helpers.factories import make_profile, make_repo, repo_json, user_json


class TestExtractTitle:
    @pytest.mark.parametrize(
        ("bio", "expected"),
        [
            ("Senior Software Engineer at GitHub", "Senior Software Engineer"),
            ("Desenvolvedor Full Stack apaixonado", "Desenvolvedor Full"),
            ("Backend developer from Recife", "developer"),
            ("I like turtles", DEFAULT_TITLE),
            ("", DEFAULT_TITLE),
            (None, DEFAULT_TITLE),
        ],
    )
    def test_titles(self, bio, expected):
        assert extract_title(bio) == expected

    def test_keyword_without_title_words_falls_back(self):
        # "fullstack" triggers extraction but is not itself a title word
        assert extract_title("fullstack tinkerer") == DEFAULT_TITLE


class TestNormalize:
    def test_maps_profile_fields(self):
        portfolio = normalize(user_json(), [])

        user = portfolio.user
        assert user.name == "The Octocat"
        assert user.username == "octocat"
        assert user.title == "Senior Software Engineer"
        assert user.followers == 120
        assert user.public_repos == 8
        assert user.blog is None

    def test_missing_profile_fields_get_defaults(self):
        raw = {"login": "ghost"}

        user = normalize(raw, []).user

        assert user.name == "ghost"
        assert user.bio == DEFAULT_BIO
        assert user.location == DEFAULT_LOCATION
        assert user.title == DEFAULT_TITLE
        assert user.followers == 0
        assert user.following == 0

    def test_maps_repository_fields(self):
        raw = repo_json(7, "tool", stargazers_count=None, forks_count=None, topics=None)

        repo = normalize(user_json(), [raw]).repositories[0]

        assert repo.id == 7
        assert repo.stars == 0
        assert repo.forks == 0
        assert repo.topics == ()
        assert repo.language == "Python"

    def test_private_repositories_are_excluded(self):
        raws = [repo_json(1, "public"), repo_json(2, "hidden", private=True)]

        portfolio = normalize(user_json(), raws)

        assert [r.name for r in portfolio.repositories] == ["public"]
        assert portfolio.statistics.total_repos == 1

    def test_upstream_order_is_preserved(self):
        raws = [repo_json(i, f"r{i}") for i in (3, 1, 2)]

        portfolio = normalize(user_json(), raws)

        assert [r.id for r in portfolio.repositories] == [3, 1, 2]

    def test_user_without_login_is_invalid(self):
        with pytest.raises(ValidationError, match="user payload"):
            normalize({"name": "No Login"}, [])

    def test_repos_not_a_list_is_invalid(self):
        with pytest.raises(ValidationError, match="repository payload"):
            normalize(user_json(), {"message": "Not Found"})

    def test_repo_missing_required_field_is_invalid(self):
        with pytest.raises(ValidationError):
            normalize(user_json(), [{"id": 1, "name": "x"}])


class TestStatistics:
    def test_totals_and_language_counts(self):
        repos = [
            make_repo(1, "a", language="Python", stars=5, forks=1),
            make_repo(2, "b", language="Python", stars=2, forks=0),
            make_repo(3, "c", language="Go", stars=1, forks=3),
            make_repo(4, "d", language=None, stars=0, forks=0),
        ]

        stats = compute_statistics(repos)

        assert stats.total_repos == 4
        assert stats.total_stars == 8
        assert stats.total_forks == 4
        assert stats.languages == {"Python": 2, "Go": 1}

    def test_language_counts_never_exceed_total(self):
        repos = [make_repo(i, f"r{i}", language="Rust" if i % 2 else None) for i in range(7)]

        stats = compute_statistics(repos)

        assert sum(stats.languages.values()) <= stats.total_repos

    def test_empty_collection(self):
        stats = compute_statistics([])

        assert stats.total_repos == 0
        assert stats.total_stars == 0
        assert stats.languages == {}

    def test_build_portfolio_recomputes_from_visible_repositories(self):
        repos = [
            make_repo(1, "a", stars=5),
            make_repo(2, "b", stars=50, private=True),
        ]

        portfolio = build_portfolio(make_profile(), repos)

        assert portfolio.statistics.total_stars == 5


class TestLanguageOptions:
    def test_most_used_first_then_name(self):
        stats = compute_statistics(
            [
                make_repo(1, "a", language="Go"),
                make_repo(2, "b", language="Python"),
                make_repo(3, "c", language="Python"),
                make_repo(4, "d", language="C"),
            ]
        )

        assert language_options(stats) == [("Python", 2), ("C", 1), ("Go", 1)]
