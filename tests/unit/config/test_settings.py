"""Unit tests for environment-driven settings."""

from ghfolio.config.settings import Settings


class TestDefaults:
    def test_cache_and_retry_defaults(self, monkeypatch):
        monkeypatch.delenv("GHFOLIO_CACHE_DIR", raising=False)
        s = Settings(_env_file=None)

        assert s.cache_ttl_seconds == 900
        assert s.fetch_max_attempts == 3
        assert s.fetch_timeout_seconds == 10.0
        assert s.rate_limit_backoff_seconds == 5.0
        assert s.page_size == 12
        assert s.locale == "pt-BR"
        assert s.file_cache_enabled is False

    def test_unauthenticated_without_token(self, monkeypatch):
        monkeypatch.delenv("GHFOLIO_GITHUB_TOKEN", raising=False)

        assert Settings(_env_file=None).github_authenticated is False


class TestEnvironment:
    def test_prefixed_variables_override(self, monkeypatch):
        monkeypatch.setenv("GHFOLIO_GITHUB_USERNAME", "octocat")
        monkeypatch.setenv("GHFOLIO_PAGE_SIZE", "24")
        monkeypatch.setenv("GHFOLIO_GITHUB_TOKEN", "ghp_x")
        monkeypatch.setenv("GHFOLIO_CACHE_DIR", "/tmp/ghfolio")

        s = Settings(_env_file=None)

        assert s.github_username == "octocat"
        assert s.page_size == 24
        assert s.github_authenticated is True
        assert s.file_cache_enabled is True

    def test_unprefixed_variables_are_ignored(self, monkeypatch):
        monkeypatch.delenv("GHFOLIO_PAGE_SIZE", raising=False)
        monkeypatch.setenv("PAGE_SIZE", "99")

        assert Settings(_env_file=None).page_size == 12
