from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GHFOLIO_",
        case_sensitive=False,
    )

    # GitHub account whose portfolio is served
    github_username: str = "lucasliet"
    github_api_base: str = "https://api.github.com"
    # Raw content host for the profile README (about section)
    github_raw_base: str = "https://raw.githubusercontent.com"
    # Optional token; unauthenticated requests get 60 calls/hour
    github_token: str = ""

    # Session cache
    cache_ttl_seconds: int = 15 * 60
    # When set, the session cache is a JSON file in this directory instead of memory
    cache_dir: str = ""
    readme_cache_ttl_seconds: int = 3600

    # Retrying fetcher
    fetch_max_attempts: int = 3
    fetch_timeout_seconds: float = 10.0
    # 403: wait rate_limit_backoff_seconds * attempt
    rate_limit_backoff_seconds: float = 5.0
    # Other failures: wait retry_backoff_seconds * 2**attempt
    retry_backoff_seconds: float = 1.0

    # Load loop: first retry after load_retry_delay_seconds, doubling, at most load_retry_limit times
    load_retry_delay_seconds: float = 3.0
    load_retry_limit: int = 5

    # Listing
    page_size: int = 12

    # User-facing messages ("pt-BR" or "en")
    locale: str = "pt-BR"

    # Application
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    @property
    def github_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    @property
    def file_cache_enabled(self) -> bool:
        """Check if the session cache should be persisted to disk."""
        return bool(self.cache_dir)


settings = Settings()
