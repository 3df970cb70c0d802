"""User-facing error messages per locale."""

from ghfolio.config import settings
from ghfolio.services.github.exceptions import (
    GitHubAPIError,
    NetworkError,
    NotFoundError,
    RateLimitError,
)

DEFAULT_LOCALE = "pt-BR"

MESSAGES: dict[str, dict[str, str]] = {
    "pt-BR": {
        "rate_limited": "Limite de requisições atingido. Aguarde um momento...",
        "not_found": "Usuário '{username}' não encontrado no GitHub.",
        "network": "Conexão muito lenta. Tentando novamente...",
        "generic": "Erro ao carregar dados do GitHub.",
    },
    "en": {
        "rate_limited": "GitHub rate limit reached. Please wait a moment...",
        "not_found": "User '{username}' was not found on GitHub.",
        "network": "Connection is too slow. Trying again...",
        "generic": "Failed to load data from GitHub.",
    },
}


def error_kind(error: GitHubAPIError) -> str:
    if isinstance(error, RateLimitError):
        return "rate_limited"
    if isinstance(error, NotFoundError):
        return "not_found"
    if isinstance(error, NetworkError):
        return "network"
    return "generic"


def user_message(error: GitHubAPIError, username: str, locale: str | None = None) -> str:
    """Localized message for a surfaced error. Unknown locales use pt-BR."""
    catalog = MESSAGES.get(locale or settings.locale, MESSAGES[DEFAULT_LOCALE])
    return catalog[error_kind(error)].format(username=username)
