"""Small parsing and formatting helpers shared by the portfolio services."""

from datetime import UTC, datetime

from ghfolio.services.github.constants import LINKEDIN_URL

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a GitHub ISO-8601 timestamp. Naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_date(value: str | None) -> str:
    """Format an ISO timestamp as dd/mm/yyyy, or "" when missing or invalid."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    return parsed.strftime("%d/%m/%Y")


def extract_linkedin(bio: str | None) -> str | None:
    """First LinkedIn profile URL mentioned in a bio, with an https scheme."""
    if not bio:
        return None
    match = LINKEDIN_URL.search(bio)
    if not match:
        return None
    url = match.group(0)
    return url if url.startswith("http") else f"https://{url}"
