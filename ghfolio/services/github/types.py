"""Data types for the normalized portfolio."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Profile:
    """Normalized GitHub user profile."""

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
    twitter_username: str | None = None
    company: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class Repository:
    """Normalized public repository."""

    id: int
    name: str
    description: str | None
    language: str | None
    stars: int
    forks: int
    html_url: str
    updated_at: str | None
    created_at: str | None = None
    homepage: str | None = None
    topics: tuple[str, ...] = ()
    private: bool = False


@dataclass(frozen=True)
class AggregateStatistics:
    """Totals derived from the visible repository collection."""

    total_repos: int
    total_stars: int
    total_forks: int
    languages: dict[str, int]  # language name -> repository count


@dataclass(frozen=True)
class Portfolio:
    """Profile, repositories and the statistics derived from them."""

    user: Profile
    repositories: list[Repository]
    statistics: AggregateStatistics


@dataclass
class AboutSection:
    """One heading-delimited block of the profile README."""

    title: str
    content: list[str] = field(default_factory=list)  # RULE marks a horizontal rule

    RULE = "<hr>"

    @property
    def items(self) -> list[str]:
        """Content without rule markers."""
        return [item for item in self.content if item != self.RULE and item]

    @property
    def is_list(self) -> bool:
        """True when the content reads like a list of short phrases."""
        items = self.items
        return len(items) > 1 and all(len(item) < 150 and "." not in item for item in items)


@dataclass
class AboutContent:
    """Biography content parsed from the profile README."""

    greeting: str = ""
    intro: str = ""
    sections: list[AboutSection] = field(default_factory=list)
