"""Constants for GitHub portfolio data."""

import re

# Standard GitHub language colors (subset of most common)
# Used for the language breakdown and repository badges
GITHUB_LANGUAGE_COLORS: dict[str, str] = {
    "Python": "#3572A5",
    "JavaScript": "#f1e05a",
    "TypeScript": "#3178c6",
    "Java": "#b07219",
    "C++": "#f34b7d",
    "C": "#555555",
    "C#": "#178600",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "Ruby": "#701516",
    "PHP": "#4F5D95",
    "Swift": "#F05138",
    "Kotlin": "#A97BFF",
    "Scala": "#c22d40",
    "Dart": "#00B4AB",
    "Lua": "#000080",
    "Elixir": "#6e4a7e",
    "Haskell": "#5e5086",
    "Shell": "#89e051",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "SCSS": "#c6538c",
    "Vue": "#41b883",
    "Svelte": "#ff3e00",
    "Dockerfile": "#384d54",
    "Makefile": "#427819",
    "Nix": "#7e7eff",
    "SQL": "#e38c00",
    "R": "#198CE7",
    "Jupyter Notebook": "#DA5B0B",
    "Markdown": "#083fa1",
    "YAML": "#cb171e",
    "JSON": "#292929",
    "TOML": "#9c4221",
}

DEFAULT_LANGUAGE_COLOR = "#6b7280"

# Wildcard language filter value
ALL_LANGUAGES = "all"

# Profile fallbacks so consumers never branch on absence
DEFAULT_TITLE = "Desenvolvedor"
DEFAULT_BIO = "Desenvolvedor apaixonado por tecnologia"
DEFAULT_LOCATION = "Brasil"

# Checked in order; the first hit triggers title extraction
TITLE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(p, re.IGNORECASE)
    for p in (
        "desenvolvedor",
        "developer",
        "engineer",
        "engenheiro",
        "programador",
        "fullstack",
        "frontend",
        "backend",
    )
]

# Bio words kept when building a title
TITLE_WORD = re.compile(
    r"^(full|front|back|software|senior|junior|pleno|desenvolvedor|developer|engineer|engenheiro)$",
    re.IGNORECASE,
)

LINKEDIN_URL = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[a-zA-Z0-9-]+")

# README headings whose sections are dropped from the about content
ABOUT_SKIP_SECTIONS: tuple[str, ...] = (
    "estatísticas do github",
    "github stats",
    "stats",
    "contato",
    "contact",
    "redes sociais",
    "social media",
)

DEFAULT_ABOUT_GREETING = "Olá! 👋"
DEFAULT_ABOUT_INTRO = (
    "Bem-vindo ao meu perfil do GitHub! Aqui você encontrará os projetos que refletem "
    "minha paixão por tecnologia, inovação e desenvolvimento contínuo."
)
DEFAULT_ABOUT_SECTIONS: list[tuple[str, list[str]]] = [
    (
        "Sobre mim",
        [
            "Sou um entusiasta de tecnologia focado em aprender e compartilhar conhecimento. "
            "Meu objetivo é transformar ideias em aplicações funcionais e eficientes."
        ],
    ),
    (
        "O que você vai encontrar aqui",
        [
            "Repositórios com soluções inovadoras",
            "Projetos open-source que demonstram experiência técnica",
            "Exemplos práticos de boas práticas de programação",
            "Iniciativas colaborativas e experimentos criativos",
        ],
    ),
    (
        "Aprendizado contínuo",
        [
            "Estou sempre explorando novas tecnologias, frameworks e metodologias para me "
            "manter atualizado e entregar o melhor resultado possível."
        ],
    ),
]


def language_color(language: str | None) -> str:
    """Hex color for a language, grey when unknown or missing."""
    if not language:
        return DEFAULT_LANGUAGE_COLOR
    return GITHUB_LANGUAGE_COLORS.get(language, DEFAULT_LANGUAGE_COLOR)
