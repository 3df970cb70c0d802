"""
About section content from the user's profile README.

This is best-effort text segmentation, not a Markdown parser: headings
start sections, bullets and longer lines become items, rules become
markers, and images, links, HTML and code fences are skipped. Sections
about stats or contact details are dropped. When nothing usable remains
the fixed default content is returned.
"""

import re

from ghfolio.services.github.constants import (
    ABOUT_SKIP_SECTIONS,
    DEFAULT_ABOUT_GREETING,
    DEFAULT_ABOUT_INTRO,
    DEFAULT_ABOUT_SECTIONS,
)
from ghfolio.services.github.types import AboutContent, AboutSection

_SKIPPED_LINE = re.compile(r"^(!\[|http|<|```)")
_RULE = re.compile(r"^[-=]{3,}$")
_HEADING = re.compile(r"^#{1,3}\s+")
_BULLET = re.compile(r"^[-*]\s+")

# Plain lines this short are usually badges or stray fragments
MIN_PARAGRAPH_LENGTH = 10


def default_about() -> AboutContent:
    return AboutContent(
        greeting=DEFAULT_ABOUT_GREETING,
        intro=DEFAULT_ABOUT_INTRO,
        sections=[AboutSection(title, list(content)) for title, content in DEFAULT_ABOUT_SECTIONS],
    )


def _is_skipped_section(title: str) -> bool:
    lowered = title.lower()
    return any(skip in lowered for skip in ABOUT_SKIP_SECTIONS)


def parse_about(markdown: str | None) -> AboutContent:
    """Split README text into titled sections, or return the default content."""
    if not markdown:
        return default_about()

    content = AboutContent()
    current: AboutSection | None = None
    collecting = False

    for raw_line in markdown.split("\n"):
        line = raw_line.strip()

        if not line or _SKIPPED_LINE.match(line):
            continue

        if _RULE.match(line):
            if current is not None:
                current.content.append(AboutSection.RULE)
            continue

        if _HEADING.match(line):
            if current is not None:
                content.sections.append(current)

            title = _HEADING.sub("", line).strip()
            if _is_skipped_section(title):
                current = None
                collecting = False
                continue

            current = AboutSection(title)
            collecting = True
        elif line.startswith(("-", "*")) and current is not None:
            current.content.append(_BULLET.sub("", line))
        elif collecting and not line.startswith("#"):
            if current is not None and len(line) > MIN_PARAGRAPH_LENGTH:
                current.content.append(line)

    if current is not None:
        content.sections.append(current)

    if not content.greeting and not content.intro and not content.sections:
        return default_about()

    return content
