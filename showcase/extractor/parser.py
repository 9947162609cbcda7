"""Fixed-line parsers for the project Markdown template.

The template is positional:

    line 1  Project name, or [Project name](https://redirect.example)
    line 3  **Project Description:** free text
    line 5  **Languages & Technologies:** Tag, Tag, Tag

Lines 2 and 4 are ignored. A line that is missing or does not match its
pattern yields the field's empty value; nothing here raises.
"""

from __future__ import annotations

import re

from showcase.vcs.models import ProjectMetadata

REDIRECT_LINE = 0
DESCRIPTION_LINE = 2
TAGS_LINE = 4

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")
_DESCRIPTION_RE = re.compile(r"\*\*Projects?\s*Descriptions?:\*\*\s*(.+)", re.IGNORECASE)
_TAGS_RE = re.compile(r"\*\*Languages?\s*&\s*Technolog(?:y|ies):\*\*\s*(.+)", re.IGNORECASE)


def split_lines(content: str) -> list[str]:
    return [line.rstrip("\r") for line in content.split("\n")]


def _line(lines: list[str], index: int) -> str | None:
    return lines[index] if len(lines) > index else None


def parse_redirect_url(lines: list[str]) -> str | None:
    """Return the link target if line 1 is a Markdown link."""
    line = _line(lines, REDIRECT_LINE)
    if line is None:
        return None
    match = _LINK_RE.search(line)
    if not match:
        return None
    return match.group(2).strip() or None


def parse_description(lines: list[str]) -> str:
    line = _line(lines, DESCRIPTION_LINE)
    if line is None:
        return ""
    match = _DESCRIPTION_RE.search(line)
    return match.group(1).strip() if match else ""


def parse_tags(lines: list[str]) -> list[str]:
    """Split the comma-separated tag line, keeping the original casing."""
    line = _line(lines, TAGS_LINE)
    if line is None:
        return []
    match = _TAGS_RE.search(line)
    if not match:
        return []
    return [tag.strip() for tag in match.group(1).split(",") if tag.strip()]


def parse_metadata(content: str) -> ProjectMetadata:
    lines = split_lines(content)
    return ProjectMetadata(
        tags=parse_tags(lines),
        description=parse_description(lines),
        redirect_url=parse_redirect_url(lines),
    )
