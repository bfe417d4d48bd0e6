"""Turn a raw snapshot into ordered, trimmed lines."""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .config import CONTENT_MARKER

HEADING_MARKER = "[###"
HEADING_PATTERN = re.compile(r"^\[###\s*(.+?)\s*\]\((https?://[^\s)]+)\)", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def strip_preamble(raw: str, marker: str = CONTENT_MARKER) -> str:
    """Return the text after ``marker``, or ``raw`` untouched when it is missing."""

    marker_index = raw.find(marker)
    if marker_index == -1:
        return raw
    return raw[marker_index + len(marker):].strip()


def to_lines(content: str) -> List[str]:
    return [line.strip() for line in content.split("\n") if line.strip()]


def normalise_whitespace(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def is_heading_marker(line: str) -> bool:
    return line.startswith(HEADING_MARKER)


def match_heading(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(title, url)`` for a heading-with-link line."""

    match = HEADING_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1), match.group(2)
