"""
Recognized section header lines.

Generated content is plain text with no Markdown, so headers are recognized by
the shape of a whole line. The patterns tolerate the drift a text generator
tends to produce: case, extra spaces, an optional trailing colon, singular or
plural, `&` or `and`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class HeaderKind(Enum):
    practice_goals = "practice_goals"
    tips_and_tricks = "tips_and_tricks"
    key_reminders = "key_reminders"
    how_it_works = "how_it_works"
    level = "level"
    created_by = "created_by"


@dataclass(frozen=True)
class HeaderPattern:
    kind: HeaderKind
    regex: re.Pattern[str]


@dataclass(frozen=True)
class HeaderMatch:
    """
    A line recognized as a header. `line` is the stripped line as written.
    `value` is the text after the colon for `level:` and `created by:` headers.
    """

    kind: HeaderKind
    line: str
    value: str | None = None


def _pattern(kind: HeaderKind, regex: str) -> HeaderPattern:
    return HeaderPattern(kind, re.compile(regex, re.IGNORECASE))


# Leading and trailing whitespace, plus the byte order mark `str.strip()` keeps.
_edge_space = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(text: str) -> str:
    return _edge_space.sub("", text)


# Checked in this order and the first match wins. The patterns are mutually
# exclusive, so the order only matters if new ones are added.
HEADER_PATTERNS: tuple[HeaderPattern, ...] = (
    _pattern(HeaderKind.practice_goals, r"^practice\s+goals:?\s*$"),
    _pattern(HeaderKind.tips_and_tricks, r"^tips?\s*(?:&|and)?\s*tricks?:?\s*$"),
    _pattern(HeaderKind.key_reminders, r"^key\s+reminders:?\s*$"),
    _pattern(HeaderKind.how_it_works, r"^how\s+it\s+works:?\s*$"),
    _pattern(HeaderKind.level, r"^level:\s*(.+)$"),
    _pattern(HeaderKind.created_by, r"^created\s+by:\s*(.+)$"),
)


def match_header(
    line: str, patterns: tuple[HeaderPattern, ...] = HEADER_PATTERNS
) -> HeaderMatch | None:
    """
    Test a line against the header patterns. Returns None for ordinary content.
    """
    stripped = trim(line)
    if not stripped:
        return None

    for pattern in patterns:
        match = pattern.regex.match(stripped)
        if match:
            value = match.group(1).strip() if match.groups() else None
            return HeaderMatch(pattern.kind, stripped, value)

    return None


def is_header(line: str, patterns: tuple[HeaderPattern, ...] = HEADER_PATTERNS) -> bool:
    return match_header(line, patterns) is not None
