"""
Parsing of generated plain text into labeled sections.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from typing_extensions import override

from contentdiff.docs.content_types import ContentType, DEFAULT_CONTENT_TYPE
from contentdiff.docs.wordtoks import count_words
from contentdiff.sections.content_section import ContentSection
from contentdiff.sections.header_patterns import (
    HEADER_PATTERNS,
    HeaderKind,
    HeaderMatch,
    HeaderPattern,
    match_header,
    trim,
)
from contentdiff.util.read_time import format_read_time

log = logging.getLogger(__name__)


INTRODUCTION_LABEL = "Introduction"
"""Label for content that precedes the first header."""

CONTENT_LABEL = "Content"
"""Label for a document with no headers at all."""

ADDITIONAL_LABEL = "Additional"
"""Label for trailing content with no header after other sections were emitted."""

FULL_CONTENT_LABEL = "Full Content"
"""Label for the single fallback section when nothing else was emitted."""


def final_section_label(header: HeaderMatch | None, emitted: int) -> str:
    """
    Label for the section closed at the end of the text.

    Trailing content with no header can only occur when no header was seen at
    all, and then nothing has been emitted yet, so in practice this returns
    `CONTENT_LABEL`. The `ADDITIONAL_LABEL` branch is kept for parity with
    the established labeling.
    """
    if header is not None:
        return header.line
    return CONTENT_LABEL if emitted == 0 else ADDITIONAL_LABEL


def parse_content_sections(
    text: str,
    content_type: ContentType | str = DEFAULT_CONTENT_TYPE,
    patterns: tuple[HeaderPattern, ...] = HEADER_PATTERNS,
) -> list[ContentSection]:
    """
    Split text into sections at recognized header lines.

    Each header opens a section labeled with the header line as written; its
    content is every following line up to the next header, stripped. Content
    before the first header is labeled "Introduction". Sections whose content
    is empty are dropped. If nothing is emitted (empty text, or only headers),
    the result is a single "Full Content" section with the stripped text.

    Never raises for any text and always returns at least one section.
    The content type is accepted for the caller's convenience; all content
    types share the same headers.
    """
    content_type = ContentType.parse(content_type)
    lines = text.split("\n")
    sections: list[ContentSection] = []

    def close_section(label: str, header: HeaderMatch | None, start: int, end: int) -> None:
        content = trim("\n".join(lines[start:end]))
        if content:
            order = len(sections)
            sections.append(
                ContentSection(
                    id=f"section-{order}",
                    label=label,
                    content=content,
                    order=order,
                    start_line=start,
                    header_kind=header.kind if header else None,
                )
            )

    header: HeaderMatch | None = None
    body_start = 0

    for i, line in enumerate(lines):
        matched = match_header(line, patterns)
        if matched is None:
            continue

        close_section(header.line if header else INTRODUCTION_LABEL, header, body_start, i)

        header = matched
        body_start = i + 1

    close_section(final_section_label(header, len(sections)), header, body_start, len(lines))

    if not sections:
        sections.append(
            ContentSection(id="section-0", label=FULL_CONTENT_LABEL, content=trim(text), order=0)
        )

    log.debug(
        "Parsed %s content into %s sections: %s",
        content_type.value,
        len(sections),
        [s.label for s in sections],
    )
    return sections


class ContentDoc:
    """
    Generated content parsed into sections.

    Key properties:
    - `original_text`: The text as generated
    - `content_type`: The kind of content it was generated for
    - `sections`: Sections in document order

    Key methods:
    - `iter_sections()`: Iterate sections, optionally of one header kind
    - `find_section_by_label()`: Look up a section by its label
    - `get_metadata()`: Values of the `Level:` and `Created by:` headers
    - `get_stats()`: Section and word counts, with estimated read time
    """

    def __init__(
        self,
        text: str,
        content_type: ContentType | str = DEFAULT_CONTENT_TYPE,
        patterns: tuple[HeaderPattern, ...] = HEADER_PATTERNS,
    ):
        self.original_text = text
        self.content_type = ContentType.parse(content_type)
        self.patterns = patterns
        self.sections = parse_content_sections(text, self.content_type, patterns)

    def iter_sections(self, kind: HeaderKind | None = None) -> Iterator[ContentSection]:
        for section in self.sections:
            if kind is None or section.header_kind == kind:
                yield section

    def find_section_by_label(self, label: str) -> ContentSection | None:
        """
        First section with a matching label, ignoring case, surrounding
        whitespace, and a trailing colon.
        """

        def normalize(s: str) -> str:
            return " ".join(s.strip().rstrip(":").split()).casefold()

        target = normalize(label)
        for section in self.sections:
            if normalize(section.label) == target:
                return section
        return None

    def find_sections_by_kind(self, kind: HeaderKind) -> list[ContentSection]:
        return list(self.iter_sections(kind))

    def get_metadata(self) -> dict[HeaderKind, str]:
        """
        Values of value-carrying headers such as `Level: Advanced`, keyed by kind.
        The first occurrence wins. Headers count even when no body follows them.
        """
        metadata: dict[HeaderKind, str] = {}
        for line in self.original_text.split("\n"):
            matched = match_header(line, self.patterns)
            if matched and matched.value and matched.kind not in metadata:
                metadata[matched.kind] = matched.value
        return metadata

    def word_count(self) -> int:
        return sum(count_words(s.content) for s in self.sections)

    def get_stats(self) -> dict[str, Any]:
        """
        Get statistics about the parsed content.

        Returns dict with keys: total_sections, labeled_sections, words, read_time.
        """
        words = self.word_count()
        return {
            "total_sections": len(self.sections),
            "labeled_sections": sum(1 for s in self.sections if s.has_header),
            "words": words,
            "read_time": format_read_time(words),
        }

    @override
    def __repr__(self) -> str:
        return (
            f"ContentDoc(type={self.content_type.value}, "
            f"sections={len(self.sections)}, size={len(self.original_text)} chars)"
        )
