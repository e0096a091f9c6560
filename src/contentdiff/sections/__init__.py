# flake8: noqa: F401
"""Section-based parsing of generated plain-text content."""

from contentdiff.sections.content_section import ContentSection
from contentdiff.sections.header_patterns import (
    HEADER_PATTERNS,
    HeaderKind,
    HeaderMatch,
    HeaderPattern,
    is_header,
    match_header,
)
from contentdiff.sections.section_parser import ContentDoc, parse_content_sections

__all__ = [
    "ContentSection",
    "ContentDoc",
    "parse_content_sections",
    "HEADER_PATTERNS",
    "HeaderKind",
    "HeaderMatch",
    "HeaderPattern",
    "is_header",
    "match_header",
]
