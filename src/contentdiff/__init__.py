# flake8: noqa: F401
"""
Contentdiff: Sectioning and word-level comparison of generated academy content.

Main components:
- parse_content_sections / ContentDoc: Plain text split into labeled sections
- diff_words: Whitespace-preserving word diff as unchanged/added/removed tokens
- pair_sections / compare_contents: Positional pairing of two versions' sections
- ContentVersions: Original, previous, and current text across amendments
"""

# Content types and word diffs
from contentdiff.docs.content_types import ContentType, DEFAULT_CONTENT_TYPE
from contentdiff.docs.token_diffs import (
    diff_stats,
    diff_words,
    DiffKind,
    DiffStats,
    DiffToken,
    new_text,
    old_text,
)
from contentdiff.docs.wordtoks import join_wordtoks, wordtokenize

# Comparison and rendering
from contentdiff.compare.diff_render import (
    render_diff_html,
    render_diff_text,
    render_sections_html,
    render_sections_text,
)
from contentdiff.compare.section_pairing import compare_contents, pair_sections, SectionPair

# Section parsing
from contentdiff.sections.content_section import ContentSection
from contentdiff.sections.header_patterns import HEADER_PATTERNS, HeaderKind, match_header
from contentdiff.sections.section_parser import ContentDoc, parse_content_sections

# Transcripts
from contentdiff.transcripts.transcript_parser import parse_transcript

# Version tracking
from contentdiff.versions.content_versions import ContentVersions, ViewMode

__all__ = [
    # Content types and word diffs
    "ContentType",
    "DEFAULT_CONTENT_TYPE",
    "DiffKind",
    "DiffToken",
    "DiffStats",
    "diff_words",
    "diff_stats",
    "old_text",
    "new_text",
    "wordtokenize",
    "join_wordtoks",
    # Section parsing
    "ContentSection",
    "ContentDoc",
    "parse_content_sections",
    "HEADER_PATTERNS",
    "HeaderKind",
    "match_header",
    # Comparison and rendering
    "SectionPair",
    "pair_sections",
    "compare_contents",
    "render_diff_html",
    "render_diff_text",
    "render_sections_html",
    "render_sections_text",
    # Transcripts
    "parse_transcript",
    # Version tracking
    "ContentVersions",
    "ViewMode",
]
