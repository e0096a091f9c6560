"""
Pairing of sections across two versions of the same content, with a word diff
for each pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from contentdiff.docs.content_types import ContentType, DEFAULT_CONTENT_TYPE
from contentdiff.docs.token_diffs import diff_words, DiffKind, DiffToken
from contentdiff.sections.content_section import ContentSection
from contentdiff.sections.section_parser import parse_content_sections

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionPair:
    """
    A current section and the previous section at the same position, if any.
    `tokens` is the word diff from the previous content to the current content,
    or None when there is no previous section to compare with.
    """

    index: int
    current: ContentSection
    previous: ContentSection | None = None
    tokens: list[DiffToken] | None = None

    @property
    def has_diff(self) -> bool:
        return self.tokens is not None

    @property
    def has_changes(self) -> bool:
        return self.tokens is not None and any(t.kind != DiffKind.unchanged for t in self.tokens)


def pair_sections(
    current: list[ContentSection], previous: list[ContentSection] | None = None
) -> list[SectionPair]:
    """
    Pair sections by position: `current[i]` with `previous[i]`.

    Pairing does not look at labels. If a version adds or drops a section, the
    following sections are compared against whatever sits at the same index.
    Current sections past the end of `previous` get no diff, and previous
    sections past the end of `current` are not represented.
    """
    previous = previous or []
    pairs: list[SectionPair] = []

    for i, section in enumerate(current):
        if i < len(previous):
            prev = previous[i]
            pairs.append(SectionPair(i, section, prev, diff_words(prev.content, section.content)))
        else:
            pairs.append(SectionPair(i, section))

    if len(current) != len(previous) and previous:
        log.debug(
            "Section counts differ (current %s, previous %s); pairing by position",
            len(current),
            len(previous),
        )
    return pairs


def compare_contents(
    current_text: str,
    previous_text: str | None,
    content_type: ContentType | str = DEFAULT_CONTENT_TYPE,
) -> list[SectionPair]:
    """
    Parse both versions and pair their sections. With no previous text, every
    section is returned without a diff.
    """
    current = parse_content_sections(current_text, content_type)
    previous: list[ContentSection] = []
    if previous_text is not None:
        previous = parse_content_sections(previous_text, content_type)
    return pair_sections(current, previous)
