"""
ContentVersions: the original, previous, and current text of a piece of content
as it goes through amendment rounds.
"""

from __future__ import annotations

import logging
from enum import Enum
from threading import RLock

from typing_extensions import override

from contentdiff.compare.section_pairing import pair_sections, SectionPair
from contentdiff.docs.content_types import ContentType, DEFAULT_CONTENT_TYPE
from contentdiff.sections.content_section import ContentSection
from contentdiff.sections.section_parser import parse_content_sections

log = logging.getLogger(__name__)


class ViewMode(Enum):
    final = "final"
    comparison = "comparison"
    original = "original"


class ContentVersions:
    """
    Tracks the versions of one generated text.

    - `original`: the text as first generated, never changes
    - `current`: the latest version
    - `previous`: the version `current` replaced, or None before any change

    Each amendment or revert moves `current` to `previous`, so a comparison
    always shows the most recent round of changes. Parsed sections are cached
    per version. Every read or change of the versions holds the instance lock,
    so one instance can be shared by concurrent requests for the same session.
    """

    def __init__(self, original: str, content_type: ContentType | str = DEFAULT_CONTENT_TYPE):
        self.original = original
        self.current = original
        self.previous: str | None = None
        self.content_type = ContentType.parse(content_type)
        self._lock = RLock()
        self._sections: dict[str, list[ContentSection]] = {}

    @property
    def has_amendments(self) -> bool:
        with self._lock:
            return self.previous is not None

    @property
    def can_revert(self) -> bool:
        with self._lock:
            return self.current != self.original

    def amend(self, new_text: str) -> None:
        """Record the output of an amendment round as the current version."""
        with self._lock:
            self.previous = self.current
            self.current = new_text
            self._prune()
            log.info(
                "Amended %s content: %s -> %s chars",
                self.content_type.value,
                len(self.previous),
                len(new_text),
            )

    def revert_to_original(self) -> bool:
        """
        Make the original text current again. Returns False, changing
        nothing, if it already is.
        """
        with self._lock:
            if self.current == self.original:
                return False
            self.previous = self.current
            self.current = self.original
            self._prune()
            log.info("Reverted %s content to original", self.content_type.value)
            return True

    def view(self, mode: ViewMode | str = ViewMode.final) -> list[SectionPair]:
        """
        Sections to render for a view mode. Only the comparison view carries
        diffs, and it falls back to the final view until there is a previous
        version.
        """
        mode = ViewMode(mode)
        with self._lock:
            if mode == ViewMode.original:
                return pair_sections(self._sections_for(self.original))
            if mode == ViewMode.comparison and self.previous is not None:
                return pair_sections(
                    self._sections_for(self.current), self._sections_for(self.previous)
                )
            return pair_sections(self._sections_for(self.current))

    def _sections_for(self, text: str) -> list[ContentSection]:
        # Callers hold the lock. Returns a copy so the cached list stays intact.
        if text not in self._sections:
            self._sections[text] = parse_content_sections(text, self.content_type)
        return list(self._sections[text])

    def _prune(self) -> None:
        live = {self.original, self.current, self.previous}
        for text in list(self._sections):
            if text not in live:
                del self._sections[text]

    @override
    def __repr__(self) -> str:
        return (
            f"ContentVersions(type={self.content_type.value}, "
            f"amended={self.has_amendments}, current={len(self.current)} chars)"
        )
