"""
A labeled section of generated content.
"""

from __future__ import annotations

from dataclasses import dataclass

from prettyfmt import abbrev_str
from typing_extensions import override

from contentdiff.sections.header_patterns import HeaderKind


@dataclass(frozen=True)
class ContentSection:
    """
    A contiguous span of text between two recognized headers, or before the
    first or after the last one.

    Sections are recomputed on every parse. The `id` is only unique within one
    parse result and is meant as a rendering key, not a stable identity.
    """

    id: str  # "section-<order>"
    label: str  # Header line as written, or a fallback label
    content: str  # Body with the header removed, stripped
    order: int  # Position in the parse result

    start_line: int = 0  # Line index of the first body line in the input
    header_kind: HeaderKind | None = None  # None for fallback labels

    @property
    def has_header(self) -> bool:
        """Whether the label came from a recognized header line."""
        return self.header_kind is not None

    @property
    def copy_text(self) -> str:
        """Text for copying a single section, header included."""
        return f"{self.label}\n{self.content}"

    @override
    def __repr__(self) -> str:
        return (
            f"ContentSection(id={self.id!r}, label={self.label!r}, "
            f"content={abbrev_str(self.content, 40)!r})"
        )
