"""
Kinds of academy content that can be generated and amended.
"""

from __future__ import annotations

from enum import Enum


class ContentType(Enum):
    """
    The kind of content a text was generated for. All kinds share one header
    vocabulary, so the tag is carried along but does not change parsing.
    """

    lesson = "lesson"
    trick = "trick"
    combo = "combo"

    @classmethod
    def parse(cls, value: ContentType | str) -> ContentType:
        """Accept a `ContentType` or its string value (case-insensitive)."""
        if isinstance(value, ContentType):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            expected = ", ".join(t.value for t in cls)
            raise ValueError(
                f"Unknown content type: {value!r} (expected one of: {expected})"
            ) from None


DEFAULT_CONTENT_TYPE = ContentType.lesson
