"""Tests for parse_content_sections and ContentDoc."""

from textwrap import dedent

import pytest

from contentdiff.docs.content_types import ContentType
from contentdiff.sections.header_patterns import HeaderKind, HeaderMatch
from contentdiff.sections.section_parser import (
    ADDITIONAL_LABEL,
    CONTENT_LABEL,
    ContentDoc,
    final_section_label,
    FULL_CONTENT_LABEL,
    INTRODUCTION_LABEL,
    parse_content_sections,
)


_lesson_text = dedent("""
    Welcome to the back tuck lesson.
    Take it slow the first few sessions.

    LEVEL: Advanced
    Ready for flips on a sprung floor.

    CREATED BY: Jane
    Head coach, ten years of tumbling.

    HOW IT WORKS:
    Start in a crouch.
    Drive the arms up and tuck the knees.

    Practice Goals:
    Land five in a row.

    Tips & Tricks:
    Spot the landing early.
""").strip()


class TestParsingBasics:
    """Test fallbacks and single sections."""

    def test_parse_empty_text(self):
        """Test that empty text yields one empty fallback section."""
        sections = parse_content_sections("")

        assert len(sections) == 1
        assert sections[0].label == FULL_CONTENT_LABEL
        assert sections[0].content == ""
        assert sections[0].id == "section-0"
        assert sections[0].order == 0
        assert sections[0].header_kind is None

    def test_parse_whitespace_only(self):
        sections = parse_content_sections("  \n\n\t \n")

        assert len(sections) == 1
        assert sections[0].label == FULL_CONTENT_LABEL
        assert sections[0].content == ""

    def test_parse_single_header(self):
        """Test the header line becomes the label and is removed from the body."""
        sections = parse_content_sections("Practice Goals:\nDo 10 reps\nStretch")

        assert len(sections) == 1
        section = sections[0]
        assert section.label == "Practice Goals:"
        assert section.content == "Do 10 reps\nStretch"
        assert section.header_kind == HeaderKind.practice_goals
        assert section.start_line == 1
        assert section.has_header
        assert section.copy_text == "Practice Goals:\nDo 10 reps\nStretch"

    def test_parse_no_headers(self):
        """Test text without headers is one section labeled Content."""
        text = "\n  Just a short note about footwork.\nKeep the weight forward.  \n"
        sections = parse_content_sections(text)

        assert len(sections) == 1
        assert sections[0].label == CONTENT_LABEL
        assert sections[0].content == text.strip()
        assert not sections[0].has_header

    def test_parse_headers_only(self):
        """Test headers with no bodies fall back to the full text."""
        text = "Key Reminders:\n\nHow it works\n"
        sections = parse_content_sections(text)

        assert len(sections) == 1
        assert sections[0].label == FULL_CONTENT_LABEL
        assert sections[0].content == text.strip()


class TestMultipleSections:
    """Test ordering, labels, and partitioning across several headers."""

    def test_section_order_and_labels(self):
        text = dedent("""
            LEVEL: Advanced
            Ready for flips.
            CREATED BY: Jane
            Coach at the academy.
            HOW IT WORKS:
            Start in a crouch.
            Push off hard.
        """).strip()
        sections = parse_content_sections(text)

        assert [s.label for s in sections] == ["LEVEL: Advanced", "CREATED BY: Jane", "HOW IT WORKS:"]
        assert [s.content for s in sections] == [
            "Ready for flips.",
            "Coach at the academy.",
            "Start in a crouch.\nPush off hard.",
        ]
        assert [s.header_kind for s in sections] == [
            HeaderKind.level,
            HeaderKind.created_by,
            HeaderKind.how_it_works,
        ]

    def test_ids_and_order_are_sequential(self):
        sections = parse_content_sections(_lesson_text)

        assert [s.order for s in sections] == list(range(len(sections)))
        assert [s.id for s in sections] == [f"section-{i}" for i in range(len(sections))]

    def test_introduction_before_first_header(self):
        sections = parse_content_sections(_lesson_text)

        assert sections[0].label == INTRODUCTION_LABEL
        assert sections[0].content == (
            "Welcome to the back tuck lesson.\nTake it slow the first few sessions."
        )
        assert sections[0].start_line == 0
        assert sections[0].header_kind is None
        assert sections[1].label == "LEVEL: Advanced"
        assert sections[-1].label == "Tips & Tricks:"
        assert sections[-1].content == "Spot the landing early."

    def test_empty_header_section_is_dropped(self):
        text = "Practice Goals:\n\n\nTips & Tricks:\nRelax the shoulders."
        sections = parse_content_sections(text)

        assert len(sections) == 1
        assert sections[0].label == "Tips & Tricks:"
        assert sections[0].order == 0

    def test_label_is_stripped_line_verbatim(self):
        sections = parse_content_sections("   key REMINDERS  \nBreathe out on the jump.")

        assert sections[0].label == "key REMINDERS"

    def test_header_like_lines_stay_content(self):
        """Test near-miss headers are kept as ordinary content."""
        text = dedent("""
            Practice Goals:
            Practice goals for today are simple.
            Tips for tricks: go slow.
            Level:
            Created by
        """).strip()
        sections = parse_content_sections(text)

        assert len(sections) == 1
        assert sections[0].content.splitlines() == [
            "Practice goals for today are simple.",
            "Tips for tricks: go slow.",
            "Level:",
            "Created by",
        ]

    def test_leading_byte_order_mark(self):
        """Test a BOM before the first header does not hide it."""
        sections = parse_content_sections("\ufeffPractice Goals:\nDo 10 reps\n\ufeff")

        assert len(sections) == 1
        assert sections[0].label == "Practice Goals:"
        assert sections[0].header_kind == HeaderKind.practice_goals
        assert sections[0].content == "Do 10 reps"

        assert parse_content_sections("\ufeff \n")[0].content == ""

    def test_crlf_line_endings(self):
        sections = parse_content_sections("Practice Goals:\r\nDo reps\r\n")

        assert sections[0].label == "Practice Goals:"
        assert sections[0].content == "Do reps"

    def test_sections_reconstruct_text(self):
        """Test label and content lines together cover every non-blank input line."""
        sections = parse_content_sections(_lesson_text)

        rebuilt = "\n".join(
            s.content if s.label == INTRODUCTION_LABEL else f"{s.label}\n{s.content}"
            for s in sections
        )
        original_lines = [line.strip() for line in _lesson_text.splitlines() if line.strip()]
        rebuilt_lines = [line.strip() for line in rebuilt.splitlines() if line.strip()]
        assert rebuilt_lines == original_lines

    def test_no_empty_content(self):
        for section in parse_content_sections(_lesson_text):
            assert section.content
            assert section.content == section.content.strip()

    def test_each_parse_is_fresh(self):
        first = parse_content_sections(_lesson_text)
        second = parse_content_sections(_lesson_text)

        assert first == second
        assert first is not second
        assert all(a is not b for a, b in zip(first, second, strict=True))


class TestFallbackLabels:
    """Test the label chosen for trailing content."""

    def test_final_label_uses_header(self):
        header = HeaderMatch(HeaderKind.key_reminders, "Key Reminders:")
        assert final_section_label(header, 0) == "Key Reminders:"
        assert final_section_label(header, 3) == "Key Reminders:"

    def test_final_label_without_header(self):
        assert final_section_label(None, 0) == CONTENT_LABEL

    def test_final_label_additional_branch(self):
        """Not reachable through parsing, since emitted sections imply a header was seen."""
        assert final_section_label(None, 2) == ADDITIONAL_LABEL


class TestContentTypes:
    def test_content_type_does_not_change_parsing(self):
        by_type = [parse_content_sections(_lesson_text, t) for t in ContentType]
        assert by_type[0] == by_type[1] == by_type[2]

    def test_content_type_string(self):
        sections = parse_content_sections("How it works:\nRoll out.", " Combo ")
        assert sections[0].content == "Roll out."

    def test_unknown_content_type(self):
        with pytest.raises(ValueError, match="Unknown content type"):
            parse_content_sections("text", "video")


class TestContentDoc:
    """Test the ContentDoc wrapper."""

    def test_find_section_by_label(self):
        doc = ContentDoc(_lesson_text, ContentType.trick)

        section = doc.find_section_by_label("practice   goals")
        assert section is not None
        assert section.content == "Land five in a row."
        assert doc.find_section_by_label("Introduction") is doc.sections[0]
        assert doc.find_section_by_label("Key Reminders") is None

    def test_find_sections_by_kind(self):
        doc = ContentDoc(_lesson_text)

        assert [s.label for s in doc.find_sections_by_kind(HeaderKind.tips_and_tricks)] == [
            "Tips & Tricks:"
        ]
        assert doc.find_sections_by_kind(HeaderKind.key_reminders) == []
        assert len(list(doc.iter_sections())) == len(doc.sections)

    def test_metadata(self):
        doc = ContentDoc("LEVEL: Advanced\nCREATED BY:  Jane Doe \nHOW IT WORKS:\nStart low.")

        assert doc.get_metadata() == {
            HeaderKind.level: "Advanced",
            HeaderKind.created_by: "Jane Doe",
        }
        # Level and Created by have no bodies, so only one section remains
        assert [s.label for s in doc.sections] == ["HOW IT WORKS:"]

    def test_stats(self):
        doc = ContentDoc(_lesson_text)
        stats = doc.get_stats()

        assert stats["total_sections"] == 6
        assert stats["labeled_sections"] == 5
        assert stats["words"] == doc.word_count()
        assert stats["words"] > 30
        assert isinstance(stats["read_time"], str)

    def test_stats_empty(self):
        stats = ContentDoc("").get_stats()

        assert stats["total_sections"] == 1
        assert stats["labeled_sections"] == 0
        assert stats["words"] == 0
        assert stats["read_time"] == ""

    def test_repr(self):
        doc = ContentDoc("Tips and tricks\nLook up.", "trick")
        assert repr(doc) == "ContentDoc(type=trick, sections=1, size=24 chars)"
