"""
Plain text from uploaded transcripts, used as source material for generation.
"""

import re

_sequence_number = re.compile(r"^\d+$")
_timestamp_line = re.compile(r"^\d{2}:\d{2}:\d{2}[,.]\d{3}\s*-->\s*\d{2}:\d{2}:\d{2}[,.]\d{3}$")
_whitespace = re.compile(r"\s+")


def parse_srt(content: str) -> str:
    """
    Text of an SRT subtitle file with sequence numbers, timestamps, and
    blank lines dropped, joined into one line with single spaces.
    """
    text_lines: list[str] = []
    for line in content.split("\n"):
        stripped = line.strip()
        if not stripped or _sequence_number.match(stripped) or _timestamp_line.match(stripped):
            continue
        text_lines.append(stripped)

    return _whitespace.sub(" ", " ".join(text_lines)).strip()


def parse_transcript(content: str, filename: str) -> str:
    """
    Transcript text from an uploaded file. `.srt` files are flattened with
    `parse_srt()`; anything else is taken as plain text.
    """
    if filename.lower().endswith(".srt"):
        return parse_srt(content)
    return content.strip()


## Tests

_test_srt = """1
00:00:01,000 --> 00:00:04,000
Welcome back to the academy.

2
00:00:04,500 --> 00:00:07.250
Today we work on the
  crossover   drill.

3
00:00:08,000 --> 00:00:09,000
10
"""


def test_parse_srt():
    assert parse_srt(_test_srt) == "Welcome back to the academy. Today we work on the crossover drill."
    assert parse_srt("") == ""


def test_parse_transcript():
    assert parse_transcript(_test_srt, "Session.SRT").startswith("Welcome back")
    assert parse_transcript("  Keep your knees bent.\n", "notes.txt") == "Keep your knees bent."
    assert parse_transcript("1\n00:00:01,000 --> 00:00:02,000\n", "raw.txt").startswith("1\n")
