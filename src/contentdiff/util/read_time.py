"""
Reading time estimates for generated content.
"""

from prettyfmt import fmt_timedelta


DEFAULT_WORDS_PER_MINUTE = 225


def read_time_seconds(word_count: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> float:
    if word_count <= 0 or words_per_minute <= 0:
        return 0.0
    return word_count / words_per_minute * 60


def format_read_time(
    word_count: int,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    brief: bool = True,
    minimum_seconds: float = 0.0,
) -> str:
    """
    Reading time as a human-readable string, e.g. "2m" or "40s".

    Lessons and tricks are short, so by default any non-zero time is shown.
    Returns an empty string for no words or when below `minimum_seconds`.
    """
    seconds = read_time_seconds(word_count, words_per_minute)
    if seconds <= 0 or seconds < minimum_seconds:
        return ""
    return fmt_timedelta(seconds, brief=brief)


## Tests


def test_format_read_time():
    assert format_read_time(0) == ""
    assert format_read_time(-5) == ""
    assert format_read_time(100, 0) == ""
    assert format_read_time(225, 225) in ["1m", "60s"]
    assert format_read_time(112, 225) == "30s"
    assert format_read_time(112, 225, minimum_seconds=60) == ""
    assert format_read_time(900, 225, brief=False) in ["4 minutes", "240 seconds"]
