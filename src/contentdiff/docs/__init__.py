# flake8: noqa: F401
"""Content types, word tokens, and word-level diffs."""

from contentdiff.docs.content_types import ContentType, DEFAULT_CONTENT_TYPE
from contentdiff.docs.token_diffs import (
    diff_stats,
    diff_words,
    diff_wordtoks,
    DiffKind,
    DiffOp,
    DiffStats,
    DiffToken,
    new_text,
    old_text,
    OpType,
)
from contentdiff.docs.wordtoks import (
    count_words,
    is_punct,
    is_whitespace,
    is_word,
    join_wordtoks,
    visualize_wordtoks,
    wordtokenize,
)
