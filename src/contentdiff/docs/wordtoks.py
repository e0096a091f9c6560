"""
Support for treating text as a sequence of word, punctuation, or whitespace
word tokens ("wordtoks").

Whitespace runs are kept verbatim as their own tokens (newlines included), so
`join_wordtoks(wordtokenize(text)) == text` for any text. This is what lets a
diff over wordtoks reconstruct both sides exactly.
"""

import re

# Every character is whitespace, a word character, or neither, so the three
# alternatives together cover the whole input.
_wordtok_pattern = re.compile(r"\s+|\w+|[^\w\s]")

_word_pattern = re.compile(r"^\w+$")

VIS_SEP = "⎪"


def wordtokenize(text: str) -> list[str]:
    """
    Split text into words, single punctuation characters, and whitespace runs.
    """
    return _wordtok_pattern.findall(text)


def join_wordtoks(wordtoks: list[str]) -> str:
    """Inverse of `wordtokenize()`."""
    return "".join(wordtoks)


def is_whitespace(wordtok: str) -> bool:
    return bool(wordtok) and wordtok.isspace()


def is_word(wordtok: str) -> bool:
    return bool(_word_pattern.match(wordtok))


def is_punct(wordtok: str) -> bool:
    return len(wordtok) == 1 and not is_word(wordtok) and not is_whitespace(wordtok)


def count_words(text: str) -> int:
    return sum(1 for tok in wordtokenize(text) if is_word(tok))


def visualize_wordtoks(wordtoks: list[str]) -> str:
    """
    Show token boundaries for debugging. Newlines are shown as `↵`.
    """
    return VIS_SEP + VIS_SEP.join(tok.replace("\n", "↵") for tok in wordtoks) + VIS_SEP
