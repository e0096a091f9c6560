"""
Word-level diffs between two versions of a text.

Both texts are split into wordtoks, a minimal edit script is computed over the
token sequences from their longest common subsequence, and the script is
flattened into a list of `DiffToken`s that a renderer can mark up as
insertions and deletions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from typing_extensions import override

from contentdiff.docs.wordtoks import is_word, join_wordtoks, visualize_wordtoks, wordtokenize

log = logging.getLogger(__name__)


class OpType(Enum):
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


@dataclass
class DiffOp:
    """
    One step of an edit script: `left` tokens of the old text are replaced by
    `right` tokens of the new text. For EQUAL, `left == right`.
    """

    action: OpType
    left: list[str]
    right: list[str]

    @override
    def __str__(self) -> str:
        if self.action == OpType.EQUAL:
            return f"  {visualize_wordtoks(self.left)}"
        elif self.action == OpType.INSERT:
            return f"+ {visualize_wordtoks(self.right)}"
        elif self.action == OpType.DELETE:
            return f"- {visualize_wordtoks(self.left)}"
        else:
            return f"- {visualize_wordtoks(self.left)}\n+ {visualize_wordtoks(self.right)}"


class DiffKind(Enum):
    unchanged = "unchanged"
    added = "added"
    removed = "removed"


@dataclass(frozen=True)
class DiffToken:
    """A run of text that is unchanged, added in the new text, or removed from the old."""

    kind: DiffKind
    text: str


@dataclass(frozen=True)
class DiffStats:
    added_words: int
    removed_words: int
    unchanged_words: int

    @property
    def has_changes(self) -> bool:
        return self.added_words > 0 or self.removed_words > 0

    @override
    def __str__(self) -> str:
        return f"+{self.added_words} -{self.removed_words} ={self.unchanged_words} words"


def _lcs_table(a: list[str], b: list[str]) -> list[list[int]]:
    """`table[i][j]` is the LCS length of `a[i:]` and `b[j:]`."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(len(b) - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def _edit_steps(a: list[str], b: list[str]) -> list[tuple[OpType, str]]:
    """
    One EQUAL, DELETE, or INSERT step per token along a longest common
    subsequence of `a` and `b`. Deletions come before insertions on ties.
    """
    prefix = 0
    while prefix < len(a) and prefix < len(b) and a[prefix] == b[prefix]:
        prefix += 1
    suffix = 0
    while (
        suffix < len(a) - prefix
        and suffix < len(b) - prefix
        and a[len(a) - 1 - suffix] == b[len(b) - 1 - suffix]
    ):
        suffix += 1

    mid_a = a[prefix : len(a) - suffix]
    mid_b = b[prefix : len(b) - suffix]
    table = _lcs_table(mid_a, mid_b)

    steps = [(OpType.EQUAL, tok) for tok in a[:prefix]]
    i = j = 0
    while i < len(mid_a) or j < len(mid_b):
        if i < len(mid_a) and j < len(mid_b) and mid_a[i] == mid_b[j]:
            steps.append((OpType.EQUAL, mid_a[i]))
            i += 1
            j += 1
        elif j == len(mid_b) or (i < len(mid_a) and table[i + 1][j] >= table[i][j + 1]):
            steps.append((OpType.DELETE, mid_a[i]))
            i += 1
        else:
            steps.append((OpType.INSERT, mid_b[j]))
            j += 1
    steps.extend((OpType.EQUAL, tok) for tok in a[len(a) - suffix :])
    return steps


def diff_wordtoks(wordtoks1: list[str], wordtoks2: list[str]) -> list[DiffOp]:
    """
    Minimal edit script turning `wordtoks1` into `wordtoks2`: the EQUAL ops
    cover a longest common subsequence of the two token lists. Each run of
    changes between equal runs is one DELETE, INSERT, or REPLACE op.
    """
    ops: list[DiffOp] = []
    left: list[str] = []
    right: list[str] = []

    def flush_changes() -> None:
        if left and right:
            ops.append(DiffOp(OpType.REPLACE, list(left), list(right)))
        elif left:
            ops.append(DiffOp(OpType.DELETE, list(left), []))
        elif right:
            ops.append(DiffOp(OpType.INSERT, [], list(right)))
        left.clear()
        right.clear()

    for action, tok in _edit_steps(wordtoks1, wordtoks2):
        if action == OpType.DELETE:
            left.append(tok)
        elif action == OpType.INSERT:
            right.append(tok)
        else:
            flush_changes()
            if ops and ops[-1].action == OpType.EQUAL:
                ops[-1].left.append(tok)
                ops[-1].right.append(tok)
            else:
                ops.append(DiffOp(OpType.EQUAL, [tok], [tok]))
    flush_changes()

    return ops


def ops_to_tokens(ops: list[DiffOp]) -> list[DiffToken]:
    """
    Flatten an edit script into diff tokens. A replacement yields the removed
    text before the added text. Adjacent tokens of the same kind are merged.
    """
    tokens: list[DiffToken] = []

    def append(kind: DiffKind, wordtoks: list[str]) -> None:
        if not wordtoks:
            return
        text = join_wordtoks(wordtoks)
        if tokens and tokens[-1].kind == kind:
            tokens[-1] = DiffToken(kind, tokens[-1].text + text)
        else:
            tokens.append(DiffToken(kind, text))

    for op in ops:
        if op.action == OpType.EQUAL:
            append(DiffKind.unchanged, op.left)
        elif op.action == OpType.INSERT:
            append(DiffKind.added, op.right)
        elif op.action == OpType.DELETE:
            append(DiffKind.removed, op.left)
        else:
            append(DiffKind.removed, op.left)
            append(DiffKind.added, op.right)

    return tokens


def diff_words(old: str, new: str) -> list[DiffToken]:
    """
    Word-level diff of two strings. Whitespace is preserved exactly, so
    `old_text(tokens) == old` and `new_text(tokens) == new` always hold.
    Identical inputs give a single unchanged token, or none if both are empty.
    """
    if old == new:
        return [DiffToken(DiffKind.unchanged, old)] if old else []

    ops = diff_wordtoks(wordtokenize(old), wordtokenize(new))
    tokens = ops_to_tokens(ops)
    log.debug("Word diff: %s ops, %s tokens, %s", len(ops), len(tokens), diff_stats(tokens))
    return tokens


def old_text(tokens: list[DiffToken]) -> str:
    return "".join(t.text for t in tokens if t.kind != DiffKind.added)


def new_text(tokens: list[DiffToken]) -> str:
    return "".join(t.text for t in tokens if t.kind != DiffKind.removed)


def diff_stats(tokens: list[DiffToken]) -> DiffStats:
    counts = {kind: 0 for kind in DiffKind}
    for token in tokens:
        counts[token.kind] += sum(1 for tok in wordtokenize(token.text) if is_word(tok))
    return DiffStats(
        added_words=counts[DiffKind.added],
        removed_words=counts[DiffKind.removed],
        unchanged_words=counts[DiffKind.unchanged],
    )
