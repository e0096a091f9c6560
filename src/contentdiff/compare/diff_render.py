"""
Rendering of diff tokens and paired sections as HTML or marked-up plain text.

Added text is wrapped as an insertion and removed text as a struck-through
deletion. Tokens are emitted in order, so the output reads as the old and new
text interleaved exactly as the edit script has them.
"""

from __future__ import annotations

from collections.abc import Callable
from html import escape

from contentdiff.compare.section_pairing import SectionPair
from contentdiff.docs.token_diffs import DiffKind, DiffToken

ADDED_CLASS = "diff-added"
REMOVED_CLASS = "diff-removed"
SECTION_CLASS = "section"
LABEL_CLASS = "section-label"
BODY_CLASS = "section-body"


def tag_wrapper(tag: str, class_name: str | None = None) -> Callable[[str], str]:
    """Return a function that wraps escaped text in the given tag."""

    def wrapper(text: str) -> str:
        attrs = f' class="{class_name}"' if class_name else ""
        return f"<{tag}{attrs}>{text}</{tag}>"

    return wrapper


ins_added = tag_wrapper("ins", ADDED_CLASS)
del_removed = tag_wrapper("del", REMOVED_CLASS)


def render_diff_html(tokens: list[DiffToken]) -> str:
    parts: list[str] = []
    for token in tokens:
        text = escape(token.text)
        if token.kind == DiffKind.added:
            parts.append(ins_added(text))
        elif token.kind == DiffKind.removed:
            parts.append(del_removed(text))
        else:
            parts.append(text)
    return "".join(parts)


def render_diff_text(tokens: list[DiffToken]) -> str:
    """Plain-text rendering with `{+added+}` and `[-removed-]` markers."""
    parts: list[str] = []
    for token in tokens:
        if token.kind == DiffKind.added:
            parts.append(f"{{+{token.text}+}}")
        elif token.kind == DiffKind.removed:
            parts.append(f"[-{token.text}-]")
        else:
            parts.append(token.text)
    return "".join(parts)


def render_section_html(pair: SectionPair) -> str:
    """
    One section as a `div` with its label and body. The body shows the diff
    when the pair has one and the plain content otherwise.
    """
    label = tag_wrapper("div", LABEL_CLASS)(escape(pair.current.label))
    if pair.tokens is not None:
        body_text = render_diff_html(pair.tokens)
    else:
        body_text = escape(pair.current.content)
    body = tag_wrapper("div", BODY_CLASS)(body_text)
    return f'<div class="{SECTION_CLASS}" id="{escape(pair.current.id)}">{label}{body}</div>'


def render_sections_html(pairs: list[SectionPair]) -> str:
    return "\n".join(render_section_html(pair) for pair in pairs)


def render_sections_text(pairs: list[SectionPair]) -> str:
    """Sections as `label` then body, separated by blank lines."""
    blocks: list[str] = []
    for pair in pairs:
        body = render_diff_text(pair.tokens) if pair.tokens is not None else pair.current.content
        blocks.append(f"{pair.current.label}\n{body}")
    return "\n\n".join(blocks)
