#!/usr/bin/env python3
# /// script
# requires-python = ">=3.11"
# dependencies = [
#     "contentdiff",
#     "rich",
# ]
# ///

"""
Show what changed between two versions of generated content, section by section.

Added words are shown in green, removed words in struck-through red. Sections
are paired by position, so a section with no counterpart in the previous
version is shown as-is.
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from contentdiff import ContentType, ContentVersions, diff_stats, DiffKind, ViewMode
from contentdiff.compare import SectionPair


def section_text(pair: SectionPair) -> Text:
    if pair.tokens is None:
        return Text(pair.current.content)

    text = Text()
    for token in pair.tokens:
        if token.kind == DiffKind.added:
            text.append(token.text, style="green")
        elif token.kind == DiffKind.removed:
            text.append(token.text, style="red strike")
        else:
            text.append(token.text)
    return text


def print_comparison(versions: ContentVersions, mode: ViewMode) -> None:
    console = Console()

    for pair in versions.view(mode):
        subtitle = str(diff_stats(pair.tokens)) if pair.tokens is not None else "new"
        console.print(
            Panel(
                section_text(pair),
                title=Text(pair.current.label, style="bold"),
                title_align="left",
                subtitle=subtitle if mode == ViewMode.comparison else None,
                subtitle_align="right",
            )
        )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("previous", type=Path, help="Previous version (plain text)")
    parser.add_argument("current", type=Path, help="Current version (plain text)")
    parser.add_argument(
        "--type",
        choices=[t.value for t in ContentType],
        default=ContentType.lesson.value,
        help="Content type (default: lesson)",
    )
    parser.add_argument(
        "--view",
        choices=[m.value for m in ViewMode],
        default=ViewMode.comparison.value,
        help="Which version to show (default: comparison)",
    )
    args = parser.parse_args()

    for path in (args.previous, args.current):
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(1)

    versions = ContentVersions(args.previous.read_text(), args.type)
    versions.amend(args.current.read_text())
    print_comparison(versions, ViewMode(args.view))


if __name__ == "__main__":
    main()
