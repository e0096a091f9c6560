# flake8: noqa: F401
"""Section pairing and diff rendering for comparing content versions."""

from contentdiff.compare.diff_render import (
    render_diff_html,
    render_diff_text,
    render_section_html,
    render_sections_html,
    render_sections_text,
)
from contentdiff.compare.section_pairing import compare_contents, pair_sections, SectionPair
