#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Line pairing, inline highlighting and skip-block insertion.

The engine turns the raw changes produced by :mod:`diffview.parsers.unified`
into display lines. Every function here is pure: it reads its arguments and
returns fresh objects.
"""

from diffview.engine.pairing import build_hunk_lines, change_to_line, find_best_matches, modified_line
from diffview.engine.segments import build_inline_segments, refine_edit_pairs, roughly_equal
from diffview.engine.similarity import change_ratio, diff_chars, diff_words, is_similar, tokenize_words
from diffview.engine.skip_blocks import insert_skip_blocks

__all__ = [
    "build_hunk_lines",
    "build_inline_segments",
    "change_ratio",
    "change_to_line",
    "diff_chars",
    "diff_words",
    "find_best_matches",
    "insert_skip_blocks",
    "is_similar",
    "modified_line",
    "refine_edit_pairs",
    "roughly_equal",
    "tokenize_words",
]
