#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers for unified diff and word-diff text."""

from diffview.parsers.headers import FileHeader, normalize_path
from diffview.parsers.unified import (
    Change,
    ParsedFile,
    ParsedHunk,
    UnifiedDiffParser,
    format_hunk_header,
    parse_hunk_header,
    parse_unified,
)
from diffview.parsers.word_diff import (
    WordDiffParser,
    build_segments,
    classify_line,
    merge_overlapping_edits,
    parse_word_diff_text,
)

__all__ = [
    "Change",
    "FileHeader",
    "ParsedFile",
    "ParsedHunk",
    "UnifiedDiffParser",
    "WordDiffParser",
    "build_segments",
    "classify_line",
    "format_hunk_header",
    "merge_overlapping_edits",
    "normalize_path",
    "parse_hunk_header",
    "parse_unified",
    "parse_word_diff_text",
]
