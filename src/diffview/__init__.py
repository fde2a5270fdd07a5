"""diffview - Structured display models for unified diffs and word diffs.

diffview turns patch text into an ordered list of files, hunks and lines
that a renderer can display directly. Related deletions and insertions are
paired into single modified lines with word- or character-level inline
highlighting, and unchanged spans between hunks are collapsed into skip
markers that carry the hidden line count and the enclosing context label.

Key Features
------------
- Unified diff parsing, including git rename/copy/mode/binary headers
- Similarity-based pairing of deleted and inserted lines within a hunk
- Word-level inline segments refined to character level for small edits
- Skip blocks for elided context between hunks
- Parsing of ``git diff --word-diff=plain`` output into the same model
- Conversion between unified diff and word-diff text

Requirements
------------
- Python 3.10+

Examples
--------
Parse a patch and walk its lines:

    >>> from diffview import parse_diff
    >>> files = parse_diff(patch_text)
    >>> for block in files[0].blocks:
    ...     if block.kind == "skip":
    ...         print(f"... {block.count} unchanged lines ...")
    ...         continue
    ...     for line in block.lines:
    ...         print(line.type, line.text)

Tune the pairing heuristics:

    >>> from diffview import DiffOptions, parse_diff
    >>> files = parse_diff(patch_text, DiffOptions(similarity_threshold=0.3, max_diff_distance=6))

Convert to word-diff text:

    >>> from diffview import to_word_diff
    >>> print(to_word_diff(patch_text))

See Also
--------
diffview.models : Display model records
diffview.options : Configuration dataclasses

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from diffview.api import DiffStats, diff_stats, from_word_diff, parse_diff, parse_word_diff, to_word_diff
from diffview.exceptions import ConfigError, DiffViewError, HunkHeaderError, ParsingError, ValidationError
from diffview.models import File, Hunk, Line, Segment, SkipBlock
from diffview.options import DiffOptions, WordDiffOptions

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DiffOptions",
    "DiffStats",
    "DiffViewError",
    "File",
    "Hunk",
    "HunkHeaderError",
    "Line",
    "ParsingError",
    "Segment",
    "SkipBlock",
    "ValidationError",
    "WordDiffOptions",
    "__version__",
    "diff_stats",
    "from_word_diff",
    "parse_diff",
    "parse_word_diff",
    "to_word_diff",
]
