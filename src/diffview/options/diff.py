#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/options/diff.py
"""Configuration options for unified diff and word-diff parsing.

This module defines the options consumed by :func:`diffview.parse_diff`
(line pairing and inline highlighting of unified diffs) and by
:func:`diffview.parse_word_diff` (pre-annotated ``--word-diff`` output).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from diffview.constants import (
    DEFAULT_INLINE_MAX_CHAR_EDITS,
    DEFAULT_MAX_DIFF_DISTANCE,
    DEFAULT_MERGE_MODIFIED_LINES,
    DEFAULT_SIMILARITY_THRESHOLD,
    DEFAULT_WORD_DIFF_INLINE_MAX_CHAR_EDITS,
    DEFAULT_WORD_DIFF_MAX_CHANGE_RATIO,
)
from diffview.options.base import CloneFrozenMixin, require_int, require_ratio


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Configuration options for parsing unified diffs into display lines.

    Parameters
    ----------
    merge_modified_lines : bool, default True
        Pair related deletions and insertions into single modified lines.
        When False every deletion and insertion stays a separate line.
    max_diff_distance : int, default 30
        Maximum distance, in line numbers, between a deletion and the
        insertion it may be paired with. A value of 1 only pairs a deletion
        with the insertion that immediately follows it. The distance compares
        the deletion's old-side number with the insertion's new-side number,
        so once earlier hunks have added or removed more lines than this
        value, even adjacent edits in later hunks no longer pair.
    similarity_threshold : float, default 0.45
        Two lines pair when their change ratio is strictly below this value.
        0 disables fuzzy pairing (only lines equal up to trailing whitespace
        pair) and 1 pairs any two lines that share at least one token.
    inline_max_char_edits : int, default 4
        Character edit budget under which a word-level delete/insert pair is
        refined into a character-level diff.

    Examples
    --------
    Only pair lines that are very close matches:
        >>> from diffview import parse_diff
        >>> from diffview.options import DiffOptions
        >>> files = parse_diff(patch, DiffOptions(similarity_threshold=0.2))

    """

    merge_modified_lines: bool = field(
        default=DEFAULT_MERGE_MODIFIED_LINES,
        metadata={
            "help": "Pair similar deleted and inserted lines into modified lines",
            "cli_name": "no-merge",
            "importance": "core",
        },
    )
    max_diff_distance: int = field(
        default=DEFAULT_MAX_DIFF_DISTANCE,
        metadata={
            "help": "Maximum line distance between a deletion and its paired insertion",
            "type": int,
            "importance": "core",
        },
    )
    similarity_threshold: float = field(
        default=DEFAULT_SIMILARITY_THRESHOLD,
        metadata={
            "help": "Pair lines whose change ratio is below this value (0-1)",
            "type": float,
            "importance": "core",
        },
    )
    inline_max_char_edits: int = field(
        default=DEFAULT_INLINE_MAX_CHAR_EDITS,
        metadata={
            "help": "Character edit budget for character-level inline highlighting",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        require_int("max_diff_distance", self.max_diff_distance, minimum=1)
        require_ratio("similarity_threshold", self.similarity_threshold)
        require_int("inline_max_char_edits", self.inline_max_char_edits, minimum=0)


@dataclass(frozen=True)
class WordDiffOptions(CloneFrozenMixin):
    """Configuration options for parsing ``git diff --word-diff`` output.

    Parameters
    ----------
    inline_max_char_edits : int, default 2
        Character edit budget under which a remaining delete/insert span
        pair is refined into a character-level diff.
    max_change_ratio : float or None, default None
        When set, a line mixing insertions and deletions whose change ratio
        exceeds this value is split back into a deleted line followed by an
        inserted line. None disables the guard.

    """

    inline_max_char_edits: int = field(
        default=DEFAULT_WORD_DIFF_INLINE_MAX_CHAR_EDITS,
        metadata={
            "help": "Character edit budget for character-level inline highlighting",
            "type": int,
            "importance": "advanced",
        },
    )
    max_change_ratio: float | None = field(
        default=DEFAULT_WORD_DIFF_MAX_CHANGE_RATIO,
        metadata={
            "help": "Split mixed lines whose change ratio exceeds this value (0-1)",
            "type": float,
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        require_int("inline_max_char_edits", self.inline_max_char_edits, minimum=0)
        require_ratio("max_change_ratio", self.max_change_ratio, allow_none=True)
