#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/engine/segments.py
"""Inline segment builder for modified lines.

A modified line is first diffed at word granularity. Every adjacent
delete/insert pair whose character-level diff stays within a small edit
budget is then replaced by that character-level diff, so that a typo fix
inside a long identifier highlights a single character rather than the
whole word.
"""

from __future__ import annotations

import logging
from typing import Iterable

from diffview.constants import DEFAULT_INLINE_MAX_CHAR_EDITS
from diffview.engine.similarity import changed_length, diff_chars, diff_words, merge_segments
from diffview.models import Segment

logger = logging.getLogger(__name__)


def roughly_equal(old: str, new: str, max_edits: int = DEFAULT_INLINE_MAX_CHAR_EDITS) -> list[Segment] | None:
    """Return the character-level diff of two spans if it is small enough.

    Parameters
    ----------
    old : str
        Deleted span
    new : str
        Inserted span
    max_edits : int, default 4
        Maximum number of inserted plus deleted characters

    Returns
    -------
    list of Segment or None
        Character-level segments, or None when the spans differ by more
        than ``max_edits`` characters

    """
    segments = diff_chars(old, new)
    if changed_length(segments) > max_edits:
        return None
    return segments


def refine_edit_pairs(segments: Iterable[Segment], max_char_edits: int) -> list[Segment]:
    """Replace small delete/insert pairs with their character-level diff.

    Parameters
    ----------
    segments : iterable of Segment
        Word-level segments
    max_char_edits : int
        Character edit budget passed to :func:`roughly_equal`

    Returns
    -------
    list of Segment
        Refined segments with consecutive same-type runs merged

    """
    items = list(segments)
    result: list[Segment] = []
    i = 0
    while i < len(items):
        current = items[i]
        following = items[i + 1] if i + 1 < len(items) else None
        if current.type == "delete" and following is not None and following.type == "insert":
            refined = roughly_equal(current.value, following.value, max_char_edits)
            if refined is not None:
                result.extend(refined)
                i += 2
                continue
        result.append(current)
        i += 1
    return merge_segments(result)


def build_inline_segments(
    old: str,
    new: str,
    max_char_edits: int = DEFAULT_INLINE_MAX_CHAR_EDITS,
) -> list[Segment]:
    """Compute the inline segments of a modified line.

    Parameters
    ----------
    old : str
        Old-side line text
    new : str
        New-side line text
    max_char_edits : int, default 4
        Character edit budget for downgrading a word-level pair to a
        character-level diff

    Returns
    -------
    list of Segment
        Segments such that normal+delete values rebuild ``old`` and
        normal+insert values rebuild ``new``

    Examples
    --------
        >>> build_inline_segments("const value = 1;", "const result = 1;")
        [Segment(value='const ', type='normal'), Segment(value='value', type='delete'),
         Segment(value='result', type='insert'), Segment(value=' = 1;', type='normal')]

    """
    return refine_edit_pairs(diff_words(old, new), max_char_edits)
