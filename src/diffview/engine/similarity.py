#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/engine/similarity.py
"""Word and character level text diffing with similarity scoring.

Both granularities are computed with :class:`difflib.SequenceMatcher` over
token lists. Words are runs of word characters; whitespace runs and single
punctuation characters are separate tokens so that an edit to an operator
or a space does not swallow the neighbouring identifiers.
"""

from __future__ import annotations

import difflib
from typing import Iterable, Sequence

from diffview.constants import WORD_TOKEN_RE, SegmentType
from diffview.models import Segment


def tokenize_words(text: str) -> list[str]:
    """Split text into word, whitespace and punctuation tokens.

    The tokens always concatenate back to ``text``.

    Parameters
    ----------
    text : str
        Text to tokenize

    Returns
    -------
    list of str
        Tokens in order

    """
    return WORD_TOKEN_RE.findall(text)


def merge_segments(segments: Iterable[Segment]) -> list[Segment]:
    """Merge consecutive segments of the same type and drop empty ones."""
    merged: list[Segment] = []
    for segment in segments:
        if not segment.value:
            continue
        if merged and merged[-1].type == segment.type:
            merged[-1] = Segment(merged[-1].value + segment.value, segment.type)
        else:
            merged.append(segment)
    return merged


def diff_tokens(old_tokens: Sequence[str], new_tokens: Sequence[str]) -> list[Segment]:
    """Diff two token sequences into merged segments.

    A replaced run is emitted as its deletion followed by its insertion.

    Parameters
    ----------
    old_tokens : sequence of str
        Tokens of the old text
    new_tokens : sequence of str
        Tokens of the new text

    Returns
    -------
    list of Segment
        Segments whose normal+delete values rebuild the old text and whose
        normal+insert values rebuild the new text

    """
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
    raw: list[Segment] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            raw.append(Segment("".join(old_tokens[i1:i2]), "normal"))
            continue
        if tag in ("delete", "replace"):
            raw.append(Segment("".join(old_tokens[i1:i2]), "delete"))
        if tag in ("insert", "replace"):
            raw.append(Segment("".join(new_tokens[j1:j2]), "insert"))
    return merge_segments(raw)


def diff_words(old: str, new: str) -> list[Segment]:
    """Compute a word-level diff of two strings."""
    return diff_tokens(tokenize_words(old), tokenize_words(new))


def diff_chars(old: str, new: str) -> list[Segment]:
    """Compute a character-level diff of two strings."""
    return diff_tokens(list(old), list(new))


def changed_length(segments: Iterable[Segment], types: tuple[SegmentType, ...] = ("insert", "delete")) -> int:
    """Total length of segment values whose type is in ``types``."""
    return sum(len(s.value) for s in segments if s.type in types)


def change_ratio(old: str, new: str) -> float:
    """Fraction of the combined length of two strings touched by a word diff.

    Parameters
    ----------
    old : str
        Old text
    new : str
        New text

    Returns
    -------
    float
        Value in ``[0, 1]``; 0 for identical strings and 1 for strings that
        share no token. Two empty strings score 1.0.

    Examples
    --------
        >>> change_ratio("a b", "a c")
        0.3333333333333333

    """
    total = len(old) + len(new)
    if total == 0:
        return 1.0
    return changed_length(diff_words(old, new)) / total


def is_similar(old: str, new: str, threshold: float) -> bool:
    """Decide whether two lines are close enough to pair as a modification.

    Lines that are equal once trailing whitespace is removed are always
    similar. Otherwise the change ratio must be strictly below
    ``threshold``, so a threshold of 0 only accepts the whitespace case and
    a threshold of 1 accepts any two lines sharing a token.

    Parameters
    ----------
    old : str
        Deleted line text
    new : str
        Inserted line text
    threshold : float
        Similarity threshold in ``[0, 1]``

    Returns
    -------
    bool
        True when the lines should be paired

    """
    if old.rstrip() == new.rstrip():
        return True
    return change_ratio(old, new) < threshold
