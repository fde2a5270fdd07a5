#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/engine/pairing.py
"""Line pairing engine.

Within a hunk, deletions are paired with similar insertions so that an
edited line is shown once with inline highlighting instead of as an
unrelated removal followed by an addition.

For every deletion, all insertions of the hunk are scored and the one with
the lowest change ratio that passes the similarity gate and lies within
``max_diff_distance`` lines wins; ties go to the earliest insertion. The
search is O(deletions x insertions) per hunk, which is acceptable for the
tens of lines a hunk usually holds. Callers should bound hunk size before
parsing pathological input.

Pairs whose insertions would come out of deletion order are dropped, as is
any pairing that would jump over a context line or a deletion left
unpaired, so unrelated edits never get chained together. Lines are then
emitted in their original order and each pair is emitted once, merged, at
its insertion's position. Both the old-side and the new-side line order
survive.
"""

from __future__ import annotations

import logging
from typing import Sequence

from diffview.engine.segments import build_inline_segments
from diffview.engine.similarity import change_ratio, is_similar
from diffview.models import Line, Segment
from diffview.options import DiffOptions
from diffview.parsers.unified import Change

logger = logging.getLogger(__name__)

UNPAIRED = -1


def change_to_line(change: Change) -> Line:
    """Convert a single change to a display line with one normal segment."""
    return Line(
        type=change.type,
        segments=(Segment(change.content, "normal"),),
        old_line_number=change.old_line_number,
        new_line_number=change.new_line_number,
    )


def modified_line(deleted: Change, inserted: Change, options: DiffOptions) -> Line:
    """Build the composite line for a paired deletion and insertion.

    Lines that only differ in trailing whitespace are shown as a single
    unchanged segment holding the new text.
    """
    if deleted.content.rstrip() == inserted.content.rstrip():
        segments: tuple[Segment, ...] = (Segment(inserted.content, "normal"),)
    else:
        segments = tuple(
            build_inline_segments(deleted.content, inserted.content, options.inline_max_char_edits)
        )
    return Line(
        type="normal",
        segments=segments,
        old_line_number=deleted.old_line_number,
        new_line_number=inserted.new_line_number,
    )


def _line_distance(deleted: Change, inserted: Change) -> int:
    return abs((deleted.old_line_number or 0) - (inserted.new_line_number or 0))


def pair_adjacent(changes: Sequence[Change], options: DiffOptions) -> list[Line]:
    """Pair each deletion only with an insertion immediately following it.

    Parameters
    ----------
    changes : sequence of Change
        Changes of one hunk
    options : DiffOptions
        Pairing configuration

    Returns
    -------
    list of Line
        Display lines in original order

    """
    lines: list[Line] = []
    i = 0
    while i < len(changes):
        current = changes[i]
        following = changes[i + 1] if i + 1 < len(changes) else None
        if (
            current.type == "delete"
            and following is not None
            and following.type == "insert"
            and is_similar(current.content, following.content, options.similarity_threshold)
        ):
            lines.append(modified_line(current, following, options))
            i += 2
            continue
        lines.append(change_to_line(current))
        i += 1
    return lines


def find_best_matches(changes: Sequence[Change], options: DiffOptions) -> dict[int, int]:
    """Find the best insertion for every deletion of a hunk.

    Each deletion independently picks, among all insertions within
    ``max_diff_distance`` that pass the similarity gate, the one with the
    lowest change ratio. An insertion claimed by an earlier deletion is no
    longer available.

    Parameters
    ----------
    changes : sequence of Change
        Changes of one hunk
    options : DiffOptions
        Pairing configuration

    Returns
    -------
    dict
        Mapping of deletion index to insertion index

    """
    insert_indexes = [i for i, c in enumerate(changes) if c.type == "insert"]
    delete_indexes = [i for i, c in enumerate(changes) if c.type == "delete"]

    pairs: dict[int, int] = {}
    claimed: set[int] = set()
    for di in delete_indexes:
        deleted = changes[di]
        best_index = UNPAIRED
        best_ratio = float("inf")
        for ai in insert_indexes:
            if ai in claimed:
                continue
            inserted = changes[ai]
            if _line_distance(deleted, inserted) > options.max_diff_distance:
                continue
            if not is_similar(deleted.content, inserted.content, options.similarity_threshold):
                continue
            ratio = change_ratio(deleted.content, inserted.content)
            if ratio < best_ratio:
                best_index, best_ratio = ai, ratio
        if best_index != UNPAIRED:
            pairs[di] = best_index
            claimed.add(best_index)
    return pairs


def drop_crossing_pairs(pairs: dict[int, int]) -> dict[int, int]:
    """Keep only pairs whose insertions come in the same order as their deletions.

    Pairs are visited in deletion order; a pair whose insertion precedes the
    insertion of an already kept pair is dropped.
    """
    kept: dict[int, int] = {}
    last_insert = UNPAIRED
    for di in sorted(pairs):
        ai = pairs[di]
        if ai > last_insert:
            kept[di] = ai
            last_insert = ai
        else:
            logger.debug(f"Dropping pairing of change {di} with {ai}: crosses an earlier pairing")
    return kept


def drop_blocked_pairs(changes: Sequence[Change], pairs: dict[int, int]) -> dict[int, int]:
    """Drop pairs that would jump over a context line or an unpaired deletion.

    Either would end up on the wrong side of the merged line. Dropping a
    pair leaves its deletion unpaired, which may block further pairs, so the
    check repeats until every remaining pair is clear.

    Parameters
    ----------
    changes : sequence of Change
        Changes of one hunk
    pairs : dict
        Mapping of deletion index to insertion index

    Returns
    -------
    dict
        The pairs that survive

    """
    pairs = dict(pairs)
    while True:
        # Prefix counts of lines a pair may not span
        blocking_before = [0] * (len(changes) + 1)
        for i, change in enumerate(changes):
            blocking = change.type == "normal" or (change.type == "delete" and i not in pairs)
            blocking_before[i + 1] = blocking_before[i] + (1 if blocking else 0)

        blocked = [
            di for di, ai in pairs.items() if blocking_before[max(di, ai)] - blocking_before[min(di, ai) + 1] > 0
        ]
        if not blocked:
            return pairs
        for di in blocked:
            logger.debug(f"Dropping pairing of change {di} with {pairs[di]}: blocked by an intervening line")
            del pairs[di]


def pair_within_distance(changes: Sequence[Change], options: DiffOptions) -> list[Line]:
    """Pair deletions with their best matching insertions anywhere in range.

    Parameters
    ----------
    changes : sequence of Change
        Changes of one hunk
    options : DiffOptions
        Pairing configuration

    Returns
    -------
    list of Line
        Display lines in original order

    """
    pairs = drop_blocked_pairs(changes, drop_crossing_pairs(find_best_matches(changes, options)))
    partner_of_insert = {ai: di for di, ai in pairs.items()}

    lines: list[Line] = []
    for i, change in enumerate(changes):
        if i in pairs:
            # Emitted with its insertion
            continue
        if i in partner_of_insert:
            lines.append(modified_line(changes[partner_of_insert[i]], change, options))
            continue
        lines.append(change_to_line(change))
    return lines


def build_hunk_lines(changes: Sequence[Change], options: DiffOptions | None = None) -> list[Line]:
    """Turn the changes of one hunk into display lines.

    Parameters
    ----------
    changes : sequence of Change
        Context, deletion and insertion changes of one hunk
    options : DiffOptions, optional
        Pairing configuration. Defaults to ``DiffOptions()``.

    Returns
    -------
    list of Line
        Display lines in original order

    """
    if options is None:
        options = DiffOptions()
    if not options.merge_modified_lines:
        return [change_to_line(c) for c in changes]
    if options.max_diff_distance == 1:
        return pair_adjacent(changes, options)
    return pair_within_distance(changes, options)
