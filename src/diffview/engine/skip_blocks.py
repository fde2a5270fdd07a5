#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/engine/skip_blocks.py
"""Insert skip markers for unchanged lines elided between hunks."""

from __future__ import annotations

from typing import Iterable

from diffview.models import Block, Hunk, SkipBlock


def insert_skip_blocks(hunks: Iterable[Hunk]) -> list[Block]:
    """Interleave skip blocks with hunks wherever old-side lines are elided.

    The old-side span of every hunk plus the counts of the skip blocks
    cover line 1 through the end of the last hunk exactly. Overlapping or
    out-of-order hunks never produce a negative count.

    Parameters
    ----------
    hunks : iterable of Hunk
        Hunks of one file in document order

    Returns
    -------
    list of Hunk or SkipBlock
        Hunks with skip blocks inserted before each gap

    """
    blocks: list[Block] = []
    last_end = 1
    for hunk in hunks:
        gap = hunk.old_start - last_end
        if gap > 0:
            blocks.append(SkipBlock(count=gap, context=hunk.context))
        last_end = max(last_end, hunk.old_end)
        blocks.append(hunk)
    return blocks
