#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for diffview parsing.

Each parser has its own frozen Options dataclass. Instances are immutable;
use ``create_updated`` to derive a modified copy.
"""

from diffview.options.base import CloneFrozenMixin
from diffview.options.diff import DiffOptions, WordDiffOptions

__all__ = [
    "CloneFrozenMixin",
    "DiffOptions",
    "WordDiffOptions",
]
