#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Converters between unified diff and word-diff text."""

from diffview.converters.word_diff import from_word_diff, serialize_segments, to_word_diff

__all__ = ["from_word_diff", "serialize_segments", "to_word_diff"]
