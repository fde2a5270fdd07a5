"""Unit tests for inline segment building of modified lines."""

import pytest

from diffview.engine.segments import build_inline_segments, refine_edit_pairs, roughly_equal
from diffview.models import Segment


@pytest.mark.unit
class TestRoughlyEqual:
    """Tests for roughly_equal function."""

    def test_small_edit_returns_char_diff(self):
        """Test that a one-character edit yields character segments."""
        assert roughly_equal("colour", "color") == [
            Segment("colo", "normal"),
            Segment("u", "delete"),
            Segment("r", "normal"),
        ]

    def test_large_edit_returns_none(self):
        """Test that spans differing by more than the budget are rejected."""
        assert roughly_equal("value", "result") is None

    def test_budget_is_inclusive(self):
        """Test that exactly max_edits changed characters is accepted."""
        # "ab" -> "cd" changes 4 characters
        assert roughly_equal("ab", "cd", max_edits=4) is not None
        assert roughly_equal("ab", "cd", max_edits=3) is None


@pytest.mark.unit
class TestRefineEditPairs:
    """Tests for refine_edit_pairs function."""

    def test_refines_and_merges(self):
        """Test that refined pairs merge into the surrounding normal text."""
        segments = [
            Segment("the ", "normal"),
            Segment("colour", "delete"),
            Segment("color", "insert"),
            Segment(" red", "normal"),
        ]
        assert refine_edit_pairs(segments, 4) == [
            Segment("the colo", "normal"),
            Segment("u", "delete"),
            Segment("r red", "normal"),
        ]

    def test_zero_budget_keeps_word_level(self):
        """Test that a zero budget leaves differing word pairs untouched."""
        segments = [Segment("colour", "delete"), Segment("color", "insert")]
        assert refine_edit_pairs(segments, 0) == segments

    def test_lone_insert_untouched(self):
        """Test that an insert without a preceding delete is left alone."""
        segments = [Segment("a", "normal"), Segment("b", "insert")]
        assert refine_edit_pairs(segments, 4) == segments


@pytest.mark.unit
class TestBuildInlineSegments:
    """Tests for build_inline_segments function."""

    def test_word_level_change(self):
        """Test the word-level segments of a renamed variable."""
        assert build_inline_segments("const value = 1;", "const result = 1;") == [
            Segment("const ", "normal"),
            Segment("value", "delete"),
            Segment("result", "insert"),
            Segment(" = 1;", "normal"),
        ]

    def test_typo_inside_identifier(self):
        """Test that a typo fix highlights only the changed characters."""
        segments = build_inline_segments("calculateTotl(x)", "calculateTotal(x)")
        assert segments == [
            Segment("calculateTot", "normal"),
            Segment("a", "insert"),
            Segment("l(x)", "normal"),
        ]

    def test_sides_rebuild_inputs(self):
        """Test that both sides of the line can be rebuilt from segments."""
        old, new = "for (int i = 0; i < n; i++)", "for (size_t i = 0; i <= n; ++i)"
        segments = build_inline_segments(old, new)
        assert "".join(s.value for s in segments if s.type != "insert") == old
        assert "".join(s.value for s in segments if s.type != "delete") == new
