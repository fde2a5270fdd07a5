"""Property-based tests for the pairing and skip-block invariants."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from diffview.engine.pairing import build_hunk_lines
from diffview.engine.segments import build_inline_segments
from diffview.engine.skip_blocks import insert_skip_blocks
from diffview.models import Hunk, SkipBlock
from diffview.options import DiffOptions
from diffview.parsers.unified import Change

words = st.sampled_from(["foo", "bar", "baz", "x", "=", "1", "2", "(", ")", "return"])
line_text = st.lists(words, max_size=5).map(" ".join)
hunk_body = st.lists(st.tuples(st.sampled_from([" ", "-", "+"]), line_text), max_size=14)
diff_options = st.builds(
    DiffOptions,
    merge_modified_lines=st.booleans(),
    max_diff_distance=st.integers(min_value=1, max_value=30),
    similarity_threshold=st.floats(min_value=0.0, max_value=1.0),
    inline_max_char_edits=st.integers(min_value=0, max_value=6),
)


def to_changes(body):
    """Number a hunk body the way the unified parser does."""
    changes = []
    old = new = 1
    for marker, text in body:
        if marker == " ":
            changes.append(Change("normal", text, old, new))
            old += 1
            new += 1
        elif marker == "-":
            changes.append(Change("delete", text, old_line_number=old))
            old += 1
        else:
            changes.append(Change("insert", text, new_line_number=new))
            new += 1
    return changes


@pytest.mark.unit
@pytest.mark.fuzzing
class TestPairingProperties:
    """Property-based tests for build_hunk_lines."""

    @given(hunk_body, diff_options)
    def test_sides_reconstruct_in_order(self, body, options):
        """Test that old and new text of the hunk are rebuilt exactly and in order."""
        lines = build_hunk_lines(to_changes(body), options)

        old_side = [line.old_text for line in lines if line.type != "insert"]
        new_side = [line.new_text for line in lines if line.type != "delete"]
        assert old_side == [text for marker, text in body if marker != "+"]
        assert new_side == [text for marker, text in body if marker != "-"]

        old_numbers = [line.old_line_number for line in lines if line.type != "insert"]
        new_numbers = [line.new_line_number for line in lines if line.type != "delete"]
        assert old_numbers == list(range(1, len(old_numbers) + 1))
        assert new_numbers == list(range(1, len(new_numbers) + 1))

    @given(hunk_body, diff_options)
    def test_line_types_and_numbers(self, body, options):
        """Test that every line carries the line numbers its type requires."""
        for line in build_hunk_lines(to_changes(body), options):
            if line.type == "insert":
                assert line.old_line_number is None and line.new_line_number is not None
            elif line.type == "delete":
                assert line.new_line_number is None and line.old_line_number is not None
            else:
                assert line.old_line_number is not None and line.new_line_number is not None


@pytest.mark.unit
@pytest.mark.fuzzing
class TestInlineSegmentProperties:
    """Property-based tests for build_inline_segments."""

    @given(st.text(max_size=40), st.text(max_size=40), st.integers(min_value=0, max_value=8))
    def test_segments_rebuild_both_sides(self, old, new, budget):
        """Test that normal+delete rebuild old and normal+insert rebuild new."""
        segments = build_inline_segments(old, new, budget)
        assert "".join(s.value for s in segments if s.type != "insert") == old
        assert "".join(s.value for s in segments if s.type != "delete") == new
        assert all(s.value for s in segments)
        assert all(a.type != b.type for a, b in zip(segments, segments[1:]))


@pytest.mark.unit
@pytest.mark.fuzzing
class TestSkipBlockProperties:
    """Property-based tests for insert_skip_blocks."""

    @given(st.lists(st.tuples(st.integers(0, 50), st.integers(1, 20)), min_size=1, max_size=10))
    def test_skips_and_hunks_span_the_file(self, spans):
        """Test that skips plus hunk lengths cover line 1 to the last hunk end."""
        hunks = []
        next_start = 1
        for gap, length in spans:
            start = next_start + gap
            hunks.append(Hunk(old_start=start, old_lines=length, new_start=start, new_lines=length))
            next_start = start + length

        blocks = insert_skip_blocks(hunks)
        skipped = sum(b.count for b in blocks if isinstance(b, SkipBlock))
        covered = sum(h.old_lines for h in hunks)
        assert skipped + covered == hunks[-1].old_end - 1

    @given(st.lists(st.tuples(st.integers(0, 100), st.integers(0, 20)), max_size=10))
    def test_counts_always_positive(self, spans):
        """Test that arbitrary, even overlapping, hunks only yield positive skips."""
        hunks = [Hunk(old_start=s, old_lines=n, new_start=s, new_lines=n) for s, n in spans]
        blocks = insert_skip_blocks(hunks)
        assert all(b.count > 0 for b in blocks if isinstance(b, SkipBlock))
        assert [b for b in blocks if isinstance(b, Hunk)] == hunks
