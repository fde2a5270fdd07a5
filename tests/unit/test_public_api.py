"""Unit tests for the high-level diffview API."""

import pytest

import diffview
from diffview import (
    DiffOptions,
    DiffStats,
    HunkHeaderError,
    SkipBlock,
    ValidationError,
    WordDiffOptions,
    diff_stats,
    from_word_diff,
    parse_diff,
    parse_word_diff,
    to_word_diff,
)


@pytest.mark.unit
class TestParseDiff:
    """Tests for parse_diff."""

    def test_spec_style_insert(self):
        """Test a single hunk with one insertion between context lines."""
        files = parse_diff("@@ -1,2 +1,3 @@\n line1\n+line2\n line3")
        assert [line.type for line in files[0].hunks[0].lines] == ["normal", "insert", "normal"]

    def test_modify_patch_blocks(self, modify_patch):
        """Test pairing and skip blocks of a two-hunk patch."""
        file = parse_diff(modify_patch)[0]
        assert file.type == "modify"
        assert [b.kind for b in file.blocks] == ["hunk", "skip", "hunk"]
        assert file.blocks[1] == SkipBlock(count=6, context="function helper() {")

        first = file.blocks[0]
        assert [line.is_modified for line in first.lines] == [False, True, False]
        assert [s.value for s in first.lines[1].segments if s.type != "normal"] == ["value", "result"]

    def test_multi_file_types(self, multi_file_patch):
        """Test file types and paths across a multi-file patch."""
        files = parse_diff(multi_file_patch)
        assert [(f.type, f.path) for f in files] == [
            ("add", "src/bar.c"),
            ("delete", "src/old.c"),
            ("rename", "src/beta.c"),
        ]
        assert files[2].blocks == ()
        assert files[2].similarity == 100

    def test_keyword_overrides(self, modify_patch):
        """Test that keyword arguments override option fields."""
        file = parse_diff(modify_patch, merge_modified_lines=False)[0]
        assert [line.type for line in file.hunks[0].lines] == ["normal", "delete", "insert", "normal"]

    def test_overrides_applied_on_options(self, modify_patch):
        """Test that keyword arguments are applied on top of an options object."""
        options = DiffOptions(merge_modified_lines=False)
        file = parse_diff(modify_patch, options, merge_modified_lines=True)[0]
        assert file.hunks[0].lines[1].is_modified

    def test_invalid_override(self):
        """Test that an invalid override raises ValidationError."""
        with pytest.raises(ValidationError):
            parse_diff("", similarity_threshold=3)

    def test_invalid_header(self):
        """Test that a malformed hunk header propagates."""
        with pytest.raises(HunkHeaderError):
            parse_diff("@@ -1,x +1 @@\n")

    def test_deterministic(self, modify_patch):
        """Test that repeated calls produce equal results."""
        assert parse_diff(modify_patch) == parse_diff(modify_patch)

    def test_empty_input(self):
        """Test that empty input gives an empty list."""
        assert parse_diff("") == []


@pytest.mark.unit
class TestWordDiffApi:
    """Tests for the word-diff entry points."""

    def test_parse_word_diff(self, word_diff_text):
        """Test parsing word-diff text through the API."""
        files = parse_word_diff(word_diff_text)
        assert files[0].hunks[0].lines[1].is_modified

    def test_parse_word_diff_override(self):
        """Test a keyword override of the split guard."""
        files = parse_word_diff("@@ -1 +1 @@\n[-foo-]{+bar+}\n", max_change_ratio=0.5)
        assert [line.type for line in files[0].hunks[0].lines] == ["delete", "insert"]

    def test_options_object(self):
        """Test passing an options object."""
        files = parse_word_diff("@@ -1 +1 @@\n[-foo-]{+bar+}\n", WordDiffOptions(max_change_ratio=0.5))
        assert len(files[0].hunks[0].lines) == 2

    def test_conversions(self):
        """Test both conversion entry points."""
        patch = "@@ -1 +1 @@\n-value = compute(1)\n+result = compute(1)\n"
        word = to_word_diff(patch)
        assert word == "@@ -1,1 +1,1 @@\n[-value-]{+result+} = compute(1)\n"
        assert from_word_diff(word) == "@@ -1,1 +1,1 @@\n-value = compute(1)\n+result = compute(1)\n"

    def test_to_word_diff_option_override(self):
        """Test that a keyword override disables inline merging."""
        patch = "@@ -1 +1 @@\n-value = compute(1)\n+result = compute(1)\n"
        assert to_word_diff(patch, merge_modified_lines=False).splitlines()[1:] == [
            "[-value = compute(1)-]",
            "{+result = compute(1)+}",
        ]


@pytest.mark.unit
class TestDiffStats:
    """Tests for diff_stats."""

    def test_modify_patch(self, modify_patch):
        """Test line counts of a two-hunk patch."""
        stats = diff_stats(parse_diff(modify_patch))
        assert stats == DiffStats(files=1, added=1, deleted=0, modified=1, context=5, skipped=6)

    def test_unpaired(self, modify_patch):
        """Test counts when pairing is disabled."""
        stats = diff_stats(parse_diff(modify_patch, merge_modified_lines=False))
        assert (stats.added, stats.deleted, stats.modified) == (2, 1, 0)

    def test_to_dict(self):
        """Test the dictionary form of the statistics."""
        assert DiffStats(files=2).to_dict() == {
            "files": 2,
            "added": 0,
            "deleted": 0,
            "modified": 0,
            "context": 0,
            "skipped": 0,
        }


@pytest.mark.unit
def test_version():
    """Test that the package exposes a version string."""
    assert isinstance(diffview.__version__, str)
