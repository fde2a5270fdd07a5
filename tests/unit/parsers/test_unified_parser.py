"""Unit tests for the unified diff parser."""

import pytest

from diffview.exceptions import HunkHeaderError, ParsingError
from diffview.parsers.unified import (
    UnifiedDiffParser,
    format_hunk_header,
    parse_hunk_header,
    parse_unified,
    split_patch_lines,
)


@pytest.mark.unit
class TestParseHunkHeader:
    """Tests for parse_hunk_header function."""

    def test_full_header(self):
        """Test a header with both lengths and a label."""
        hunk_range = parse_hunk_header("@@ -10,3 +12,4 @@ def helper():")
        assert (hunk_range.old_start, hunk_range.old_lines) == (10, 3)
        assert (hunk_range.new_start, hunk_range.new_lines) == (12, 4)
        assert hunk_range.label == "def helper():"

    def test_omitted_lengths_default_to_one(self):
        """Test that a missing length means a single line."""
        hunk_range = parse_hunk_header("@@ -5 +7 @@")
        assert (hunk_range.old_lines, hunk_range.new_lines) == (1, 1)
        assert hunk_range.label == ""

    def test_invalid_header(self):
        """Test that a malformed header raises HunkHeaderError."""
        with pytest.raises(HunkHeaderError) as exc_info:
            parse_hunk_header("@@ -a,b +c,d @@", line_number=7)
        assert exc_info.value.line_number == 7
        assert "line 7" in str(exc_info.value)

    def test_hunk_header_error_is_parsing_error(self):
        """Test the exception hierarchy of HunkHeaderError."""
        with pytest.raises(ParsingError):
            parse_hunk_header("@@ nonsense")

    def test_format_hunk_header(self):
        """Test formatting with and without a label."""
        assert format_hunk_header(1, 3, 1, 4) == "@@ -1,3 +1,4 @@"
        assert format_hunk_header(8, 2, 9, 2, "class Foo:") == "@@ -8,2 +9,2 @@ class Foo:"


@pytest.mark.unit
class TestSplitPatchLines:
    """Tests for split_patch_lines function."""

    def test_crlf_normalized(self):
        """Test that CRLF line endings are treated like LF."""
        assert split_patch_lines("a\r\nb\r\n") == ["a", "b"]

    def test_final_newline_dropped(self):
        """Test that the trailing newline does not create an empty line."""
        assert split_patch_lines("a\n\n") == ["a", ""]

    def test_form_feed_kept(self):
        """Test that characters str.splitlines would split on stay in content."""
        assert split_patch_lines(" a\x0cb\n") == [" a\x0cb"]


@pytest.mark.unit
class TestUnifiedDiffParser:
    """Tests for UnifiedDiffParser."""

    def test_minimal_hunk(self):
        """Test a bare hunk without file headers."""
        files = parse_unified("@@ -1,2 +1,3 @@\n line1\n+line2\n line3")
        assert len(files) == 1
        changes = files[0].hunks[0].changes
        assert [c.type for c in changes] == ["normal", "insert", "normal"]
        assert [(c.old_line_number, c.new_line_number) for c in changes] == [(1, 1), (None, 2), (2, 3)]

    def test_git_patch(self, modify_patch):
        """Test a git patch with two hunks."""
        files = parse_unified(modify_patch)
        assert len(files) == 1
        header = files[0].header
        assert (header.old_path, header.new_path) == ("src/app.js", "src/app.js")
        assert (header.old_revision, header.new_revision) == ("4def792", "b63576c")
        assert header.old_mode == header.new_mode == "100644"

        first, second = files[0].hunks
        assert [c.type for c in first.changes] == ["normal", "delete", "insert", "normal"]
        assert second.context == "function helper() {"
        assert [c.type for c in second.changes] == ["normal", "insert", "normal", "normal"]
        assert second.changes[-1].content == ""
        assert (second.changes[-1].old_line_number, second.changes[-1].new_line_number) == (12, 13)

    def test_multiple_files(self, multi_file_patch):
        """Test added, deleted and renamed files in one patch."""
        files = parse_unified(multi_file_patch)
        assert [f.header.file_type for f in files] == ["add", "delete", "rename"]
        assert files[1].hunks[0].old_lines == 1
        assert files[2].hunks == []

    def test_no_newline_markers(self):
        """Test that missing trailing newlines are recorded per side."""
        patch = (
            "--- a/f.txt\n+++ b/f.txt\n@@ -1 +1 @@\n"
            "-old\n\\ No newline at end of file\n+new\n\\ No newline at end of file\n"
        )
        parsed = parse_unified(patch)[0]
        assert parsed.old_ending_newline is False
        assert parsed.new_ending_newline is False
        assert len(parsed.hunks[0].changes) == 2

    def test_no_newline_on_new_side_only(self):
        """Test a marker following an insertion only affects the new side."""
        patch = "@@ -1,2 +1,2 @@\n a\n-b\n+c\n\\ No newline at end of file\n"
        parsed = parse_unified(patch)[0]
        assert parsed.old_ending_newline is True
        assert parsed.new_ending_newline is False

    def test_empty_context_line(self):
        """Test that an empty line inside a hunk is a context line."""
        parsed = parse_unified("@@ -1,2 +1,2 @@\n\n-x\n+y\n")[0]
        assert [c.type for c in parsed.hunks[0].changes] == ["normal", "delete", "insert"]
        assert parsed.hunks[0].changes[0].content == ""

    def test_crlf_content(self):
        """Test that CRLF input does not leak carriage returns into content."""
        parsed = parse_unified("@@ -1 +1 @@\r\n-a b\r\n+a c\r\n")[0]
        assert [c.content for c in parsed.hunks[0].changes] == ["a b", "a c"]

    def test_plain_diff_with_timestamps(self):
        """Test diff -u output with timestamps after the paths."""
        patch = (
            "--- old.txt\t2024-01-01 10:00:00.000000000 +0000\n"
            "+++ new.txt\t2024-01-01 10:00:01.000000000 +0000\n"
            "@@ -1 +1 @@\n-a\n+b\n"
        )
        header = parse_unified(patch)[0].header
        assert (header.old_path, header.new_path) == ("old.txt", "new.txt")
        assert header.file_type == "modify"

    def test_consecutive_plain_files(self):
        """Test that a second ---/+++ pair after a hunk opens a new file."""
        patch = "--- a/one\n+++ b/one\n@@ -1 +1 @@\n-1\n+2\n--- a/two\n+++ b/two\n@@ -1 +1 @@\n-3\n+4\n"
        files = parse_unified(patch)
        assert [f.header.new_path for f in files] == ["one", "two"]

    def test_deleted_line_starting_with_dashes(self):
        """Test that a deleted line looking like a file header stays content."""
        patch = "@@ -1,2 +1,1 @@\n--- not a header\n keep\n"
        parsed = parse_unified(patch)
        assert len(parsed) == 1
        assert [c.content for c in parsed[0].hunks[0].changes] == ["-- not a header", "keep"]

    def test_hunk_ends_early(self):
        """Test that a short hunk ends at a line that is not hunk content."""
        patch = "@@ -1,3 +1,3 @@\n a\ndiff --git a/x b/x\n@@ -1 +1 @@\n-y\n+z\n"
        files = parse_unified(patch)
        assert len(files) == 2
        assert len(files[0].hunks[0].changes) == 1
        assert files[1].header.new_path == "x"

    def test_invalid_hunk_header_raises(self):
        """Test that a malformed hunk header is a hard failure."""
        with pytest.raises(HunkHeaderError) as exc_info:
            parse_unified("--- a/f\n+++ b/f\n@@ -x +1 @@\n")
        assert exc_info.value.line_number == 3

    def test_empty_input(self):
        """Test that empty input yields no files."""
        assert parse_unified("") == []

    def test_parser_is_reusable(self, modify_patch):
        """Test that one parser instance gives identical results on repeated calls."""
        parser = UnifiedDiffParser()
        assert parser.parse(modify_patch) == parser.parse(modify_patch)
