"""Unit tests for the terminal and JSON diff renderers."""

import json

import pytest

from diffview import parse_diff
from diffview.models import File, Line, Segment, SkipBlock
from diffview.renderers import JsonDiffRenderer, TerminalDiffRenderer
from diffview.renderers.terminal import GREEN, GREEN_BG, RED, RED_BG, RESET


@pytest.mark.unit
class TestTerminalDiffRenderer:
    """Tests for TerminalDiffRenderer."""

    def test_plain_output(self, modify_patch):
        """Test uncolored output of a two-hunk patch."""
        lines = list(TerminalDiffRenderer(use_color=False).render(parse_diff(modify_patch)))
        assert lines[:3] == ["--- a/src/app.js", "+++ b/src/app.js", "@@ -1,3 +1,3 @@"]
        assert lines[3] == "    1     1   function run() {"
        assert lines[4] == "    2     2 ~   const [-value-]{+result+} = calculateSomething();"
        assert lines[6] == "⋯ 6 unchanged lines ⋯ function helper() {"
        assert "         11 +   // done" in lines

    def test_deleted_line_gutter(self):
        """Test that a deletion leaves the new-side gutter empty."""
        line = Line("delete", (Segment("gone"),), old_line_number=12)
        assert TerminalDiffRenderer(use_color=False).render_line(line) == "   12       - gone"

    def test_colored_lines(self):
        """Test ANSI colors for deletions, insertions and inline changes."""
        renderer = TerminalDiffRenderer(use_color=True)
        assert RED in renderer.render_line(Line("delete", (Segment("a"),), old_line_number=1))
        assert GREEN in renderer.render_line(Line("insert", (Segment("b"),), new_line_number=1))
        modified = Line("normal", (Segment("x"), Segment("1", "delete"), Segment("2", "insert")), 1, 1)
        rendered = renderer.render_line(modified)
        assert f"{RED_BG}1{RESET}" in rendered
        assert f"{GREEN_BG}2{RESET}" in rendered

    def test_skip_singular(self):
        """Test the wording of a one-line skip block."""
        assert TerminalDiffRenderer(use_color=False).render_skip(SkipBlock(1)) == "⋯ 1 unchanged line ⋯"

    def test_file_notes(self, multi_file_patch):
        """Test the type notes of added and renamed files."""
        lines = list(TerminalDiffRenderer(use_color=False).render(parse_diff(multi_file_patch)))
        assert lines[:3] == ["--- /dev/null", "+++ b/src/bar.c", "(add)"]
        assert "(rename, 100% similar)" in lines

    def test_binary_note(self):
        """Test the binary file note."""
        file = File("logo.png", "logo.png", "modify", is_binary=True)
        assert list(TerminalDiffRenderer(use_color=False).render_file_header(file))[-1] == "(binary file)"


@pytest.mark.unit
class TestJsonDiffRenderer:
    """Tests for JsonDiffRenderer."""

    def test_render(self, modify_patch):
        """Test the structure of the JSON output."""
        data = json.loads(JsonDiffRenderer().render(parse_diff(modify_patch)))
        assert data["statistics"]["modified"] == 1
        blocks = data["files"][0]["blocks"]
        assert [b["kind"] for b in blocks] == ["hunk", "skip", "hunk"]
        assert blocks[1]["count"] == 6

    def test_without_stats(self, modify_patch):
        """Test that statistics can be left out."""
        data = JsonDiffRenderer(include_stats=False).to_data(parse_diff(modify_patch))
        assert set(data) == {"files"}

    def test_compact(self, modify_patch):
        """Test compact output without indentation."""
        output = JsonDiffRenderer(pretty_print=False).render(parse_diff(modify_patch))
        assert "\n" not in output

    def test_non_ascii_kept(self):
        """Test that non-ASCII text is written as-is."""
        output = JsonDiffRenderer().render(parse_diff("@@ -1 +1 @@\n-größe\n+size\n"))
        assert "größe" in output
