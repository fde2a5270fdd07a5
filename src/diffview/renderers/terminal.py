#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/renderers/terminal.py
"""Terminal renderer with optional ANSI colors.

Each display line is printed with old/new line-number gutters and a change
marker. Modified lines show their inline segments highlighted; without
colors the word-diff ``[-...-]``/``{+...+}`` markers are used instead.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from diffview.constants import DEV_NULL
from diffview.converters.word_diff import serialize_segments
from diffview.models import File, Hunk, Line, SkipBlock

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
BOLD = "\033[1m"
DIM = "\033[2m"
RED_BG = "\033[41m"
GREEN_BG = "\033[42m"
RESET = "\033[0m"

SKIP_MARKER = "⋯"
GUTTER_WIDTH = 5

_LINE_SIGNS = {"insert": "+", "delete": "-", "normal": " "}


class TerminalDiffRenderer:
    """Render parsed diff files for terminal display.

    - Bold for file headers
    - Cyan for hunk headers
    - Dim for skip markers
    - Red for deleted lines, green for inserted lines
    - Red/green background for inline changes of modified lines

    Parameters
    ----------
    use_color : bool, default = True
        If True, add ANSI color codes to output

    Examples
    --------
    Print a patch:
        >>> from diffview import parse_diff
        >>> from diffview.renderers import TerminalDiffRenderer
        >>> for line in TerminalDiffRenderer().render(parse_diff(patch)):
        ...     print(line)

    """

    def __init__(self, use_color: bool = True):
        """Initialize the terminal renderer."""
        self.use_color = use_color

    def _style(self, text: str, *codes: str) -> str:
        if not self.use_color or not codes:
            return text
        return f"{''.join(codes)}{text}{RESET}"

    def render(self, files: Iterable[File]) -> Iterator[str]:
        """Render parsed files as terminal lines.

        Parameters
        ----------
        files : iterable of File
            Parsed diff files

        Yields
        ------
        str
            Output lines without trailing newlines

        """
        for file in files:
            yield from self.render_file_header(file)
            for block in file.blocks:
                if isinstance(block, Hunk):
                    yield self._style(block.header, CYAN)
                    for line in block.lines:
                        yield self.render_line(line)
                else:
                    yield self.render_skip(block)

    def render_file_header(self, file: File) -> Iterator[str]:
        """Yield the ``---``/``+++`` header of a file, plus a type note."""
        old = f"a/{file.old_path}" if file.old_path else DEV_NULL
        new = f"b/{file.new_path}" if file.new_path else DEV_NULL
        yield self._style(f"--- {old}", BOLD)
        yield self._style(f"+++ {new}", BOLD)
        if file.type != "modify":
            note = f"({file.type}"
            if file.similarity is not None:
                note += f", {file.similarity}% similar"
            yield self._style(note + ")", DIM)
        if file.is_binary:
            yield self._style("(binary file)", DIM)

    def render_skip(self, block: SkipBlock) -> str:
        """Render a skip block as a single marker line."""
        noun = "line" if block.count == 1 else "lines"
        text = f"{SKIP_MARKER} {block.count} unchanged {noun} {SKIP_MARKER}"
        if block.context:
            text = f"{text} {block.context}"
        return self._style(text, DIM)

    def render_line(self, line: Line) -> str:
        """Render one display line with gutters."""
        old = "" if line.old_line_number is None else str(line.old_line_number)
        new = "" if line.new_line_number is None else str(line.new_line_number)
        gutter = f"{old:>{GUTTER_WIDTH}} {new:>{GUTTER_WIDTH}} "

        if line.is_modified:
            return f"{gutter}~ {self._inline(line)}"
        sign = _LINE_SIGNS[line.type]
        text = f"{sign} {line.text}"
        if line.type == "delete":
            text = self._style(text, RED)
        elif line.type == "insert":
            text = self._style(text, GREEN)
        return gutter + text

    def _inline(self, line: Line) -> str:
        if not self.use_color:
            return serialize_segments(list(line.segments))
        parts = []
        for segment in line.segments:
            if segment.type == "delete":
                parts.append(self._style(segment.value, RED_BG))
            elif segment.type == "insert":
                parts.append(self._style(segment.value, GREEN_BG))
            else:
                parts.append(segment.value)
        return "".join(parts)
