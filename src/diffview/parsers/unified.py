#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/parsers/unified.py
"""Unified diff parser.

Turns patch text (``git diff`` output or plain ``diff -u`` output) into
files, hunks and per-line changes with line numbers. The result is the raw
material for the pairing engine in :mod:`diffview.engine.pairing`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from diffview.constants import (
    GIT_DIFF_PREFIX,
    HUNK_HEADER_RE,
    HUNK_PREFIX,
    METADATA_PREFIX,
    NEW_FILE_PREFIX,
    OLD_FILE_PREFIX,
    ChangeType,
)
from diffview.exceptions import HunkHeaderError
from diffview.parsers.headers import FileHeader

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Change:
    """One content line of a hunk.

    Context lines carry both line numbers, deletions only the old one and
    insertions only the new one.
    """

    type: ChangeType
    content: str
    old_line_number: int | None = None
    new_line_number: int | None = None


@dataclass(slots=True)
class HunkRange:
    """Line ranges of a parsed ``@@`` header."""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str
    label: str


@dataclass
class ParsedHunk:
    """A hunk with its changes, before line pairing."""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str
    changes: list[Change] = field(default_factory=list)

    @property
    def context(self) -> str | None:
        """Trailing label of the hunk header, or None."""
        match = HUNK_HEADER_RE.match(self.header)
        if match is None:
            return None
        return match.group(5).strip() or None


@dataclass
class ParsedFile:
    """A file of the patch with its header and raw hunks."""

    header: FileHeader
    hunks: list[ParsedHunk] = field(default_factory=list)
    old_ending_newline: bool = True
    new_ending_newline: bool = True


def parse_hunk_header(line: str, line_number: int | None = None) -> HunkRange:
    """Parse an ``@@ -a,b +c,d @@ label`` header.

    Omitted lengths default to 1.

    Parameters
    ----------
    line : str
        Header line
    line_number : int, optional
        Position of the line in the input, used in error messages

    Returns
    -------
    HunkRange
        Parsed ranges and the trailing label

    Raises
    ------
    HunkHeaderError
        If the line does not match the hunk header grammar

    """
    match = HUNK_HEADER_RE.match(line)
    if match is None:
        raise HunkHeaderError(line, line_number)
    old_start, old_lines, new_start, new_lines, label = match.groups()
    return HunkRange(
        old_start=int(old_start),
        old_lines=int(old_lines) if old_lines is not None else 1,
        new_start=int(new_start),
        new_lines=int(new_lines) if new_lines is not None else 1,
        header=line,
        label=label.strip(),
    )


def format_hunk_header(old_start: int, old_lines: int, new_start: int, new_lines: int, label: str = "") -> str:
    """Format a hunk header, appending ``label`` when it is not empty."""
    header = f"@@ -{old_start},{old_lines} +{new_start},{new_lines} @@"
    return f"{header} {label}" if label else header


def split_patch_lines(text: str) -> list[str]:
    r"""Split patch text into lines, dropping the final newline.

    Only ``\n`` and ``\r\n`` end lines; other characters that
    :meth:`str.splitlines` would break on are kept as content.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def starts_plain_file(lines: list[str], index: int) -> bool:
    """Whether ``lines[index]`` opens a ``---``/``+++`` file header pair."""
    return (
        lines[index].startswith(OLD_FILE_PREFIX)
        and index + 1 < len(lines)
        and lines[index + 1].startswith(NEW_FILE_PREFIX)
    )


class UnifiedDiffParser:
    """Line-oriented state machine over unified diff text.

    Examples
    --------
        >>> files = UnifiedDiffParser().parse("@@ -1,2 +1,3 @@\\n line1\\n+line2\\n line3\\n")
        >>> [c.type for c in files[0].hunks[0].changes]
        ['normal', 'insert', 'normal']

    """

    def __init__(self) -> None:
        """Initialize empty parser state."""
        self._reset()

    def _reset(self) -> None:
        self.files: list[ParsedFile] = []
        self.current: ParsedFile | None = None
        self.hunk: ParsedHunk | None = None
        self.old_remaining = 0
        self.new_remaining = 0
        self.old_cursor = 0
        self.new_cursor = 0

    def parse(self, text: str) -> list[ParsedFile]:
        """Parse patch text into files.

        Parameters
        ----------
        text : str
            Unified diff text

        Returns
        -------
        list of ParsedFile
            Files in input order; empty for empty input

        Raises
        ------
        HunkHeaderError
            If a line starting with ``@@`` is not a valid hunk header

        """
        self._reset()
        lines = split_patch_lines(text)
        index = 0
        while index < len(lines):
            index += self._handle_line(lines, index)
        files = self.files
        logger.debug(f"Parsed {len(files)} file(s) from {len(lines)} line(s)")
        self._reset()
        return files

    @property
    def _expecting_content(self) -> bool:
        return self.hunk is not None and (self.old_remaining > 0 or self.new_remaining > 0)

    def _handle_line(self, lines: list[str], index: int) -> int:
        line = lines[index]

        if self._expecting_content:
            if self._add_change(line):
                return 1
            logger.debug(f"Hunk ended early at line {index + 1}: {line!r}")
            self.hunk = None

        if line.startswith(METADATA_PREFIX) and self.hunk is not None:
            self._apply_metadata()
            return 1

        if line.startswith(GIT_DIFF_PREFIX):
            self._open_file(FileHeader.from_git_line(line))
            return 1

        if line.startswith(HUNK_PREFIX):
            self._open_hunk(parse_hunk_header(line, index + 1))
            return 1

        if starts_plain_file(lines, index):
            if self.current is None or self.current.hunks:
                self._open_file(FileHeader())
            assert self.current is not None
            self.current.header.consume(line)
            self.current.header.consume(lines[index + 1])
            return 2

        if self.current is not None and not self.current.hunks:
            if not self.current.header.consume(line) and line.strip():
                logger.debug(f"Ignoring unrecognized header line {index + 1}: {line!r}")
            return 1

        if line.strip():
            logger.debug(f"Ignoring stray line {index + 1}: {line!r}")
        return 1

    def _open_file(self, header: FileHeader) -> None:
        self.hunk = None
        self.current = ParsedFile(header=header)
        self.files.append(self.current)

    def _open_hunk(self, hunk_range: HunkRange) -> None:
        if self.current is None:
            logger.debug("Hunk without file header, opening an implicit file")
            self._open_file(FileHeader())
        assert self.current is not None
        self.hunk = ParsedHunk(
            old_start=hunk_range.old_start,
            old_lines=hunk_range.old_lines,
            new_start=hunk_range.new_start,
            new_lines=hunk_range.new_lines,
            header=hunk_range.header,
        )
        self.current.hunks.append(self.hunk)
        self.old_remaining, self.new_remaining = hunk_range.old_lines, hunk_range.new_lines
        self.old_cursor, self.new_cursor = hunk_range.old_start, hunk_range.new_start

    def _add_change(self, line: str) -> bool:
        assert self.hunk is not None
        marker, content = line[:1], line[1:]
        if marker in (" ", ""):
            change = Change("normal", content, self.old_cursor, self.new_cursor)
            self.old_cursor += 1
            self.new_cursor += 1
            self.old_remaining -= 1
            self.new_remaining -= 1
        elif marker == "-":
            change = Change("delete", content, old_line_number=self.old_cursor)
            self.old_cursor += 1
            self.old_remaining -= 1
        elif marker == "+":
            change = Change("insert", content, new_line_number=self.new_cursor)
            self.new_cursor += 1
            self.new_remaining -= 1
        elif marker == METADATA_PREFIX:
            self._apply_metadata()
            return True
        else:
            return False
        self.hunk.changes.append(change)
        return True

    def _apply_metadata(self) -> None:
        """Record a ``\\ No newline at end of file`` marker.

        The marker refers to the change right before it and never becomes a
        line of its own.
        """
        assert self.current is not None and self.hunk is not None
        if not self.hunk.changes:
            return
        previous = self.hunk.changes[-1].type
        if previous in ("normal", "delete"):
            self.current.old_ending_newline = False
        if previous in ("normal", "insert"):
            self.current.new_ending_newline = False


def parse_unified(text: str) -> list[ParsedFile]:
    """Parse unified diff text into raw files, hunks and changes.

    Parameters
    ----------
    text : str
        Unified diff text

    Returns
    -------
    list of ParsedFile
        Parsed files; empty for empty input

    Raises
    ------
    HunkHeaderError
        If a line starting with ``@@`` is not a valid hunk header

    """
    return UnifiedDiffParser().parse(text)
