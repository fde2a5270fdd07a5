#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/parsers/word_diff.py
"""Parser for ``git diff --word-diff=plain`` output.

In this format a hunk body carries no ``+``/``-`` line prefixes. Deleted and
inserted spans are instead wrapped inline::

    @@ -1,3 +1,3 @@
     import { Check, [-Copy-]{+Copy, ChevronDown+} } from "lucide-react";
    [-import { useTheme } from "next-themes";-]
    {+import * as Collapsible from "@radix-ui/react-collapsible";+}

Lines that start with unchanged text carry a single leading space which is
not part of the content. A line made only of inserted (or deleted) spans
becomes an insert (or delete) line; anything else becomes a normal line
with inline segments.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from diffview.constants import (
    GIT_DIFF_PREFIX,
    HUNK_PREFIX,
    METADATA_PREFIX,
    WORD_DIFF_TOKEN_RE,
    LineType,
)
from diffview.engine.segments import refine_edit_pairs
from diffview.engine.similarity import merge_segments
from diffview.engine.skip_blocks import insert_skip_blocks
from diffview.models import File, Hunk, Line, Segment
from diffview.options import WordDiffOptions
from diffview.parsers.headers import FileHeader
from diffview.parsers.unified import parse_hunk_header, split_patch_lines, starts_plain_file

logger = logging.getLogger(__name__)

CONTEXT_PREFIX = " "


def classify_line(line: str) -> LineType:
    """Classify a word-diff content line.

    Parameters
    ----------
    line : str
        Line content without the leading context space

    Returns
    -------
    {"normal", "insert", "delete"}
        ``insert`` or ``delete`` when the line consists of spans of only that
        kind (plus surrounding whitespace), ``normal`` otherwise

    """
    matches = list(WORD_DIFF_TOKEN_RE.finditer(line))
    has_insert = any(m.group(1) is not None for m in matches)
    has_delete = any(m.group(2) is not None for m in matches)
    if has_insert == has_delete:
        return "normal"
    if WORD_DIFF_TOKEN_RE.sub("", line).strip():
        return "normal"
    return "insert" if has_insert else "delete"


def strip_markers(line: str) -> str:
    """Replace every marked span with its inner text."""
    return WORD_DIFF_TOKEN_RE.sub(lambda m: m.group(1) if m.group(1) is not None else m.group(2), line)


def _coalesce(segments: list[Segment], segment: Segment) -> None:
    if not segment.value:
        return
    if segments and segments[-1].type == segment.type:
        segments[-1] = Segment(segments[-1].value + segment.value, segment.type)
    else:
        segments.append(segment)


def tokenize_line(line: str) -> list[Segment]:
    """Split a line into literal and marked runs.

    Adjacent runs of the same type are merged. A line without any text
    yields a single empty normal segment.
    """
    tokens: list[Segment] = []
    last = 0
    for match in WORD_DIFF_TOKEN_RE.finditer(line):
        if match.start() > last:
            _coalesce(tokens, Segment(line[last : match.start()], "normal"))
        inserted, deleted = match.group(1), match.group(2)
        if inserted is not None:
            _coalesce(tokens, Segment(inserted, "insert"))
        else:
            _coalesce(tokens, Segment(deleted, "delete"))
        last = match.end()
    if last < len(line):
        _coalesce(tokens, Segment(line[last:], "normal"))
    return tokens or [Segment("", "normal")]


def _strip_common_edges(segments: list[Segment]) -> list[Segment]:
    out: list[Segment] = []
    i = 0
    while i < len(segments):
        current = segments[i]
        following = segments[i + 1] if i + 1 < len(segments) else None
        if current.type != "delete" or following is None or following.type != "insert":
            out.append(current)
            i += 1
            continue

        old, new = current.value, following.value
        prefix = 0
        while prefix < len(old) and prefix < len(new) and old[prefix] == new[prefix]:
            prefix += 1
        suffix = 0
        while (
            suffix < len(old) - prefix
            and suffix < len(new) - prefix
            and old[len(old) - 1 - suffix] == new[len(new) - 1 - suffix]
        ):
            suffix += 1

        if prefix:
            out.append(Segment(old[:prefix], "normal"))
        old_middle = old[prefix : len(old) - suffix]
        new_middle = new[prefix : len(new) - suffix]
        if old_middle:
            out.append(Segment(old_middle, "delete"))
        if new_middle:
            out.append(Segment(new_middle, "insert"))
        if suffix:
            out.append(Segment(old[len(old) - suffix :], "normal"))
        i += 2
    return out


def merge_overlapping_edits(segments: Iterable[Segment]) -> list[Segment]:
    """Shrink every adjacent delete/insert pair to its differing middle.

    The longest common prefix and suffix of the two spans are re-emitted as
    normal segments and empty middles are dropped. Passes repeat until
    nothing changes, so applying the function to its own output returns
    that output unchanged. Adjacent normal segments are not merged.

    Parameters
    ----------
    segments : iterable of Segment
        Segments of one line

    Returns
    -------
    list of Segment
        Segments with minimal highlighted regions

    Examples
    --------
        >>> merge_overlapping_edits([Segment("Copy", "delete"), Segment("Copy, X", "insert")])
        [Segment(value='Copy', type='normal'), Segment(value=', X', type='insert')]

    """
    current = list(segments)
    while True:
        stripped = _strip_common_edges(current)
        if stripped == current:
            return stripped
        current = stripped


def build_segments(line: str, inline_max_char_edits: int = 0) -> list[Segment]:
    """Build the inline segments of a mixed word-diff line.

    Parameters
    ----------
    line : str
        Line content without the leading context space
    inline_max_char_edits : int, default 0
        Character edit budget for refining leftover delete/insert pairs
        into character-level diffs; 0 disables the refinement

    Returns
    -------
    list of Segment
        Merged segments; at least one (possibly empty) segment

    """
    segments = merge_segments(merge_overlapping_edits(tokenize_line(line)))
    if inline_max_char_edits > 0:
        segments = refine_edit_pairs(segments, inline_max_char_edits)
    return segments or [Segment("", "normal")]


@dataclass(frozen=True, slots=True)
class ChangeStats:
    """Summary of a mixed line used by the split guard."""

    ratio: float
    has_insert: bool
    has_delete: bool
    old_text: str
    new_text: str


def change_stats(segments: Iterable[Segment]) -> ChangeStats:
    """Compute the share of a line's text that is inserted or deleted."""
    total = changed = 0
    has_insert = has_delete = False
    old_parts: list[str] = []
    new_parts: list[str] = []
    for segment in segments:
        total += len(segment.value)
        if segment.type == "insert":
            changed += len(segment.value)
            has_insert = True
            new_parts.append(segment.value)
        elif segment.type == "delete":
            changed += len(segment.value)
            has_delete = True
            old_parts.append(segment.value)
        else:
            old_parts.append(segment.value)
            new_parts.append(segment.value)
    return ChangeStats(
        ratio=changed / total if total else 0.0,
        has_insert=has_insert,
        has_delete=has_delete,
        old_text="".join(old_parts),
        new_text="".join(new_parts),
    )


class _HunkBuilder:
    """Accumulates lines of one word-diff hunk and recounts its ranges."""

    def __init__(self, old_start: int, new_start: int, header: str) -> None:
        self.old_start = old_start
        self.new_start = new_start
        self.header = header
        self.lines: list[Line] = []
        self.old_cursor = old_start
        self.new_cursor = new_start

    def add_delete(self, text: str) -> None:
        self.lines.append(Line("delete", (Segment(text, "normal"),), old_line_number=self.old_cursor))
        self.old_cursor += 1

    def add_insert(self, text: str) -> None:
        self.lines.append(Line("insert", (Segment(text, "normal"),), new_line_number=self.new_cursor))
        self.new_cursor += 1

    def add_normal(self, segments: list[Segment]) -> None:
        self.lines.append(Line("normal", tuple(segments), self.old_cursor, self.new_cursor))
        self.old_cursor += 1
        self.new_cursor += 1

    def build(self) -> Hunk:
        return Hunk(
            old_start=self.old_start,
            old_lines=self.old_cursor - self.old_start,
            new_start=self.new_start,
            new_lines=self.new_cursor - self.new_start,
            header=self.header,
            lines=tuple(self.lines),
        )


class _FileBuilder:
    def __init__(self, header: FileHeader) -> None:
        self.header = header
        self.hunks: list[Hunk] = []
        self.hunk: _HunkBuilder | None = None
        self.ending_newline = True

    def flush_hunk(self) -> None:
        if self.hunk is not None:
            self.hunks.append(self.hunk.build())
            self.hunk = None

    def build(self) -> File:
        self.flush_hunk()
        return File(
            **self.header.file_fields(),
            blocks=tuple(insert_skip_blocks(self.hunks)),
            old_ending_newline=self.ending_newline,
            new_ending_newline=self.ending_newline,
        )


class WordDiffParser:
    """Parse word-diff text directly into the display model.

    Parameters
    ----------
    options : WordDiffOptions, optional
        Parser configuration

    """

    def __init__(self, options: WordDiffOptions | None = None) -> None:
        """Initialize the parser with options."""
        self.options = options or WordDiffOptions()

    def parse(self, text: str) -> list[File]:
        """Parse word-diff text.

        Parameters
        ----------
        text : str
            Output of ``git diff --word-diff=plain``

        Returns
        -------
        list of File
            Files with hunks and skip blocks; empty for empty input

        Raises
        ------
        HunkHeaderError
            If a line starting with ``@@`` is not a valid hunk header

        """
        lines = split_patch_lines(text)
        files: list[File] = []
        current: _FileBuilder | None = None

        index = 0
        while index < len(lines):
            line = lines[index]
            index += 1

            if line.startswith(GIT_DIFF_PREFIX):
                if current is not None:
                    files.append(current.build())
                current = _FileBuilder(FileHeader.from_git_line(line))
                continue

            if starts_plain_file(lines, index - 1):
                if current is None or current.hunks or current.hunk is not None:
                    if current is not None:
                        files.append(current.build())
                    current = _FileBuilder(FileHeader())
                current.header.consume(line)
                current.header.consume(lines[index])
                index += 1
                continue

            if line.startswith(HUNK_PREFIX):
                hunk_range = parse_hunk_header(line, index)
                if current is None:
                    logger.debug("Hunk without file header, opening an implicit file")
                    current = _FileBuilder(FileHeader())
                current.flush_hunk()
                current.hunk = _HunkBuilder(hunk_range.old_start, hunk_range.new_start, line)
                continue

            if current is None:
                if line.strip():
                    logger.debug(f"Ignoring line {index} outside of any file: {line!r}")
                continue

            if current.hunk is None:
                if not current.header.consume(line) and line.strip():
                    logger.debug(f"Ignoring unrecognized header line {index}: {line!r}")
                continue

            if line.startswith(METADATA_PREFIX):
                current.ending_newline = False
                continue

            self._add_content_line(current.hunk, line)

        if current is not None:
            files.append(current.build())
        logger.debug(f"Parsed {len(files)} word-diff file(s)")
        return files

    def _add_content_line(self, hunk: _HunkBuilder, line: str) -> None:
        content = line[1:] if line.startswith(CONTEXT_PREFIX) else line
        kind = classify_line(content)
        if kind == "insert":
            hunk.add_insert(strip_markers(content))
            return
        if kind == "delete":
            hunk.add_delete(strip_markers(content))
            return

        segments = build_segments(content, self.options.inline_max_char_edits)
        stats = change_stats(segments)
        limit = self.options.max_change_ratio
        if stats.has_insert and stats.has_delete and limit is not None and stats.ratio > limit:
            logger.debug(f"Splitting line with change ratio {stats.ratio:.2f} above {limit}")
            hunk.add_delete(stats.old_text)
            hunk.add_insert(stats.new_text)
            return
        hunk.add_normal(segments)


def parse_word_diff_text(text: str, options: WordDiffOptions | None = None) -> list[File]:
    """Parse ``git diff --word-diff=plain`` output into files.

    Parameters
    ----------
    text : str
        Word-diff text
    options : WordDiffOptions, optional
        Parser configuration

    Returns
    -------
    list of File
        Parsed files; empty for empty input

    """
    return WordDiffParser(options).parse(text)
