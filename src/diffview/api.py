#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/api.py
"""Python API for parsing and converting diffs.

This module provides the high-level functions used by applications and by
the command line: parsing unified diffs and word-diff text into the display
model of :mod:`diffview.models`, converting between the two text formats
and summarizing a parsed result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from diffview.converters.word_diff import from_word_diff as _from_word_diff
from diffview.converters.word_diff import to_word_diff as _to_word_diff
from diffview.engine.pairing import build_hunk_lines
from diffview.engine.skip_blocks import insert_skip_blocks
from diffview.models import File, Hunk
from diffview.options import DiffOptions, WordDiffOptions
from diffview.parsers.unified import ParsedFile, ParsedHunk, parse_unified
from diffview.parsers.word_diff import parse_word_diff_text

logger = logging.getLogger(__name__)


def _resolve_options(options: Any, options_class: type, overrides: dict[str, Any]) -> Any:
    if options is None:
        options = options_class()
    if overrides:
        options = options.create_updated(**overrides)
    return options


def build_hunk(hunk: ParsedHunk, options: DiffOptions) -> Hunk:
    """Pair the changes of a parsed hunk into a display hunk."""
    return Hunk(
        old_start=hunk.old_start,
        old_lines=hunk.old_lines,
        new_start=hunk.new_start,
        new_lines=hunk.new_lines,
        header=hunk.header,
        lines=tuple(build_hunk_lines(hunk.changes, options)),
    )


def build_file(parsed: ParsedFile, options: DiffOptions) -> File:
    """Build a display file, pairing every hunk and inserting skip blocks."""
    hunks = [build_hunk(hunk, options) for hunk in parsed.hunks]
    return File(
        **parsed.header.file_fields(),
        blocks=tuple(insert_skip_blocks(hunks)),
        old_ending_newline=parsed.old_ending_newline,
        new_ending_newline=parsed.new_ending_newline,
    )


def parse_diff(diff: str, options: DiffOptions | None = None, **kwargs: Any) -> list[File]:
    """Parse a unified diff into the display model.

    Parameters
    ----------
    diff : str
        Unified diff text, as produced by ``git diff`` or ``diff -u``
    options : DiffOptions, optional
        Pairing configuration. Defaults to ``DiffOptions()``.
    **kwargs : Any
        Individual option overrides applied on top of ``options``

    Returns
    -------
    list of File
        Files in patch order; an empty list for empty input

    Raises
    ------
    HunkHeaderError
        If a hunk header cannot be parsed
    ValidationError
        If an option value is out of range

    Examples
    --------
    Parse a patch with a tighter pairing distance:
        >>> from diffview import parse_diff
        >>> files = parse_diff(patch, max_diff_distance=6)
        >>> for block in files[0].blocks:
        ...     print(block.kind)

    """
    options = _resolve_options(options, DiffOptions, kwargs)
    files = [build_file(parsed, options) for parsed in parse_unified(diff)]
    logger.debug(f"parse_diff produced {len(files)} file(s)")
    return files


def parse_word_diff(diff: str, options: WordDiffOptions | None = None, **kwargs: Any) -> list[File]:
    """Parse ``git diff --word-diff=plain`` output into the display model.

    Parameters
    ----------
    diff : str
        Word-diff text
    options : WordDiffOptions, optional
        Parser configuration. Defaults to ``WordDiffOptions()``.
    **kwargs : Any
        Individual option overrides applied on top of ``options``

    Returns
    -------
    list of File
        Files in input order; an empty list for empty input

    Raises
    ------
    HunkHeaderError
        If a hunk header cannot be parsed

    """
    options = _resolve_options(options, WordDiffOptions, kwargs)
    return parse_word_diff_text(diff, options)


def to_word_diff(diff: str, options: DiffOptions | None = None, **kwargs: Any) -> str:
    """Convert a unified diff to word-diff text.

    See :func:`diffview.converters.word_diff.to_word_diff`.
    """
    return _to_word_diff(diff, _resolve_options(options, DiffOptions, kwargs))


def from_word_diff(diff: str, options: WordDiffOptions | None = None, **kwargs: Any) -> str:
    """Convert word-diff text to a unified diff.

    See :func:`diffview.converters.word_diff.from_word_diff`.
    """
    return _from_word_diff(diff, _resolve_options(options, WordDiffOptions, kwargs))


@dataclass(frozen=True)
class DiffStats:
    """Line counts summarizing a parsed diff.

    Attributes
    ----------
    files : int
        Number of files
    added, deleted : int
        Stand-alone inserted and deleted lines
    modified : int
        Paired lines with inline changes
    context : int
        Unchanged lines, including pairs that only differ in trailing
        whitespace
    skipped : int
        Unchanged lines hidden in skip blocks

    """

    files: int = 0
    added: int = 0
    deleted: int = 0
    modified: int = 0
    context: int = 0
    skipped: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert the statistics to a dictionary."""
        return {
            "files": self.files,
            "added": self.added,
            "deleted": self.deleted,
            "modified": self.modified,
            "context": self.context,
            "skipped": self.skipped,
        }


def diff_stats(files: Iterable[File]) -> DiffStats:
    """Count added, deleted, modified and context lines of parsed files.

    Parameters
    ----------
    files : iterable of File
        Result of :func:`parse_diff` or :func:`parse_word_diff`

    Returns
    -------
    DiffStats
        Aggregated line counts

    """
    counts = {"files": 0, "added": 0, "deleted": 0, "modified": 0, "context": 0, "skipped": 0}
    for file in files:
        counts["files"] += 1
        for block in file.blocks:
            if not isinstance(block, Hunk):
                counts["skipped"] += block.count
                continue
            for line in block.lines:
                if line.type == "insert":
                    counts["added"] += 1
                elif line.type == "delete":
                    counts["deleted"] += 1
                elif line.is_modified:
                    counts["modified"] += 1
                else:
                    counts["context"] += 1
    return DiffStats(**counts)
