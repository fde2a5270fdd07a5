#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/models.py
"""Display model produced by the diff parsers.

A parsed patch is an ordered list of :class:`File` records. Each file holds
an ordered list of blocks, every block being either a :class:`Hunk` of
:class:`Line` records or a :class:`SkipBlock` standing in for unchanged
lines elided between hunks. Lines are made of :class:`Segment` runs which
carry inline insert/delete highlighting.

All records are immutable and are created fresh for every parse call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from diffview.constants import HUNK_HEADER_RE, FileType, LineType, SegmentType


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of text within a line sharing one change type."""

    value: str
    type: SegmentType = "normal"

    def to_dict(self) -> dict[str, Any]:
        """Convert the segment to a JSON-safe dictionary."""
        return {"value": self.value, "type": self.type}


@dataclass(frozen=True, slots=True)
class Line:
    """A single display line of a hunk.

    Parameters
    ----------
    type : {"normal", "insert", "delete"}
        Line type. A modified line (a deletion paired with an insertion) is
        a ``normal`` line carrying both line numbers and inline
        insert/delete segments.
    segments : tuple of Segment
        Ordered text runs making up the line
    old_line_number : int or None
        1-based line number on the old side, None for insertions
    new_line_number : int or None
        1-based line number on the new side, None for deletions

    """

    type: LineType
    segments: tuple[Segment, ...] = ()
    old_line_number: int | None = None
    new_line_number: int | None = None

    @property
    def text(self) -> str:
        """Concatenation of all segment values."""
        return "".join(s.value for s in self.segments)

    @property
    def old_text(self) -> str:
        """Old-side text, built from normal and delete segments."""
        return "".join(s.value for s in self.segments if s.type != "insert")

    @property
    def new_text(self) -> str:
        """New-side text, built from normal and insert segments."""
        return "".join(s.value for s in self.segments if s.type != "delete")

    @property
    def is_modified(self) -> bool:
        """Whether this is a paired line with inline changes."""
        return self.type == "normal" and any(s.type != "normal" for s in self.segments)

    def to_dict(self) -> dict[str, Any]:
        """Convert the line to a JSON-safe dictionary."""
        return {
            "type": self.type,
            "old_line_number": self.old_line_number,
            "new_line_number": self.new_line_number,
            "modified": self.is_modified,
            "segments": [s.to_dict() for s in self.segments],
        }


@dataclass(frozen=True, slots=True)
class Hunk:
    """A contiguous changed region of a file.

    Parameters
    ----------
    old_start, old_lines : int
        Start line and length of the region on the old side
    new_start, new_lines : int
        Start line and length of the region on the new side
    header : str
        Original ``@@`` header text, including any trailing context label
    lines : tuple of Line
        Display lines of the hunk

    """

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str = ""
    lines: tuple[Line, ...] = ()
    kind: Literal["hunk"] = field(default="hunk", init=False)

    @property
    def context(self) -> str | None:
        """Trailing label of the header (often an enclosing symbol), or None."""
        match = HUNK_HEADER_RE.match(self.header)
        if match is None:
            return None
        return match.group(5).strip() or None

    @property
    def old_end(self) -> int:
        """First old-side line number after this hunk."""
        return self.old_start + self.old_lines

    def to_dict(self) -> dict[str, Any]:
        """Convert the hunk to a JSON-safe dictionary."""
        return {
            "kind": self.kind,
            "header": self.header,
            "old_start": self.old_start,
            "old_lines": self.old_lines,
            "new_start": self.new_start,
            "new_lines": self.new_lines,
            "context": self.context,
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass(frozen=True, slots=True)
class SkipBlock:
    """Marker for unchanged lines hidden between hunks."""

    count: int
    context: str | None = None
    kind: Literal["skip"] = field(default="skip", init=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert the skip block to a JSON-safe dictionary."""
        return {"kind": self.kind, "count": self.count, "context": self.context}


Block = Union[Hunk, SkipBlock]


@dataclass(frozen=True, slots=True)
class File:
    """One file of a parsed patch.

    Parameters
    ----------
    old_path, new_path : str
        Paths on each side with ``a/``/``b/`` prefixes removed. The side that
        does not exist (``/dev/null``) is an empty string.
    type : {"add", "delete", "modify", "rename", "copy"}
        Kind of change made to the file
    blocks : tuple of Hunk or SkipBlock
        Hunks in document order, with skip blocks inserted for gaps
    old_revision, new_revision : str or None
        Abbreviated object ids from the ``index`` header line
    old_mode, new_mode : str or None
        File modes from ``index``, ``old mode``/``new mode`` or
        ``new file mode``/``deleted file mode`` lines
    similarity : int or None
        Similarity (or dissimilarity) percentage for renames and copies
    is_binary : bool
        True when the patch declares the file as binary
    old_ending_newline, new_ending_newline : bool
        False when the corresponding side lacks a trailing newline
    header_lines : tuple of str
        Raw header lines preceding the first hunk

    """

    old_path: str
    new_path: str
    type: FileType
    blocks: tuple[Block, ...] = ()
    old_revision: str | None = None
    new_revision: str | None = None
    old_mode: str | None = None
    new_mode: str | None = None
    similarity: int | None = None
    is_binary: bool = False
    old_ending_newline: bool = True
    new_ending_newline: bool = True
    header_lines: tuple[str, ...] = ()

    @property
    def hunks(self) -> list[Hunk]:
        """Only the hunk entries of ``blocks``."""
        return [b for b in self.blocks if isinstance(b, Hunk)]

    @property
    def path(self) -> str:
        """Most relevant display path: the new path unless the file was deleted."""
        return self.new_path or self.old_path

    def to_dict(self) -> dict[str, Any]:
        """Convert the file to a JSON-safe dictionary."""
        return {
            "old_path": self.old_path,
            "new_path": self.new_path,
            "type": self.type,
            "old_revision": self.old_revision,
            "new_revision": self.new_revision,
            "old_mode": self.old_mode,
            "new_mode": self.new_mode,
            "similarity": self.similarity,
            "is_binary": self.is_binary,
            "old_ending_newline": self.old_ending_newline,
            "new_ending_newline": self.new_ending_newline,
            "blocks": [b.to_dict() for b in self.blocks],
        }
