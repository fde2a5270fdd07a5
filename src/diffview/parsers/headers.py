#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/parsers/headers.py
"""Per-file header parsing shared by the unified and word-diff parsers.

The header of a file in a git patch is the run of lines between
``diff --git`` and the first hunk::

    diff --git a/src/alpha.c b/src/beta.c
    similarity index 92%
    rename from src/alpha.c
    rename to src/beta.c
    index 3b18e7a..8d980f1 100644
    --- a/src/alpha.c
    +++ b/src/beta.c

Plain ``diff -u`` output only carries the ``---``/``+++`` pair.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from diffview.constants import (
    DEV_NULL,
    GIT_DIFF_HEADER_RE,
    GIT_DIFF_PREFIX,
    INDEX_LINE_RE,
    NEW_FILE_PREFIX,
    OLD_FILE_PREFIX,
    SIMILARITY_LINE_RE,
    FileType,
)

logger = logging.getLogger(__name__)

BINARY_FILES_RE = re.compile(r"^Binary files (.+) and (.+) differ$")


def unquote_path(path: str) -> str:
    """Decode a C-style quoted path as written by git for unusual file names."""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path
    inner = path[1:-1]
    try:
        return inner.encode("utf-8").decode("unicode_escape").encode("latin-1").decode("utf-8")
    except UnicodeError:
        logger.debug(f"Could not decode quoted path {path!r}, keeping it verbatim")
        return inner


def normalize_path(raw: str, prefix: str = "") -> str:
    """Normalize a path taken from a header line.

    Trailing tab-separated timestamps and surrounding quotes are removed,
    the ``a/`` or ``b/`` side prefix is dropped and ``/dev/null`` becomes an
    empty string.

    Parameters
    ----------
    raw : str
        Path text as it appears in the header
    prefix : str, optional
        Side prefix to strip, ``"a/"`` or ``"b/"``

    Returns
    -------
    str
        Normalized path

    """
    path = raw.split("\t", 1)[0].strip()
    path = unquote_path(path)
    if not path or path == DEV_NULL:
        return ""
    if prefix and path.startswith(prefix):
        return path[len(prefix) :]
    return path


def split_git_paths(rest: str) -> tuple[str, str]:
    """Split the two paths of a ``diff --git`` line."""
    match = GIT_DIFF_HEADER_RE.match(GIT_DIFF_PREFIX + rest)
    if match:
        return match.group(1), match.group(2)
    # Unquoted paths containing spaces
    if " b/" in rest:
        old, _, new = rest.partition(" b/")
        return old, "b/" + new
    return rest, ""


@dataclass
class FileHeader:
    """Mutable accumulator for the header fields of one file.

    Parameters
    ----------
    old_path, new_path : str
        Paths on each side, already normalized
    lines : list of str
        Raw header lines in input order

    """

    old_path: str = ""
    new_path: str = ""
    old_revision: str | None = None
    new_revision: str | None = None
    old_mode: str | None = None
    new_mode: str | None = None
    similarity: int | None = None
    is_binary: bool = False
    is_new: bool = False
    is_deleted: bool = False
    is_rename: bool = False
    is_copy: bool = False
    lines: list[str] = field(default_factory=list)

    @classmethod
    def from_git_line(cls, line: str) -> FileHeader:
        """Start a header from a ``diff --git`` line."""
        old, new = split_git_paths(line[len(GIT_DIFF_PREFIX) :])
        return cls(old_path=normalize_path(old, "a/"), new_path=normalize_path(new, "b/"), lines=[line])

    @property
    def file_type(self) -> FileType:
        """Infer the kind of change from the collected header lines."""
        if self.is_rename:
            return "rename"
        if self.is_copy:
            return "copy"
        if self.is_new:
            return "add"
        if self.is_deleted:
            return "delete"
        return "modify"

    def consume(self, line: str) -> bool:
        """Apply a header line to this file.

        Parameters
        ----------
        line : str
            Candidate header line

        Returns
        -------
        bool
            True if the line was recognized as a header line

        """
        handled = self._apply(line)
        if handled:
            self.lines.append(line)
        return handled

    def _apply(self, line: str) -> bool:
        if line.startswith(OLD_FILE_PREFIX):
            raw = line[len(OLD_FILE_PREFIX) :]
            if raw.split("\t", 1)[0].strip() == DEV_NULL:
                self.is_new = True
                self.old_path = ""
            elif not self.is_rename and not self.is_copy:
                self.old_path = normalize_path(raw, "a/")
            return True
        if line.startswith(NEW_FILE_PREFIX):
            raw = line[len(NEW_FILE_PREFIX) :]
            if raw.split("\t", 1)[0].strip() == DEV_NULL:
                self.is_deleted = True
                self.new_path = ""
            elif not self.is_rename and not self.is_copy:
                self.new_path = normalize_path(raw, "b/")
            return True

        match = INDEX_LINE_RE.match(line)
        if match:
            self.old_revision, self.new_revision = match.group(1), match.group(2)
            if match.group(3):
                self.old_mode = self.new_mode = match.group(3)
            return True

        match = SIMILARITY_LINE_RE.match(line)
        if match:
            self.similarity = int(match.group(1))
            return True

        for prefix, handler in _PREFIX_HANDLERS:
            if line.startswith(prefix):
                handler(self, line[len(prefix) :].strip())
                return True

        match = BINARY_FILES_RE.match(line)
        if match:
            self.is_binary = True
            if match.group(1).strip() == DEV_NULL:
                self.is_new = True
            elif match.group(2).strip() == DEV_NULL:
                self.is_deleted = True
            return True
        if line.startswith("GIT binary patch"):
            self.is_binary = True
            return True
        return False

    def file_fields(self) -> dict[str, Any]:
        """Keyword arguments for :class:`diffview.models.File`."""
        return {
            "old_path": self.old_path,
            "new_path": self.new_path,
            "type": self.file_type,
            "old_revision": self.old_revision,
            "new_revision": self.new_revision,
            "old_mode": self.old_mode,
            "new_mode": self.new_mode,
            "similarity": self.similarity,
            "is_binary": self.is_binary,
            "header_lines": tuple(self.lines),
        }


def _set_old_mode(header: FileHeader, value: str) -> None:
    header.old_mode = value


def _set_new_mode(header: FileHeader, value: str) -> None:
    header.new_mode = value


def _set_new_file(header: FileHeader, value: str) -> None:
    header.is_new = True
    header.new_mode = value


def _set_deleted_file(header: FileHeader, value: str) -> None:
    header.is_deleted = True
    header.old_mode = value


def _set_rename_from(header: FileHeader, value: str) -> None:
    header.is_rename = True
    header.old_path = normalize_path(value)


def _set_rename_to(header: FileHeader, value: str) -> None:
    header.is_rename = True
    header.new_path = normalize_path(value)


def _set_copy_from(header: FileHeader, value: str) -> None:
    header.is_copy = True
    header.old_path = normalize_path(value)


def _set_copy_to(header: FileHeader, value: str) -> None:
    header.is_copy = True
    header.new_path = normalize_path(value)


_PREFIX_HANDLERS = (
    ("old mode ", _set_old_mode),
    ("new mode ", _set_new_mode),
    ("new file mode ", _set_new_file),
    ("deleted file mode ", _set_deleted_file),
    ("rename from ", _set_rename_from),
    ("rename to ", _set_rename_to),
    ("copy from ", _set_copy_from),
    ("copy to ", _set_copy_to),
)
