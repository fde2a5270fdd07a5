#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/converters/word_diff.py
"""Conversion between unified diff and word-diff text.

:func:`to_word_diff` rebuilds the old and new text of every hunk, aligns
the two line lists and serializes the result with ``[-...-]``/``{+...+}``
markers. Every replaced line pair is word-diffed into a single line with
inline markers; pairs that share no text besides whitespace, and lines
left over on one side, stay whole-line deletions or insertions. The old
and new text of each hunk survive the conversion unchanged. Hunk headers are
recomputed from the rebuilt line counts.

:func:`from_word_diff` goes the other way for interoperability and tests.
"""

from __future__ import annotations

import difflib
import logging

from diffview.constants import (
    NO_NEWLINE_MARKER,
    WORD_DELETE_CLOSE,
    WORD_DELETE_OPEN,
    WORD_INSERT_CLOSE,
    WORD_INSERT_OPEN,
)
from diffview.engine.segments import build_inline_segments
from diffview.models import File, Hunk, Segment
from diffview.options import DiffOptions, WordDiffOptions
from diffview.parsers.unified import ParsedHunk, format_hunk_header, parse_unified
from diffview.parsers.word_diff import CONTEXT_PREFIX, classify_line, parse_word_diff_text

logger = logging.getLogger(__name__)


def wrap_deleted(text: str) -> str:
    """Wrap text in deletion markers."""
    return f"{WORD_DELETE_OPEN}{text}{WORD_DELETE_CLOSE}"


def wrap_inserted(text: str) -> str:
    """Wrap text in insertion markers."""
    return f"{WORD_INSERT_OPEN}{text}{WORD_INSERT_CLOSE}"


def serialize_segments(segments: list[Segment]) -> str:
    """Serialize inline segments using the word-diff marker convention."""
    parts = []
    for segment in segments:
        if segment.type == "delete":
            parts.append(wrap_deleted(segment.value))
        elif segment.type == "insert":
            parts.append(wrap_inserted(segment.value))
        else:
            parts.append(segment.value)
    return "".join(parts)


def _content_line(text: str) -> str:
    """Add the context prefix unless the line opens with a marker."""
    if text.startswith((WORD_DELETE_OPEN, WORD_INSERT_OPEN)):
        return text
    return CONTEXT_PREFIX + text


def _inline_line(old: str, new: str, options: DiffOptions) -> str | None:
    """Word-diff one replaced line pair, or None when it has no shared text.

    A pair whose only unchanged text is whitespace, or whose serialized form
    would read back as a pure insertion or deletion, is left to the caller.
    """
    segments = build_inline_segments(old, new, options.inline_max_char_edits)
    if not any(s.type == "normal" and s.value.strip() for s in segments):
        return None
    inline = serialize_segments(segments)
    if classify_line(inline) != "normal":
        return None
    return _content_line(inline)


def _replace_block(old_lines: list[str], new_lines: list[str], options: DiffOptions) -> list[str]:
    body: list[str] = []
    for old, new in zip(old_lines, new_lines):
        inline = _inline_line(old, new, options) if options.merge_modified_lines else None
        if inline is not None:
            body.append(inline)
            continue
        body.append(wrap_deleted(old))
        body.append(wrap_inserted(new))
    paired = min(len(old_lines), len(new_lines))
    body.extend(wrap_deleted(old) for old in old_lines[paired:])
    body.extend(wrap_inserted(new) for new in new_lines[paired:])
    return body


def hunk_to_word_diff(hunk: ParsedHunk, options: DiffOptions) -> list[str]:
    """Serialize one parsed hunk as word-diff lines, header included.

    Parameters
    ----------
    hunk : ParsedHunk
        Hunk from :func:`diffview.parsers.unified.parse_unified`
    options : DiffOptions
        Inline edit budget, and whether replaced lines are merged

    Returns
    -------
    list of str
        Header line followed by the body lines

    """
    before = [c.content for c in hunk.changes if c.type != "insert"]
    after = [c.content for c in hunk.changes if c.type != "delete"]

    body: list[str] = []
    matcher = difflib.SequenceMatcher(None, before, after, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            body.extend(CONTEXT_PREFIX + line for line in before[i1:i2])
        elif tag == "delete":
            body.extend(wrap_deleted(line) for line in before[i1:i2])
        elif tag == "insert":
            body.extend(wrap_inserted(line) for line in after[j1:j2])
        else:
            body.extend(_replace_block(before[i1:i2], after[j1:j2], options))

    header = format_hunk_header(hunk.old_start, len(before), hunk.new_start, len(after), hunk.context or "")
    return [header, *body]


def to_word_diff(patch: str, options: DiffOptions | None = None) -> str:
    """Convert a unified diff to ``git diff --word-diff=plain`` style text.

    Parameters
    ----------
    patch : str
        Unified diff text
    options : DiffOptions, optional
        ``merge_modified_lines=False`` keeps every replaced line whole;
        ``inline_max_char_edits`` controls character-level markers.
        Noisy inline lines are split again when the result is parsed with
        ``max_change_ratio``.

    Returns
    -------
    str
        Word-diff text, empty for empty input

    Raises
    ------
    HunkHeaderError
        If the patch contains an invalid hunk header

    """
    options = options or DiffOptions()
    out: list[str] = []
    for parsed in parse_unified(patch):
        out.extend(parsed.header.lines)
        for hunk in parsed.hunks:
            out.extend(hunk_to_word_diff(hunk, options))
        if parsed.hunks and not (parsed.old_ending_newline and parsed.new_ending_newline):
            out.append(NO_NEWLINE_MARKER)
    logger.debug(f"Converted patch to {len(out)} word-diff line(s)")
    return "\n".join(out) + "\n" if out else ""


def _flush(body: list[str], deleted: list[str], inserted: list[str]) -> None:
    body.extend("-" + line for line in deleted)
    body.extend("+" + line for line in inserted)
    deleted.clear()
    inserted.clear()


def hunk_to_unified(hunk: Hunk) -> list[str]:
    """Serialize a display hunk as unified diff lines, header included.

    Each run of changed lines is written as its deletions followed by its
    insertions. Modified lines contribute to both sides.
    """
    body: list[str] = []
    deleted: list[str] = []
    inserted: list[str] = []
    old_count = new_count = 0
    for line in hunk.lines:
        if line.type == "normal" and not line.is_modified:
            _flush(body, deleted, inserted)
            body.append(" " + line.text)
            old_count += 1
            new_count += 1
            continue
        if line.type != "insert":
            deleted.append(line.old_text)
            old_count += 1
        if line.type != "delete":
            inserted.append(line.new_text)
            new_count += 1
    _flush(body, deleted, inserted)
    header = format_hunk_header(hunk.old_start, old_count, hunk.new_start, new_count, hunk.context or "")
    return [header, *body]


def file_to_unified(file: File) -> list[str]:
    """Serialize a parsed word-diff file back to unified diff lines."""
    out = list(file.header_lines)
    for hunk in file.hunks:
        out.extend(hunk_to_unified(hunk))
    if file.hunks and not (file.old_ending_newline and file.new_ending_newline):
        out.append(NO_NEWLINE_MARKER)
    return out


def from_word_diff(text: str, options: WordDiffOptions | None = None) -> str:
    """Convert word-diff text back to a unified diff.

    Parameters
    ----------
    text : str
        Word-diff text
    options : WordDiffOptions, optional
        Word-diff parser configuration

    Returns
    -------
    str
        Unified diff text, empty for empty input

    Raises
    ------
    HunkHeaderError
        If the text contains an invalid hunk header

    """
    out: list[str] = []
    for file in parse_word_diff_text(text, options):
        out.extend(file_to_unified(file))
    return "\n".join(out) + "\n" if out else ""
