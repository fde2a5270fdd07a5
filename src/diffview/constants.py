#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the diffview library.

This module centralizes the literal types, marker strings and default
configuration values used across diffview. Constants are organized by
category:

1. Type Definitions - All Literal types and type aliases
2. Unified Diff Syntax - Prefixes and markers of the unified diff format
3. Word-Diff Syntax - Inline insertion/deletion markers
4. Pairing Defaults - Heuristic thresholds for the line pairing engine
5. Configuration Discovery - Config file names and environment variables
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

SegmentType = Literal["normal", "insert", "delete"]
LineType = Literal["normal", "insert", "delete"]
ChangeType = Literal["normal", "insert", "delete"]
FileType = Literal["add", "delete", "modify", "rename", "copy"]
BlockKind = Literal["hunk", "skip"]
OutputFormat = Literal["json", "text"]
ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Unified Diff Syntax
# =============================================================================

DEV_NULL = "/dev/null"
GIT_DIFF_PREFIX = "diff --git "
OLD_FILE_PREFIX = "--- "
NEW_FILE_PREFIX = "+++ "
HUNK_PREFIX = "@@"
METADATA_PREFIX = "\\"
NO_NEWLINE_MARKER = "\\ No newline at end of file"

HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$")
GIT_DIFF_HEADER_RE = re.compile(r'^diff --git ("(?:[^"\\]|\\.)*"|\S+) ("(?:[^"\\]|\\.)*"|\S+)$')
INDEX_LINE_RE = re.compile(r"^index ([0-9a-fA-F]+)\.\.([0-9a-fA-F]+)(?: (\d+))?")
SIMILARITY_LINE_RE = re.compile(r"^(?:dis)?similarity index (\d+)%")

# =============================================================================
# Word-Diff Syntax
# =============================================================================

WORD_INSERT_OPEN = "{+"
WORD_INSERT_CLOSE = "+}"
WORD_DELETE_OPEN = "[-"
WORD_DELETE_CLOSE = "-]"

WORD_DIFF_TOKEN_RE = re.compile(r"\{\+(.*?)\+\}|\[-(.*?)-\]", re.DOTALL)

# =============================================================================
# Pairing Defaults
# =============================================================================

DEFAULT_MERGE_MODIFIED_LINES = True
DEFAULT_MAX_DIFF_DISTANCE = 30
DEFAULT_SIMILARITY_THRESHOLD = 0.45
DEFAULT_INLINE_MAX_CHAR_EDITS = 4

DEFAULT_WORD_DIFF_INLINE_MAX_CHAR_EDITS = 2
DEFAULT_WORD_DIFF_MAX_CHANGE_RATIO: float | None = None

# Words are runs of word characters; whitespace runs and single punctuation
# characters are tokens of their own.
WORD_TOKEN_RE = re.compile(r"\w+|\s+|[^\w\s]")

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_ENV_VAR = "DIFFVIEW_CONFIG"
CONFIG_FILENAMES = [".diffview.toml", ".diffview.yaml", ".diffview.yml", ".diffview.json"]
PYPROJECT_TOOL_SECTION = "diffview"
