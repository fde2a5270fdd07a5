#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/renderers/__init__.py
"""Renderers for the parsed diff display model.

Available Renderers
-------------------
- JsonDiffRenderer: Structured JSON output for programmatic access
- TerminalDiffRenderer: Line-numbered, optionally colorized terminal output

Examples
--------
Render with colors for terminal:
    >>> from diffview import parse_diff
    >>> from diffview.renderers import TerminalDiffRenderer
    >>> for line in TerminalDiffRenderer(use_color=True).render(parse_diff(patch)):
    ...     print(line)

"""

from diffview.renderers.json import JsonDiffRenderer
from diffview.renderers.terminal import TerminalDiffRenderer

__all__ = [
    "JsonDiffRenderer",
    "TerminalDiffRenderer",
]
