#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffview/renderers/json.py
"""JSON renderer for structured output.

This renderer serializes the display model produced by
:func:`diffview.parse_diff` or :func:`diffview.parse_word_diff` for
programmatic processing.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from diffview.api import diff_stats
from diffview.models import File


class JsonDiffRenderer:
    """Render parsed diff files as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)
    include_stats : bool, default = True
        If True, add a ``statistics`` object with line counts

    Examples
    --------
    Render a patch as JSON:
        >>> from diffview import parse_diff
        >>> from diffview.renderers import JsonDiffRenderer
        >>> json_output = JsonDiffRenderer().render(parse_diff(patch))

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
        include_stats: bool = True,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent
        self.include_stats = include_stats

    def to_data(self, files: Iterable[File]) -> dict[str, Any]:
        """Build the JSON-safe dictionary for a list of files."""
        files = list(files)
        data: dict[str, Any] = {"files": [f.to_dict() for f in files]}
        if self.include_stats:
            data["statistics"] = diff_stats(files).to_dict()
        return data

    def render(self, files: Iterable[File]) -> str:
        """Render parsed files to a JSON string.

        Parameters
        ----------
        files : iterable of File
            Parsed diff files

        Returns
        -------
        str
            JSON-formatted output

        """
        data = self.to_data(files)
        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        else:
            return json.dumps(data, ensure_ascii=False)
