#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Commands rendering the display model of a patch.

``diffview parse`` reads a unified diff and ``diffview parse-word`` reads
``git diff --word-diff=plain`` output. Both print the paired, skip-blocked
display model either as line-numbered text or as JSON.
"""

import argparse
import logging
import sys

from diffview.api import parse_diff, parse_word_diff
from diffview.cli.builder import (
    EXIT_SUCCESS,
    add_common_arguments,
    add_display_arguments,
    add_options_arguments,
    get_exit_code_for_exception,
)
from diffview.cli.commands.shared import read_input, resolve_options, setup_logging, use_color, write_output
from diffview.exceptions import DiffViewError
from diffview.options import DiffOptions, WordDiffOptions
from diffview.renderers import JsonDiffRenderer, TerminalDiffRenderer

logger = logging.getLogger(__name__)


def _create_parse_parser(word_diff: bool) -> argparse.ArgumentParser:
    if word_diff:
        parser = argparse.ArgumentParser(
            prog="diffview parse-word",
            description="Parse git --word-diff=plain output into paired, line-numbered display lines",
        )
        add_options_arguments(parser, WordDiffOptions, "word-diff options")
    else:
        parser = argparse.ArgumentParser(
            prog="diffview parse",
            description="Parse a unified diff into paired, line-numbered display lines",
        )
        add_options_arguments(parser, DiffOptions, "pairing options")
    add_display_arguments(parser)
    add_common_arguments(parser)
    return parser


def _run_parse(args: list[str] | None, word_diff: bool) -> int:
    parser = _create_parse_parser(word_diff)
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    setup_logging(parsed)
    try:
        diff_options, word_options = resolve_options(parsed)
        text = read_input(parsed.input)
        if word_diff:
            files = parse_word_diff(text, word_options)
        else:
            files = parse_diff(text, diff_options)

        if parsed.format == "json":
            write_output([JsonDiffRenderer().render(files)], parsed.output)
        else:
            renderer = TerminalDiffRenderer(use_color=use_color(parsed))
            write_output(renderer.render(files), parsed.output)
    except (DiffViewError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


def handle_parse_command(args: list[str] | None = None) -> int:
    """Handle the parse command for unified diffs.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'parse')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    return _run_parse(args, word_diff=False)


def handle_parse_word_command(args: list[str] | None = None) -> int:
    """Handle the parse-word command for word-diff text.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'parse-word')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    return _run_parse(args, word_diff=True)
