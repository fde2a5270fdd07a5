#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Commands converting between unified diff and word-diff text."""

import argparse
import sys

from diffview.api import from_word_diff, to_word_diff
from diffview.cli.builder import EXIT_SUCCESS, add_common_arguments, add_options_arguments, get_exit_code_for_exception
from diffview.cli.commands.shared import read_input, resolve_options, setup_logging, write_output
from diffview.exceptions import DiffViewError
from diffview.options import DiffOptions, WordDiffOptions


def _create_convert_parser(to_word: bool) -> argparse.ArgumentParser:
    if to_word:
        parser = argparse.ArgumentParser(
            prog="diffview to-word-diff",
            description="Convert a unified diff to git --word-diff=plain style text",
        )
        add_options_arguments(parser, DiffOptions, "pairing options")
    else:
        parser = argparse.ArgumentParser(
            prog="diffview from-word-diff",
            description="Convert git --word-diff=plain output back to a unified diff",
        )
        add_options_arguments(parser, WordDiffOptions, "word-diff options")
    add_common_arguments(parser)
    return parser


def _run_convert(args: list[str] | None, to_word: bool) -> int:
    parser = _create_convert_parser(to_word)
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    setup_logging(parsed)
    try:
        diff_options, word_options = resolve_options(parsed)
        text = read_input(parsed.input)
        result = to_word_diff(text, diff_options) if to_word else from_word_diff(text, word_options)
    except (DiffViewError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    write_output([result.rstrip("\n")] if result else [], parsed.output)
    return EXIT_SUCCESS


def handle_to_word_diff_command(args: list[str] | None = None) -> int:
    """Handle the to-word-diff command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'to-word-diff')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    return _run_convert(args, to_word=True)


def handle_from_word_diff_command(args: list[str] | None = None) -> int:
    """Handle the from-word-diff command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'from-word-diff')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    return _run_convert(args, to_word=False)
