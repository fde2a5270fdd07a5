#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Print line statistics for a patch."""

import argparse
import json
import sys

from diffview.api import diff_stats, parse_diff, parse_word_diff
from diffview.cli.builder import EXIT_SUCCESS, add_common_arguments, add_options_arguments, get_exit_code_for_exception
from diffview.cli.commands.shared import read_input, resolve_options, setup_logging, write_output
from diffview.exceptions import DiffViewError
from diffview.options import DiffOptions


def _create_stats_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diffview stats",
        description="Count added, deleted, modified and context lines of a patch",
    )
    parser.add_argument("--word-diff", action="store_true", help="Input is git --word-diff=plain output")
    parser.add_argument("--json", action="store_true", help="Print statistics as JSON")
    add_options_arguments(parser, DiffOptions, "pairing options")
    add_common_arguments(parser)
    return parser


def handle_stats_command(args: list[str] | None = None) -> int:
    """Handle the stats command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'stats')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_stats_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    setup_logging(parsed)
    try:
        diff_options, word_options = resolve_options(parsed)
        text = read_input(parsed.input)
        files = parse_word_diff(text, word_options) if parsed.word_diff else parse_diff(text, diff_options)
    except (DiffViewError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    stats = diff_stats(files)
    if parsed.json:
        write_output([json.dumps(stats.to_dict(), indent=2)], parsed.output)
    else:
        write_output([f"{name}: {value}" for name, value in stats.to_dict().items()], parsed.output)
    return EXIT_SUCCESS
