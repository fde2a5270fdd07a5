#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/diffview/cli/__init__.py
"""Command line interface for diffview.

Usage::

    diffview parse patch.diff
    git diff | diffview parse --format json
    git diff --word-diff=plain | diffview parse-word --max-change-ratio 0.7
    diffview to-word-diff patch.diff -o patch.wdiff
    diffview stats patch.diff
"""

import sys

from diffview import __version__
from diffview.cli.builder import EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from diffview.cli.commands import COMMANDS, dispatch_command


def get_usage() -> str:
    """Build the top-level usage text."""
    width = max(len(name) for name in COMMANDS)
    lines = ["usage: diffview <command> [options] [input]", "", "commands:"]
    lines.extend(f"  {name:<{width}}  {summary}" for name, summary in COMMANDS.items())
    lines.extend(["", "Run 'diffview <command> --help' for command options."])
    return "\n".join(lines)


def main(args: list[str] | None = None) -> int:
    """Execute the diffview command line.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    if args is None:
        args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help", "help"):
        print(get_usage())
        return EXIT_SUCCESS

    if args[0] == "--version":
        print(f"diffview {__version__}")
        return EXIT_SUCCESS

    result = dispatch_command(args)
    if result is not None:
        return result

    print(f"Error: unknown command '{args[0]}'", file=sys.stderr)
    print(get_usage(), file=sys.stderr)
    return EXIT_VALIDATION_ERROR
