#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/diffview/cli/commands/__init__.py
"""CLI command handlers for diffview.

Every subcommand lives in its own module and exposes a
``handle_<name>_command(args) -> int`` function.
"""

import logging
import sys

# Note: Command handlers are imported lazily in dispatch_command so that
# --help does not load the parsing engine

logger = logging.getLogger(__name__)

COMMANDS = {
    "parse": "Parse a unified diff into display lines",
    "parse-word": "Parse git --word-diff=plain output into display lines",
    "to-word-diff": "Convert a unified diff to word-diff text",
    "from-word-diff": "Convert word-diff text to a unified diff",
    "stats": "Count added, deleted, modified and context lines",
}


def dispatch_command(args: list[str] | None = None) -> int | None:
    """Run the subcommand named by the first argument.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments

    Returns
    -------
    int or None
        Exit code if a command was handled, None otherwise

    """
    if args is None:
        args = sys.argv[1:]

    if not args:
        return None

    if args[0] == "parse":
        from diffview.cli.commands.parse import handle_parse_command

        return handle_parse_command(args[1:])

    if args[0] == "parse-word":
        from diffview.cli.commands.parse import handle_parse_word_command

        return handle_parse_word_command(args[1:])

    if args[0] == "to-word-diff":
        from diffview.cli.commands.convert import handle_to_word_diff_command

        return handle_to_word_diff_command(args[1:])

    if args[0] == "from-word-diff":
        from diffview.cli.commands.convert import handle_from_word_diff_command

        return handle_from_word_diff_command(args[1:])

    if args[0] == "stats":
        from diffview.cli.commands.stats import handle_stats_command

        return handle_stats_command(args[1:])

    return None
