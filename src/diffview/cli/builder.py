#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Argument parser construction and exit codes for the diffview CLI."""

import argparse
from dataclasses import MISSING, fields
from typing import Any

from diffview.exceptions import ParsingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add input, output, config and logging arguments shared by all commands."""
    parser.add_argument("input", nargs="?", default="-", help="Input file (default: '-' for stdin)")
    parser.add_argument("--output", "-o", help="Write output to file (default: stdout)")
    parser.add_argument("--config", help="Path to configuration file (overrides discovery and DIFFVIEW_CONFIG)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    logging_group.add_argument("--log-file", help="Also write log output to this file")


def add_display_arguments(parser: argparse.ArgumentParser) -> None:
    """Add ``--format`` and ``--color`` for commands that render the display model."""
    parser.add_argument(
        "--format",
        "-f",
        choices=["json", "text"],
        default="text",
        help="Output format: text (default, line-numbered) or json (structured)",
    )
    parser.add_argument(
        "--color",
        dest="color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize text output: auto (default, if terminal), always, never",
    )


def add_options_arguments(parser: argparse.ArgumentParser, options_class: type, title: str) -> None:
    """Add one flag per field of an options dataclass.

    Flags are built from the ``help``, ``type`` and ``cli_name`` field
    metadata. Boolean fields that default to True become ``--no-...`` flags.
    Every flag defaults to None so that unset flags do not override values
    from configuration files.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to extend
    options_class : type
        Options dataclass
    title : str
        Title of the argument group

    """
    group = parser.add_argument_group(title)
    for field in fields(options_class):
        metadata = field.metadata
        if "help" not in metadata:
            continue
        default = field.default if field.default is not MISSING else None
        if field.type in (bool, "bool"):
            flag = metadata.get("cli_name") or ("no-" if default else "") + field.name.replace("_", "-")
            group.add_argument(
                f"--{flag}",
                dest=field.name,
                action="store_const",
                const=not default,
                default=None,
                help=metadata["help"],
            )
            continue
        flag = metadata.get("cli_name") or field.name.replace("_", "-")
        group.add_argument(
            f"--{flag}",
            dest=field.name,
            type=metadata.get("type", str),
            default=None,
            help=f"{metadata['help']} (default: {default})",
        )


def collect_overrides(parsed: argparse.Namespace, options_class: type) -> dict[str, Any]:
    """Collect the option values given explicitly on the command line."""
    overrides = {}
    for field in fields(options_class):
        value = getattr(parsed, field.name, None)
        if value is not None:
            overrides[field.name] = value
    return overrides
