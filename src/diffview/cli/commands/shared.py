#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared utilities for diffview CLI commands.

This module provides the pieces every command needs: reading the input
patch from a file or stdin, writing output, configuring logging and merging
configuration-file options with command line flags.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional

from diffview.cli.builder import collect_overrides
from diffview.cli.config import discover_config_file, load_config_file, options_from_config
from diffview.constants import CONFIG_ENV_VAR
from diffview.logging_utils import configure_logging
from diffview.options import DiffOptions, WordDiffOptions

logger = logging.getLogger(__name__)


def setup_logging(parsed: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    ``--trace`` takes precedence over ``--verbose``, which takes precedence
    over ``--log-level``.
    """
    if parsed.trace:
        log_level = logging.DEBUG
    elif parsed.verbose and parsed.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed.log_level.upper())

    configure_logging(log_level, log_file=parsed.log_file, trace_mode=parsed.trace)


def read_input(source: str) -> str:
    """Read patch text from a file path or from stdin when ``source`` is ``-``.

    Raises
    ------
    OSError
        If the file cannot be read

    """
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def write_output(lines: Iterable[str], output: Optional[str]) -> None:
    """Write output lines to a file or to stdout."""
    text = "\n".join(lines)
    if output:
        output_path = Path(output)
        output_path.write_text(text + "\n" if text else "", encoding="utf-8")
        print(f"Output written to: {output_path}", file=sys.stderr)
    elif text:
        print(text)


def use_color(parsed: argparse.Namespace) -> bool:
    """Decide whether text output should carry ANSI colors."""
    if parsed.color == "always":
        return True
    if parsed.color == "auto" and not parsed.output:
        return sys.stdout.isatty()
    return False


def resolve_config_path(parsed: argparse.Namespace) -> Optional[Path]:
    """Pick the configuration file: ``--config``, then the environment, then discovery."""
    if parsed.no_config:
        return None
    if parsed.config:
        return Path(parsed.config)
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return discover_config_file()


def resolve_options(parsed: argparse.Namespace) -> tuple[DiffOptions, WordDiffOptions]:
    """Load configured options and apply command line overrides.

    Raises
    ------
    ConfigError
        If the configuration file is invalid
    ValidationError
        If a command line value is out of range

    """
    config_path = resolve_config_path(parsed)
    if config_path is not None:
        logger.debug(f"Loading configuration from {config_path}")
        diff_options, word_options = options_from_config(load_config_file(config_path))
    else:
        diff_options, word_options = DiffOptions(), WordDiffOptions()

    diff_options = diff_options.create_updated(**collect_overrides(parsed, DiffOptions))
    word_options = word_options.create_updated(**collect_overrides(parsed, WordDiffOptions))
    return diff_options, word_options
