#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Centralized logging utilities for diffview entry points.

The parsers log progress and degraded input at DEBUG level, while the
engine logs a DEBUG record for every pairing decision of every hunk. The
latter only help when tracing a single hunk, so ``--verbose`` keeps them
out and ``--trace`` lets them through.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Loggers that emit per-line records and stay at INFO unless tracing
TRACE_ONLY_LOGGERS = ("diffview.engine",)


def _quiet_trace_only_loggers(resolved_level: int, trace_mode: bool) -> None:
    for name in TRACE_ONLY_LOGGERS:
        noisy = logging.getLogger(name)
        if trace_mode or resolved_level > logging.DEBUG:
            noisy.setLevel(logging.NOTSET)
        else:
            noisy.setLevel(logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the command line.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG")
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Add timestamps and logger names, and keep per-line pairing records
        of ``diffview.engine`` that are otherwise held back at DEBUG level

    Returns
    -------
    logging.Logger
        The configured root logger

    """
    if isinstance(log_level, int):
        resolved_level = log_level
    else:
        resolved_level = getattr(logging, str(log_level).upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()
    _quiet_trace_only_loggers(resolved_level, trace_mode)

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%H:%M:%S")
    else:
        formatter = logging.Formatter("diffview: %(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning(f"Could not open log file {log_file}: {exc}")
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    return root_logger
