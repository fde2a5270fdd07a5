#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the diffview library.

This module defines specialized exception classes for the error conditions
that can occur while parsing patches and converting between diff formats.

Exception Hierarchy
-------------------
- DiffViewError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigError (unreadable or invalid configuration files)

  - ParsingError (input patch parsing failures)
    - HunkHeaderError (structurally invalid ``@@`` hunk header)

"""

from typing import Any


class DiffViewError(Exception):
    """Base exception class for all diffview-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DiffViewError, ValueError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The underlying decode or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class ParsingError(DiffViewError):
    """Exception raised when patch parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class HunkHeaderError(ParsingError):
    """Exception raised for a hunk header whose line ranges cannot be parsed.

    Line-number arithmetic for every following line depends on the header,
    so this is always a hard failure.

    Parameters
    ----------
    header : str
        The offending header line
    line_number : int, optional
        1-based position of the header within the input text

    """

    def __init__(self, header: str, line_number: int | None = None):
        """Initialize the hunk header error."""
        location = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid hunk header{location}: {header!r}", parsing_stage="hunk-header")
        self.header = header
        self.line_number = line_number

