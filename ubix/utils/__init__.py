"""Utility modules for UBIX.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from ubix.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_plain,
    print_step,
    print_success,
    print_warning,
    show_version,
)
from ubix.utils.errors import (
    ArchiveError,
    ConfigError,
    ExitCode,
    InvalidFormatError,
    InvalidIncrementError,
    InvalidIntError,
    ManifestParseError,
    ParameterError,
    ParameterErrors,
    SolutionError,
    SolutionExistsError,
    SolutionIOError,
    SolutionNotFoundError,
    UbixError,
    UserCancelledError,
    WrongTypeError,
)
from ubix.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_plain",
    "show_version",
    # Errors
    "ExitCode",
    "UbixError",
    "ParameterError",
    "InvalidFormatError",
    "InvalidIntError",
    "InvalidIncrementError",
    "ParameterErrors",
    "SolutionError",
    "SolutionExistsError",
    "SolutionNotFoundError",
    "WrongTypeError",
    "SolutionIOError",
    "ManifestParseError",
    "ArchiveError",
    "ConfigError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]
