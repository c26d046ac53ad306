"""Custom exceptions and exit codes for UBIX.

This module defines the exit codes and exception hierarchy used throughout
the application. Every failure a command can hit is one of these classes,
and the CLI layer turns it into a one-line message plus the matching exit
code.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_PARAMETER = 2
    SOLUTION_ERROR = 3  # Solution directory or manifest file resolution
    MANIFEST_ERROR = 4
    ARCHIVE_ERROR = 5
    USER_CANCELLED = 6


class UbixError(Exception):
    """Base exception for UBIX errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.

    Attributes:
        exit_code: The exit code to use when this exception causes program termination
        message: The error message
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message describing what went wrong
            exit_code: Optional override for the default exit code
        """
        super().__init__(message)
        self.message = message
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception.

        Returns:
            The instance exit code if set, otherwise the class default exit code.
        """
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class ParameterError(UbixError):
    """A user-supplied value failed validation."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.INVALID_PARAMETER


class InvalidFormatError(ParameterError):
    """Value does not match the required pattern."""


class InvalidIntError(ParameterError):
    """Value could not be parsed as an integer."""


class InvalidIncrementError(ParameterError):
    """A version increment would drive a version component below zero.

    Attributes:
        component: The version component the increment was applied to
        increment: The offending increment
    """

    def __init__(self, component: str, increment: int) -> None:
        self.component = component
        self.increment = increment
        super().__init__(f"Invalid {component} version increment: {increment}")


class ParameterErrors(ParameterError):
    """Several values failed validation at once.

    Raised after a batch of values has been checked so that all problems
    are reported together.

    Attributes:
        errors: Individual error messages, in the order they were found
    """

    def __init__(self, errors: list[str], heading: str = "Errors") -> None:
        self.errors = list(errors)
        super().__init__(f"{heading}:\n  * " + "\n  * ".join(self.errors))


class SolutionError(UbixError):
    """A solution directory or manifest file could not be resolved.

    Attributes:
        path: The path that failed to resolve (optional)
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.SOLUTION_ERROR

    def __init__(
        self,
        message: str,
        path: object | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.path = path
        super().__init__(message, exit_code)


class SolutionExistsError(SolutionError):
    """The target of ``init`` already exists."""


class SolutionNotFoundError(SolutionError):
    """A solution directory or manifest file does not exist."""


class WrongTypeError(SolutionError):
    """A path exists but is not the expected kind (file vs. directory)."""


class SolutionIOError(SolutionError):
    """Any other operating system error while touching the solution."""


class ManifestParseError(UbixError):
    """The manifest file is not a valid JSON object."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.MANIFEST_ERROR


class ConfigError(UbixError):
    """A configuration file could not be read."""


class ArchiveError(UbixError):
    """Building the solution package failed."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.ARCHIVE_ERROR


class UserCancelledError(UbixError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - User aborts an interactive prompt
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
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
    "ConfigError",
    "ArchiveError",
    "UserCancelledError",
]
