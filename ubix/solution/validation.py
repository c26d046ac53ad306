"""Validation of raw user-supplied values.

A value arrives as a raw option (possibly missing) and leaves as a typed
value, ``None`` ("not given, use the default"), or an error. Callers pick
the error policy: pass an ``errors`` list to collect messages for a batch,
or leave it out to have the first problem raised immediately.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

from ubix.utils.errors import InvalidFormatError, InvalidIntError, ParameterError
from ubix.utils.logging import log_message

# Patterns are matched against the whole value. ASCII keeps \w and \d to
# the characters that are safe in file names and version strings.
NAME_PATTERN = re.compile(r"[\w\- ]+", re.ASCII)
VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+", re.ASCII)
API_PATTERN = re.compile(r"latest|\d+\.\d+\.\d+", re.ASCII)
_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def default_error_message(param: str, value: str) -> str:
    """Build the standard message for a rejected value."""
    return f"invalid value for {param}: {value}"


def matches(pattern: re.Pattern[str], value: str) -> bool:
    """Return True if ``value`` matches ``pattern`` in its entirety."""
    return pattern.fullmatch(value) is not None


def validated_param(
    params: Mapping[str, Any],
    param: str,
    *,
    pattern: re.Pattern[str] | None = None,
    is_int: bool = False,
    error_message: str | None = None,
    errors: list[str] | None = None,
) -> str | int | None:
    """Validate ``params[param]`` against the given constraints.

    Args:
        params: Mapping of raw option values
        param: Name of the value to validate
        pattern: Pattern the whole value must match
        is_int: Parse the value as an integer
        error_message: Message to use instead of the default one
        errors: When given, failures are appended here and None is returned

    Returns:
        The value (an int when ``is_int`` is set), or None when the value
        is missing, empty, not a string, or rejected into ``errors``.

    Raises:
        InvalidFormatError: If the value does not match ``pattern`` and
            no ``errors`` list was given
        InvalidIntError: If the value is not an integer and no ``errors``
            list was given
    """
    value = params.get(param)
    if not value or not isinstance(value, str):
        return None

    error: ParameterError | None = None
    result: str | int | None = value

    if pattern is not None and not matches(pattern, value):
        error = InvalidFormatError(error_message or default_error_message(param, value))
    elif is_int:
        stripped = value.strip()
        if _INT_PATTERN.fullmatch(stripped):
            result = int(stripped)
        else:
            error = InvalidIntError(error_message or default_error_message(param, value))

    if error is None:
        return result

    log_message(f"Validation failed: {error}")
    if errors is None:
        raise error
    errors.append(str(error))
    return None


def questionary_validator(
    pattern: re.Pattern[str] | None,
    message: str,
    *,
    required: bool = False,
) -> Callable[[str], bool | str]:
    """Build a prompt validator for the same rules used on options.

    The returned callable follows the questionary convention: True when the
    answer is acceptable, otherwise the message to show.
    """

    def _validate(answer: str) -> bool | str:
        if not answer:
            return "A value is required" if required else True
        if pattern is not None and not matches(pattern, answer):
            return message
        return True

    return _validate


__all__ = [
    "NAME_PATTERN",
    "VERSION_PATTERN",
    "API_PATTERN",
    "default_error_message",
    "matches",
    "validated_param",
    "questionary_validator",
]
