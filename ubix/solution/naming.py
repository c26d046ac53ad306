"""File-name sanitization for solution names.

The solution name doubles as the name of the solution directory, so it is
reduced to a string that is a safe file name on every common platform.
"""

import re

# Pre-compiled regex patterns, applied in this order
_PATTERN_ILLEGAL = re.compile(r'[/?<>\\:*|"]')
_PATTERN_CONTROL = re.compile(r"[\x00-\x1f\x80-\x9f]")
_PATTERN_RESERVED = re.compile(r"^\.+$")
_PATTERN_WINDOWS_RESERVED = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_PATTERN_WINDOWS_TRAILING = re.compile(r"[. ]+$")

MAX_FILE_NAME_BYTES = 255


def _truncate_utf8(value: str, max_bytes: int) -> str:
    encoded = value.encode("utf-8")
    if len(encoded) <= max_bytes:
        return value
    return encoded[:max_bytes].decode("utf-8", errors="ignore")


def sanitize_file_name(value: str, replacement: str = "") -> str:
    """Make ``value`` safe to use as a file or directory name.

    Steps:
    1. Replace path separators and other characters illegal in file names
    2. Replace control characters
    3. Replace names made only of dots ("." and "..")
    4. Replace Windows device names (CON, NUL, COM1, ...)
    5. Replace trailing dots and spaces
    6. Truncate to 255 bytes of UTF-8

    Args:
        value: The name to sanitize
        replacement: String substituted for every removed part

    Returns:
        The sanitized name, possibly empty
    """
    if not value:
        return ""
    result = _PATTERN_ILLEGAL.sub(replacement, value)
    result = _PATTERN_CONTROL.sub(replacement, result)
    result = _PATTERN_RESERVED.sub(replacement, result)
    result = _PATTERN_WINDOWS_RESERVED.sub(replacement, result)
    result = _PATTERN_WINDOWS_TRAILING.sub(replacement, result)
    return _truncate_utf8(result, MAX_FILE_NAME_BYTES)


__all__ = ["MAX_FILE_NAME_BYTES", "sanitize_file_name"]
