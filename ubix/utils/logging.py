"""Logging for UBIX.

Nothing is logged unless ``UBIX_LOG=true``; a plain run writes only its own
output. When enabled, every line goes to a single file, and each command
ends with a summary record naming its outcome and how long it took:

    [2026-10-19 10:00:00] COMMAND: version | EXIT_CODE: 2 (INVALID_PARAMETER) | 0.012s

Environment Variables:
    UBIX_LOG: Set to "true" to enable logging (default: "false")
    UBIX_LOG_FILE: Path to log file (default: ~/.ubix.log)
"""

import logging
import os
from pathlib import Path

from ubix.utils.errors import ExitCode

LOGGER_NAME = "ubix"
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_ENABLED = os.environ.get("UBIX_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("UBIX_LOG_FILE", str(Path.home() / ".ubix.log")))

_logger: logging.Logger | None = None


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logging() -> logging.Logger:
    """Configure the ``ubix`` logger once per process.

    Returns:
        The configured logger; it only has a NullHandler when logging is off
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    if LOG_ENABLED:
        logger.addHandler(_file_handler(LOG_FILE))
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Return the ``ubix`` logger, configuring it on first use."""
    return _logger or setup_logging()


def log_message(message: str) -> None:
    """Record one line in the log."""
    get_logger().info(message)


def describe_exit_code(exit_code: int) -> str:
    """Render an exit code with its name when it is a known one, e.g. ``3 (SOLUTION_ERROR)``."""
    try:
        return f"{int(exit_code)} ({ExitCode(exit_code).name})"
    except ValueError:
        return str(int(exit_code))


def log_command(command: str, exit_code: int = ExitCode.SUCCESS, elapsed: float | None = None) -> None:
    """Record how a CLI command finished.

    Args:
        command: Name of the command (e.g., "init")
        exit_code: Exit code the process ends with
        elapsed: Run time of the command in seconds, if measured
    """
    parts = [f"COMMAND: {command}", f"EXIT_CODE: {describe_exit_code(exit_code)}"]
    if elapsed is not None:
        parts.append(f"{elapsed:.3f}s")
    get_logger().info(" | ".join(parts))


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "LOGGER_NAME",
    "setup_logging",
    "get_logger",
    "log_message",
    "describe_exit_code",
    "log_command",
]
