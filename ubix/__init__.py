"""UBIX - Scaffold, version, inspect and package UBIX solutions.

This package provides a Python CLI application for managing directory-based
UBIX solutions: a ``ubix.json`` manifest plus data, scripts and DSL folders.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "UBIX"
MANIFEST_FILE_NAME = "ubix.json"
DEFAULT_ARCHIVE_NAME = "ubix.zip"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "MANIFEST_FILE_NAME",
    "DEFAULT_ARCHIVE_NAME",
]
