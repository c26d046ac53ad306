"""Per-command option sets.

Each command builds exactly one of these from its CLI arguments and hands
it to the command implementation. ``None`` means "not given on the
command line"; the implementation decides the fallback.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InitOptions:
    """Options of ``ubix init``.

    Attributes:
        solution_name: Name of the new solution
        path: Directory in which the solution folder is created (default: cwd)
        author: Author of the solution
        version: Initial solution version
        api: UBIX API version
        assume_defaults: Accept defaults instead of prompting
    """

    solution_name: str
    path: str | None = None
    author: str | None = None
    version: str | None = None
    api: str | None = None
    assume_defaults: bool = False


@dataclass(frozen=True)
class VersionOptions:
    """Options of ``ubix version``.

    The increments are raw strings; they are validated as integers
    together with the explicit version before anything is computed.
    """

    action: str | None = None
    solution: str | None = None
    version: str | None = None
    major: str | None = None
    minor: str | None = None
    patch: str | None = None


@dataclass(frozen=True)
class InfoOptions:
    """Options of ``ubix info``."""

    solution: str | None = None


@dataclass(frozen=True)
class PackageOptions:
    """Options of ``ubix package``.

    Attributes:
        path: Solution directory (default: cwd)
        file: Output archive (default: the configured archive name inside
            the solution directory)
    """

    path: str | None = None
    file: str | None = None
