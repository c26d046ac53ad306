"""Semantic version arithmetic for solution manifests.

A version is three non-negative integers, ``major.minor.patch``. A new
version is either given explicitly or derived from the current one by
adding per-component increments.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ubix.solution.validation import VERSION_PATTERN, matches, validated_param
from ubix.utils.errors import (
    InvalidFormatError,
    InvalidIncrementError,
    ParameterErrors,
)
from ubix.utils.logging import log_message

# Patch increment used when neither an explicit version nor any
# increment is supplied.
DEFAULT_PATCH_INCREMENT = 1


@dataclass(frozen=True)
class SemanticVersion:
    """A ``major.minor.patch`` version with non-negative components."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, value: str) -> "SemanticVersion":
        """Parse a version string.

        Raises:
            InvalidFormatError: If ``value`` is not three dot-separated integers
        """
        if not isinstance(value, str) or not matches(VERSION_PATTERN, value):
            raise InvalidFormatError(f"invalid value for version: {value}")
        major, minor, patch = (int(part) for part in value.split("."))
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def compute_new_version(
    current: str,
    explicit: str | None = None,
    major: int | None = None,
    minor: int | None = None,
    patch: int | None = None,
) -> str:
    """Compute the version that follows ``current``.

    An explicit version wins over any increments and is returned as given.
    Otherwise each increment is added to its component; missing increments
    count as 0, except that a call with no increments at all bumps the
    patch component by 1.
    Increments may be negative as long as no component drops below zero.

    Args:
        current: The current version string
        explicit: Version to use as-is
        major: Increment for the major component
        minor: Increment for the minor component
        patch: Increment for the patch component

    Returns:
        The new version string

    Raises:
        InvalidFormatError: If ``explicit`` or ``current`` is not a valid version
        InvalidIncrementError: If one increment drives its component negative
        ParameterErrors: If several increments drive their components negative
    """
    if explicit is not None:
        SemanticVersion.parse(explicit)
        return explicit

    base = SemanticVersion.parse(current)
    if major is None and minor is None and patch is None:
        patch = DEFAULT_PATCH_INCREMENT

    increments = {"major": major or 0, "minor": minor or 0, "patch": patch or 0}
    components = {
        "major": base.major + increments["major"],
        "minor": base.minor + increments["minor"],
        "patch": base.patch + increments["patch"],
    }

    failures = [
        InvalidIncrementError(name, increments[name])
        for name, value in components.items()
        if value < 0
    ]
    if len(failures) == 1:
        raise failures[0]
    if failures:
        raise ParameterErrors([str(failure) for failure in failures])

    new_version = SemanticVersion(**components)
    log_message(f"Computed version {new_version} from {base} (increments: {increments})")
    return str(new_version)


def resolve_new_version(current: str, params: Mapping[str, Any]) -> str:
    """Validate raw version options and compute the new version.

    ``params`` holds the raw option strings ``version``, ``major``,
    ``minor`` and ``patch``. Every problem, from malformed options to
    increments that would go negative, is collected before failing.

    Raises:
        ParameterErrors: If any option is invalid or any increment is rejected
    """
    errors: list[str] = []
    explicit = validated_param(params, "version", pattern=VERSION_PATTERN, errors=errors)
    major = validated_param(params, "major", is_int=True, errors=errors)
    minor = validated_param(params, "minor", is_int=True, errors=errors)
    patch = validated_param(params, "patch", is_int=True, errors=errors)

    if errors:
        raise ParameterErrors(errors)

    try:
        return compute_new_version(current, explicit, major, minor, patch)
    except (InvalidFormatError, InvalidIncrementError) as e:
        raise ParameterErrors([str(e)]) from e


__all__ = [
    "DEFAULT_PATCH_INCREMENT",
    "SemanticVersion",
    "compute_new_version",
    "resolve_new_version",
]
