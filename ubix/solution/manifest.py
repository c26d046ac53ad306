"""Solution manifest model and storage.

The manifest (``ubix.json``) is a JSON object describing a solution:

    {
        "name": "Churn Model",
        "author": "Data Team",
        "version": "0.0.0",
        "api": "latest",
        "path": "home/me/solutions/Churn Model",
        "fileName": "Churn Model",
        "lastUpdate": "Mon Oct 19 2026 10:00:00 GMT+0000 (UTC)"
    }

Keys added by hand are kept, and the key order of an existing file is
preserved whenever the manifest is rewritten.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from ubix import MANIFEST_FILE_NAME
from ubix.solution.naming import sanitize_file_name
from ubix.utils.errors import (
    ManifestParseError,
    SolutionIOError,
    SolutionNotFoundError,
    WrongTypeError,
)
from ubix.utils.logging import log_message

# Manifest JSON key to Manifest attribute, in canonical order
_FIELD_MAPPING: dict[str, str] = {
    "name": "name",
    "author": "author",
    "version": "version",
    "api": "api",
    "path": "path",
    "fileName": "file_name",
    "lastUpdate": "last_update",
}

JSON_INDENT = 4
NEW_FILE_MODE = 0o644


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a timestamp the way ``lastUpdate`` records it.

    Example: ``Mon Oct 19 2026 10:00:00 GMT+0200 (CEST)``
    """
    moment = (moment or datetime.now()).astimezone()
    return f"{moment.strftime('%a %b %d %Y %H:%M:%S')} GMT{moment.strftime('%z')} ({moment.tzname()})"


def root_relative_path(directory: Path) -> str:
    """Return the absolute path of ``directory`` without its root anchor."""
    resolved = directory.resolve()
    return resolved.relative_to(resolved.anchor).as_posix()


@dataclass
class SolutionFields:
    """Values collected from the user when a solution is created."""

    name: str
    author: str = ""
    version: str = "0.0.0"
    api: str = "latest"


@dataclass
class Manifest:
    """In-memory form of ``ubix.json``.

    Attributes:
        name: Solution name
        author: Free-form author
        version: Semantic version of the solution
        api: UBIX API version ("latest" or a semantic version)
        path: Solution directory, relative to the filesystem root
        file_name: Sanitized name used as the directory name
        last_update: Human-readable time of the last change
        extra: Keys not known to this tool, kept verbatim
    """

    name: str | None = None
    author: str | None = None
    version: str | None = None
    api: str | None = None
    path: str | None = None
    file_name: str | None = None
    last_update: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    _key_order: list[str] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Manifest:
        """Build a manifest from parsed JSON, remembering the key order."""
        manifest = cls(_key_order=list(data.keys()))
        for key, value in data.items():
            attr = _FIELD_MAPPING.get(key)
            if attr is None:
                manifest.extra[key] = value
            else:
                setattr(manifest, attr, value)
        return manifest

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict.

        Keys appear in the order they were loaded; known fields that were
        not in the original document follow in canonical order (unset ones
        are left out), then any extra keys added since loading.
        """
        known = {key: getattr(self, attr) for key, attr in _FIELD_MAPPING.items()}
        result: dict[str, Any] = {}
        for key in self._key_order:
            if key in known:
                result[key] = known[key]
            elif key in self.extra:
                result[key] = self.extra[key]
        for key, value in known.items():
            if key not in result and value is not None:
                result[key] = value
        for key, value in self.extra.items():
            result.setdefault(key, value)
        return result

    def to_json(self) -> str:
        """Serialize with stable, human-readable formatting."""
        return json.dumps(self.to_dict(), indent=JSON_INDENT, ensure_ascii=False) + "\n"

    def touch(self, moment: datetime | None = None) -> None:
        """Refresh ``last_update``."""
        self.last_update = format_timestamp(moment)


class ManifestStore:
    """Locates, reads and writes solution manifests.

    Attributes:
        file_name: Name of the manifest file inside a solution directory
    """

    def __init__(self, file_name: str = MANIFEST_FILE_NAME) -> None:
        self.file_name = file_name

    def default_path(self, directory: str | Path | None = None) -> Path:
        """Return the manifest path inside ``directory`` (default: cwd)."""
        return Path(directory or ".") / self.file_name

    def locate(self, path: str | Path | None = None) -> Path:
        """Resolve the manifest file to use.

        Args:
            path: Explicit manifest path; defaults to ./ubix.json

        Returns:
            Path to an existing regular file

        Raises:
            SolutionNotFoundError: If nothing exists at the path
            WrongTypeError: If the path exists but is not a regular file
            SolutionIOError: If the path cannot be inspected
        """
        target = Path(path) if path else self.default_path()
        try:
            mode = target.stat().st_mode
        except FileNotFoundError:
            raise SolutionNotFoundError(f"Cannot find solution file at {target}", path=target) from None
        except OSError as e:
            raise SolutionIOError(f"Error with solution file at {target}: {e}", path=target) from e

        if not stat.S_ISREG(mode):
            raise WrongTypeError(f"Solution file {target} is wrong type.", path=target)
        log_message(f"Using solution file {target}")
        return target

    def load(self, path: str | Path) -> Manifest:
        """Read and parse a manifest file.

        Raises:
            SolutionIOError: If the file cannot be read
            ManifestParseError: If the content is not a JSON object
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise SolutionIOError(f"Error reading solution file: {path}: {e}", path=path) from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ManifestParseError(f"Invalid solution manifest file: {path}: {e}") from e

        if not isinstance(data, dict):
            raise ManifestParseError(
                f"Invalid solution manifest file: {path}: expected a JSON object, "
                f"got {type(data).__name__}"
            )
        log_message(f"Loaded manifest {path} ({len(data)} keys)")
        return Manifest.from_dict(data)

    def save(self, path: str | Path, manifest: Manifest) -> None:
        """Write a manifest, replacing the file atomically.

        The content goes to a temporary file in the same directory which is
        then renamed over the target, so readers see either the old or the
        new manifest. Permissions of an existing file are kept.

        Raises:
            SolutionIOError: If the file cannot be written
        """
        path = Path(path)
        content = manifest.to_json()

        try:
            mode = stat.S_IMODE(path.stat().st_mode)
        except FileNotFoundError:
            mode = NEW_FILE_MODE
        except OSError as e:
            raise SolutionIOError(f"Error with solution file at {path}: {e}", path=path) from e

        try:
            fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".ubix-", suffix=".json")
        except OSError as e:
            raise SolutionIOError(f"Failed to write solution file {path}: {e}", path=path) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(temp_path, mode)
            Path(temp_path).replace(path)
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise SolutionIOError(f"Failed to write solution file {path}: {e}", path=path) from e

        log_message(f"Saved manifest {path}")

    def create(
        self,
        directory: str | Path,
        fields: SolutionFields,
        moment: datetime | None = None,
    ) -> Manifest:
        """Create and write the manifest of a new solution.

        Args:
            directory: Solution directory (must already exist)
            fields: Values collected from the user
            moment: Creation time; defaults to now

        Returns:
            The manifest that was written to ``directory/ubix.json``
        """
        directory = Path(directory)
        manifest = Manifest(
            name=fields.name,
            author=fields.author,
            version=fields.version,
            api=fields.api,
            path=root_relative_path(directory),
            file_name=sanitize_file_name(fields.name),
        )
        manifest.touch(moment)
        self.save(directory / self.file_name, manifest)
        return manifest


__all__ = [
    "JSON_INDENT",
    "Manifest",
    "ManifestStore",
    "SolutionFields",
    "format_timestamp",
    "root_relative_path",
]
