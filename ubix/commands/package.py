"""Implementation of ``ubix package``: zip a solution for upload.

The archive holds the ``data``, ``scripts`` and ``dsl`` folders of the
solution plus its manifest at the top level:

    data/...
    scripts/...
    dsl/...
    ubix.json

A folder missing from the solution is left out of the archive with a
warning. Symbolic links are never followed.
"""

import os
import stat
import zipfile
from dataclasses import dataclass, field
from pathlib import Path

from ubix.commands.options import PackageOptions
from ubix.config.settings import Settings
from ubix.solution.manifest import ManifestStore
from ubix.utils.console import print_info, print_step, print_success, print_warning
from ubix.utils.errors import (
    ArchiveError,
    SolutionIOError,
    SolutionNotFoundError,
    WrongTypeError,
)
from ubix.utils.logging import log_message

PACKAGE_FOLDERS: tuple[str, ...] = ("data", "scripts", "dsl")


@dataclass
class PackageResult:
    """Outcome of building a solution package.

    Attributes:
        archive: Path of the written archive
        size: Archive size in bytes
        folders: Solution folders that went into the archive
        skipped: Solution folders that were missing
        file_count: Number of regular files archived, manifest included
    """

    archive: Path
    size: int
    folders: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    file_count: int = 0


def resolve_solution_directory(path: str | Path | None) -> Path:
    """Check that ``path`` (default: cwd) is an existing directory.

    Raises:
        SolutionNotFoundError: If nothing exists at ``path``
        WrongTypeError: If ``path`` is not a directory
        SolutionIOError: If ``path`` cannot be inspected
    """
    solution_path = Path(path or ".")
    try:
        mode = solution_path.stat().st_mode
    except FileNotFoundError:
        raise SolutionNotFoundError(
            f"Cannot find solution at {solution_path}", path=solution_path
        ) from None
    except OSError as e:
        raise SolutionIOError(
            f"Error with solution at {solution_path}: {e}", path=solution_path
        ) from e

    if not stat.S_ISDIR(mode):
        raise WrongTypeError(f"Solution path {solution_path} is wrong type.", path=solution_path)
    return solution_path


def _present_folders(solution_path: Path) -> tuple[list[str], list[str]]:
    folders: list[str] = []
    skipped: list[str] = []
    for folder in PACKAGE_FOLDERS:
        source = solution_path / folder
        if not os.path.lexists(source):
            print_warning(f"Skipping missing folder {folder}/")
            skipped.append(folder)
        elif source.is_symlink() or not source.is_dir():
            raise WrongTypeError(f"Solution folder {source} is wrong type.", path=source)
        else:
            folders.append(folder)
    return folders, skipped


def _raise_walk_error(error: OSError) -> None:
    raise error


def _add_tree(archive: zipfile.ZipFile, source: Path, arc_root: str, exclude: Path) -> int:
    """Add ``source`` recursively under ``arc_root``; return the file count."""
    added = 0
    archive.write(source, arc_root)
    for dirpath, dirnames, filenames in os.walk(source, onerror=_raise_walk_error):
        current = Path(dirpath)
        dirnames.sort()
        for name in list(dirnames):
            entry = current / name
            if entry.is_symlink():
                print_warning(f"Skipping symlink in archive: {entry}")
                dirnames.remove(name)
                continue
            archive.write(entry, f"{arc_root}/{entry.relative_to(source).as_posix()}")

        for name in sorted(filenames):
            entry = current / name
            if entry.is_symlink():
                print_warning(f"Skipping symlink in archive: {entry}")
                continue
            if entry.resolve() == exclude:
                continue
            archive.write(entry, f"{arc_root}/{entry.relative_to(source).as_posix()}")
            added += 1
    return added


def build_archive(
    solution_path: Path,
    manifest_path: Path,
    output: Path,
    manifest_name: str,
) -> PackageResult:
    """Write the solution package to ``output``.

    A failed archive is removed rather than left half-written.

    Raises:
        WrongTypeError: If a solution folder exists but is not a directory
        ArchiveError: If the archive cannot be written
    """
    folders, skipped = _present_folders(solution_path)
    exclude = output.resolve()
    file_count = 0

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(
            output, mode="w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False
        ) as archive:
            for folder in folders:
                file_count += _add_tree(archive, solution_path / folder, folder, exclude)
            archive.write(manifest_path, manifest_name)
            file_count += 1
        size = output.stat().st_size
    except (OSError, zipfile.LargeZipFile) as e:
        try:
            output.unlink()
        except OSError:
            pass
        raise ArchiveError(f"Error creating solution package: {e}") from e

    log_message(f"package: wrote {output} ({size} bytes, {file_count} files)")
    return PackageResult(
        archive=output,
        size=size,
        folders=folders,
        skipped=skipped,
        file_count=file_count,
    )


def run_package(
    options: PackageOptions,
    settings: Settings,
    store: ManifestStore | None = None,
) -> PackageResult:
    """Package the solution at ``options.path``.

    Returns:
        Details of the written archive
    """
    store = store or ManifestStore()
    solution_path = resolve_solution_directory(options.path)

    manifest_path = store.locate(store.default_path(solution_path))
    manifest = store.load(manifest_path)

    output = Path(options.file) if options.file else solution_path / settings.archive_name
    print_step(f"Packaging {manifest.name or solution_path} v{manifest.version}")

    result = build_archive(solution_path, manifest_path, output, store.file_name)
    print_success(f"Solution package created at {result.archive}")
    print_info(f"{result.size} total bytes")
    return result


__all__ = [
    "PACKAGE_FOLDERS",
    "PackageResult",
    "build_archive",
    "resolve_solution_directory",
    "run_package",
]
