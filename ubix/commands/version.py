"""Implementation of ``ubix version``: show or change the solution version."""

from ubix.commands.options import VersionOptions
from ubix.solution.manifest import ManifestStore
from ubix.solution.versioning import resolve_new_version
from ubix.utils.console import print_info, print_success
from ubix.utils.errors import InvalidFormatError
from ubix.utils.logging import log_message

# Literals of the optional argument that switch to update mode
UPDATE_ACTIONS: tuple[str, ...] = ("update", "set")


def is_update(action: str | None) -> bool:
    """Tell whether ``action`` selects update mode.

    Raises:
        InvalidFormatError: If ``action`` is neither absent nor an update literal
    """
    if action is None:
        return False
    if action in UPDATE_ACTIONS:
        return True
    raise InvalidFormatError(
        f"invalid value for action: {action} (expected one of: {', '.join(UPDATE_ACTIONS)})"
    )


def run_version(options: VersionOptions, store: ManifestStore | None = None) -> str:
    """Print the solution version, or compute, save and print a new one.

    In update mode the manifest is only rewritten when the new version was
    computed without any error; ``lastUpdate`` is refreshed with it.

    Returns:
        The current version (read mode) or the new version (update mode)
    """
    store = store or ManifestStore()
    update = is_update(options.action)

    solution_file = store.locate(options.solution)
    manifest = store.load(solution_file)

    if not update:
        print_info(f"Version is {manifest.version}")
        return manifest.version

    new_version = resolve_new_version(
        manifest.version,
        {
            "version": options.version,
            "major": options.major,
            "minor": options.minor,
            "patch": options.patch,
        },
    )
    log_message(f"version: {manifest.version} -> {new_version} ({solution_file})")

    manifest.version = new_version
    manifest.touch()
    store.save(solution_file, manifest)
    print_success(f"Version updated to {new_version}")
    return new_version


__all__ = ["UPDATE_ACTIONS", "is_update", "run_version"]
