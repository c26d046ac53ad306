"""Implementation of ``ubix info``: print the solution manifest."""

from ubix.commands.options import InfoOptions
from ubix.solution.manifest import Manifest, ManifestStore
from ubix.utils.console import print_plain


def run_info(options: InfoOptions, store: ManifestStore | None = None) -> Manifest:
    """Print the manifest as indented JSON, keys in file order."""
    store = store or ManifestStore()
    manifest = store.load(store.locate(options.solution))
    print_plain(manifest.to_json().rstrip("\n"))
    return manifest


__all__ = ["run_info"]
