"""Command implementations for UBIX.

Each module implements one CLI command on top of the solution model:
- init: create a solution folder and manifest
- version: show or bump the solution version
- info: print the manifest
- package: zip the solution for upload
"""

from ubix.commands.info import run_info
from ubix.commands.init import run_init
from ubix.commands.options import InfoOptions, InitOptions, PackageOptions, VersionOptions
from ubix.commands.package import PackageResult, run_package
from ubix.commands.version import run_version

__all__ = [
    "InitOptions",
    "VersionOptions",
    "InfoOptions",
    "PackageOptions",
    "PackageResult",
    "run_init",
    "run_version",
    "run_info",
    "run_package",
]
