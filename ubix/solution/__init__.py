"""Solution model for UBIX.

This package contains:
- validation: Raw value validation and the manifest field patterns
- versioning: Semantic version parsing and bumping
- naming: File-name sanitization for solution names
- manifest: Manifest dataclass and ManifestStore (locate/load/save/create)
"""

from ubix.solution.manifest import (
    Manifest,
    ManifestStore,
    SolutionFields,
    format_timestamp,
    root_relative_path,
)
from ubix.solution.naming import sanitize_file_name
from ubix.solution.validation import (
    API_PATTERN,
    NAME_PATTERN,
    VERSION_PATTERN,
    validated_param,
)
from ubix.solution.versioning import (
    SemanticVersion,
    compute_new_version,
    resolve_new_version,
)

__all__ = [
    # Validation
    "NAME_PATTERN",
    "VERSION_PATTERN",
    "API_PATTERN",
    "validated_param",
    # Versioning
    "SemanticVersion",
    "compute_new_version",
    "resolve_new_version",
    # Naming
    "sanitize_file_name",
    # Manifest
    "Manifest",
    "ManifestStore",
    "SolutionFields",
    "format_timestamp",
    "root_relative_path",
]
