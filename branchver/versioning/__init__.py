"""
Branch versioning of multi-module builds.

All logic that turns the checked-out branch into module versions lives in
this package. The pipeline runs once per build, in this order:

1. **Validation** (validator.py):
   - Every module version must be semantic and end in ``-SNAPSHOT``
   - Runs to completion before anything is changed

2. **Branch classification** (branch.py):
   - Detached HEAD, main release branch, release branch or snapshot branch
   - Branch names are sanitized before they become part of a version

3. **Version resolution** (resolver.py):
   - Pure: maps each module identity to its new version

4. **Propagation** (propagator.py):
   - Sets live versions, parent references and both descriptor forms
   - Writes rewritten descriptors to temporary files, never in place

Git access is confined to git.py and the host integration to extension.py.
"""

from .branch import BranchState, BranchType, classify_branch, sanitize_branch_name
from .extension import BranchVersioningExtension
from .git import GitRepository, find_repository, read_branch_state
from .propagator import VersionPropagator, propagate_versions, update_descriptor
from .resolver import VersionMap, determine_versions, release_version
from .validator import (
    SEMVER_PATTERN,
    ensure_semantic_versions,
    ensure_snapshot_versions,
    validate_versions,
)

__all__ = [
    # Host integration
    "BranchVersioningExtension",
    # Branches
    "BranchState",
    "BranchType",
    "classify_branch",
    "sanitize_branch_name",
    # Git
    "GitRepository",
    "find_repository",
    "read_branch_state",
    # Pipeline
    "SEMVER_PATTERN",
    "ensure_semantic_versions",
    "ensure_snapshot_versions",
    "validate_versions",
    "VersionMap",
    "determine_versions",
    "release_version",
    "VersionPropagator",
    "propagate_versions",
    "update_descriptor",
]
