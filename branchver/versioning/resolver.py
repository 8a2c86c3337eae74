"""
Computation of branch versions.

The resolver is the pure half of the versioning pipeline: it only reads the
modules and returns a map from each module's current identity to the
version it gets on the current branch. Applying that map is the job of
:mod:`branchver.versioning.propagator`.
"""

import logging
from typing import Dict, Iterable

from branchver.config import BranchVersioningConfig
from branchver.constants import SNAPSHOT_SUFFIX
from branchver.model import GAV, Module

from .branch import BranchState, BranchType, classify_branch, sanitize_branch_name

logger = logging.getLogger(__name__)

VersionMap = Dict[GAV, str]


def release_version(version: str) -> str:
    """Strip a trailing snapshot suffix: ``1.2.3-SNAPSHOT`` -> ``1.2.3``."""
    if version.endswith(SNAPSHOT_SUFFIX):
        return version[: -len(SNAPSHOT_SUFFIX)]
    return version


def branch_version(
    branch_type: BranchType, branch_state: BranchState, version: str
) -> str:
    """New version of a module currently at ``version``.

    Raises:
        ValueError: If ``branch_type`` is unknown
    """
    if branch_type is BranchType.DETACHED:
        return branch_state.head_commit
    if branch_type is BranchType.MAIN_RELEASE:
        return release_version(version)
    if branch_type is BranchType.RELEASE:
        return f"{sanitize_branch_name(branch_state.branch_name)}-{release_version(version)}"
    if branch_type is BranchType.SNAPSHOT:
        return f"{sanitize_branch_name(branch_state.branch_name)}{SNAPSHOT_SUFFIX}"
    raise ValueError(f"Unknown branch type: {branch_type}")


def classify(branch_state: BranchState, config: BranchVersioningConfig) -> BranchType:
    return classify_branch(
        branch_state.branch_name,
        branch_state.head_commit,
        config.main_release_branch,
        config.release_branch_prefixes,
    )


def determine_versions(
    modules: Iterable[Module],
    branch_state: BranchState,
    config: BranchVersioningConfig,
) -> VersionMap:
    """
    Compute the branch version of every module.

    The branch is classified once; every module then gets exactly one entry,
    keyed by its identity before any change.

    Args:
        modules: Modules of the build
        branch_state: Branch and head commit of the working copy
        config: Main release branch and release branch prefixes

    Returns:
        Mapping of current module identity to new version
    """
    branch_type = classify(branch_state, config)
    logger.info(f"Branch: {branch_state}")
    logger.debug(f"branch type: {branch_type.value}")

    version_map: VersionMap = {}
    for module in modules:
        new_version = branch_version(branch_type, branch_state, module.version)
        logger.info(f"Processing change of {module.gav} -> {new_version}")
        version_map[module.gav] = new_version

    return version_map
