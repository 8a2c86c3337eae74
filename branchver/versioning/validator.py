"""
Version format checks run before any module is touched.

Both checks walk the whole module list and raise on the first module that
fails, so a failing build leaves every module and descriptor unchanged.
"""

import logging
import re
from typing import Iterable

from branchver.constants import SNAPSHOT_SUFFIX
from branchver.exceptions import VersionFormatError
from branchver.model import Module

logger = logging.getLogger(__name__)

# see http://semver.org/#semantic-versioning-200
SEMVER_PATTERN = re.compile(
    r"^(0|[1-9][0-9]*)(\.(0|[1-9][0-9]*))?(\.(0|[1-9][0-9]*))?"
    r"(-[a-zA-Z][a-zA-Z0-9]*)?(\+[a-zA-Z0-9]+)?$"
)


def is_semantic_version(version: str) -> bool:
    return version is not None and SEMVER_PATTERN.fullmatch(version) is not None


def is_snapshot_version(version: str) -> bool:
    return version is not None and version.endswith(SNAPSHOT_SUFFIX)


def ensure_semantic_versions(modules: Iterable[Module]) -> None:
    """
    Raises:
        VersionFormatError: For the first module whose version is not semantic
    """
    for module in modules:
        logger.info(f"Ensure semantic version format @ {module.gav}")
        if not is_semantic_version(module.version):
            raise VersionFormatError(
                str(module.gav), str(module.version), SEMVER_PATTERN.pattern
            )


def ensure_snapshot_versions(modules: Iterable[Module]) -> None:
    """
    Raises:
        VersionFormatError: For the first module whose version is not a snapshot
    """
    for module in modules:
        logger.info(f"Ensure snapshot version @ {module.gav}")
        if not is_snapshot_version(module.version):
            raise VersionFormatError(
                str(module.gav), str(module.version), f"<version>{SNAPSHOT_SUFFIX}"
            )


def validate_versions(modules: Iterable[Module]) -> None:
    """Check that every module has a semantic snapshot version."""
    modules = list(modules)
    ensure_semantic_versions(modules)
    ensure_snapshot_versions(modules)
