"""
Build extension wiring the versioning pipeline into a build session.

The host calls :meth:`BranchVersioningExtension.after_projects_read` once all
module descriptors are read, before any build step uses module versions.
"""

import configparser
import logging
from typing import Callable, Optional

from branchver.config import BranchVersioningConfig, load_config
from branchver.constants import RELEASE_PROFILE_NAME
from branchver.exceptions import BuildExtensionError, VersioningError
from branchver.model import BuildSession

from .branch import BranchState
from .git import GitRepository, find_repository, read_branch_state
from .propagator import propagate_versions
from .resolver import VersionMap, classify, determine_versions
from .validator import validate_versions

logger = logging.getLogger(__name__)


class BranchVersioningExtension:
    """
    Rewrites the versions of all modules of a session for the current branch.

    Args:
        config: Versioning configuration; loaded from the session's execution
            root and user properties when None
        repository_factory: Opens the git repository for a directory
        cleanup: Remove rewritten descriptors when the interpreter exits
    """

    def __init__(
        self,
        config: Optional[BranchVersioningConfig] = None,
        repository_factory: Callable[..., GitRepository] = find_repository,
        cleanup: bool = True,
    ):
        self.config = config
        self.repository_factory = repository_factory
        self.cleanup = cleanup

    def _settle_config(self, session: BuildSession) -> BranchVersioningConfig:
        if self.config is not None:
            return self.config
        try:
            return load_config(session.execution_root, session.user_properties)
        except (ValueError, configparser.Error) as e:
            logger.error(f"Invalid configuration: {e}")
            raise BuildExtensionError("Configuration error") from e

    def is_disabled(self, session: BuildSession) -> bool:
        return self._settle_config(session).disabled

    def _validate(self, session: BuildSession) -> None:
        try:
            validate_versions(session.modules)
        except VersioningError as e:
            logger.error(f"Version validation failed: {e}")
            raise BuildExtensionError("Version validation error") from e

    def compute_versions(self, session: BuildSession) -> VersionMap:
        """
        Validate the module versions and compute their branch versions
        without changing anything.

        Raises:
            BuildExtensionError: Wrapping the validation or repository error
        """
        config = self._settle_config(session)
        self._validate(session)
        branch_state = self._read_branch_state(session)
        return determine_versions(session.modules, branch_state, config)

    def after_projects_read(self, session: BuildSession) -> Optional[VersionMap]:
        """
        Run the versioning pipeline on ``session``.

        Returns:
            The applied version map, or None when branch versioning is disabled

        Raises:
            BuildExtensionError: Wrapping whatever error aborted the run
        """
        config = self._settle_config(session)
        if config.disabled:
            logger.info("Branch versioning disabled")
            return None

        logger.info("--- branch-versioning-extension ")
        self._validate(session)
        branch_state = self._read_branch_state(session)
        try:
            version_map = determine_versions(session.modules, branch_state, config)
            propagate_versions(session.modules, version_map, cleanup=self.cleanup)
        except VersioningError as e:
            logger.error(f"Branch versioning failed: {e}")
            raise BuildExtensionError("Branch versioning error") from e
        logger.info("")

        logger.info("--- branch-release-extension ")
        self.activate_release_profile(session, branch_state, config)
        logger.info("")

        return version_map

    def _read_branch_state(self, session: BuildSession) -> BranchState:
        try:
            return read_branch_state(session.execution_root, self.repository_factory)
        except VersioningError as e:
            logger.error(f"Cannot read branch: {e}")
            raise BuildExtensionError("Repository error") from e

    def activate_release_profile(
        self,
        session: BuildSession,
        branch_state: BranchState,
        config: BranchVersioningConfig,
    ) -> bool:
        """
        Activate the release profile on release branches when a module
        declares it.

        Returns:
            True if the profile was activated
        """
        if not classify(branch_state, config).is_release:
            return False
        if RELEASE_PROFILE_NAME not in session.profiles:
            logger.info(f"No {RELEASE_PROFILE_NAME} profile")
            return False
        logger.info(f"Activate {RELEASE_PROFILE_NAME} profile")
        session.activate_profile(RELEASE_PROFILE_NAME)
        return True
