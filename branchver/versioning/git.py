"""
Read-only access to the git repository of the build.

Only the current branch name and the head commit are ever read.
"""

import logging
from pathlib import Path
from typing import Union

from git import Repo
from git.exc import GitError, InvalidGitRepositoryError, NoSuchPathError

from branchver.exceptions import RepositoryError

from .branch import BranchState

logger = logging.getLogger(__name__)


class GitRepository:
    """
    Handle on a git repository, usable as a context manager.

    Like ``git rev-parse --abbrev-ref`` reports a plain commit when HEAD is
    detached, :meth:`current_branch_name` returns the head commit id then.
    """

    def __init__(self, repo: Repo):
        self.repo = repo

    @property
    def path(self) -> str:
        return str(self.repo.working_dir or self.repo.git_dir)

    def current_branch_name(self) -> str:
        """
        Raises:
            RepositoryError: If the branch cannot be determined
        """
        try:
            if self.repo.head.is_detached:
                return self.repo.head.commit.hexsha
            return self.repo.active_branch.name
        except (GitError, TypeError, ValueError) as e:
            raise RepositoryError(self.path, f"cannot read current branch: {e}") from e

    def resolve_head(self) -> str:
        """
        Raises:
            RepositoryError: If HEAD does not point at a commit
        """
        try:
            return self.repo.head.commit.hexsha
        except (GitError, ValueError) as e:
            raise RepositoryError(self.path, f"cannot resolve HEAD: {e}") from e

    def branch_state(self) -> BranchState:
        branch_name = self.current_branch_name()
        logger.debug(f"branch: {branch_name}")
        head_commit = self.resolve_head()
        logger.debug(f"commit: {head_commit}")
        return BranchState(branch_name=branch_name, head_commit=head_commit)

    def close(self) -> None:
        self.repo.close()

    def __enter__(self) -> "GitRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def find_repository(root_dir: Union[str, Path]) -> GitRepository:
    """
    Open the git repository containing ``root_dir``.

    Parent directories are searched, so any directory inside a working copy
    can be given.

    Raises:
        RepositoryError: If no repository can be found
    """
    try:
        repo = Repo(str(root_dir), search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryError(str(root_dir), "not inside a git repository") from e
    return GitRepository(repo)


def read_branch_state(root_dir: Union[str, Path], repository_factory=find_repository) -> BranchState:
    """Open the repository, read its branch state and close it again."""
    with repository_factory(root_dir) as repository:
        return repository.branch_state()
