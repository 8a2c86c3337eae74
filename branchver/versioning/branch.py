"""Classification of the checked-out branch."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_ILLEGAL_VERSION_CHARS = re.compile(r"[^A-Za-z0-9]")


class BranchType(str, Enum):
    """Kind of branch a build runs on, in classification precedence order."""

    DETACHED = "detached"
    MAIN_RELEASE = "main-release"
    RELEASE = "release"
    SNAPSHOT = "snapshot"

    @property
    def is_release(self) -> bool:
        return self in (BranchType.MAIN_RELEASE, BranchType.RELEASE)


@dataclass(frozen=True)
class BranchState:
    """
    Branch and head commit of the working copy.

    git reports the head commit id as the branch name when HEAD is detached.
    """

    branch_name: str
    head_commit: str

    @property
    def detached(self) -> bool:
        return self.branch_name == self.head_commit

    def __str__(self) -> str:
        if self.detached:
            return f"(HEAD detached at {self.head_commit})"
        return self.branch_name


def sanitize_branch_name(branch_name: str) -> str:
    """Replace every character that is not a letter or digit with ``_``."""
    return _ILLEGAL_VERSION_CHARS.sub("_", branch_name)


def is_release_branch(branch_name: str, prefixes: Iterable[str]) -> bool:
    return any(branch_name.startswith(prefix) for prefix in prefixes)


def classify_branch(
    branch_name: str,
    head_commit: str,
    main_release_branch: str,
    release_branch_prefixes: Iterable[str],
) -> BranchType:
    """
    Classify a branch; the first matching rule wins.

    1. detached HEAD (branch name equals the head commit id)
    2. main release branch (case-insensitive)
    3. release branch (literal prefix match)
    4. anything else is a snapshot branch
    """
    if branch_name == head_commit:
        return BranchType.DETACHED
    if branch_name.lower() == main_release_branch.lower():
        return BranchType.MAIN_RELEASE
    if is_release_branch(branch_name, release_branch_prefixes):
        return BranchType.RELEASE
    return BranchType.SNAPSHOT
