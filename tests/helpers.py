"""Shared test doubles and builders."""

from pathlib import Path
from typing import Optional

import yaml

from branchver.versioning.branch import BranchState

HEAD_COMMIT = "3f2a9c1d8e7b6a5f4e3d2c1b0a9f8e7d6c5b4a39"


class FakeRepository:
    """Stand-in for GitRepository reporting a fixed branch and head commit."""

    def __init__(self, branch_name: str, head_commit: str = HEAD_COMMIT):
        self.branch_name = branch_name
        self.head_commit = head_commit
        self.opened_at: Optional[Path] = None
        self.closed = False

    def __call__(self, root_dir):
        # Acts as its own repository factory
        self.opened_at = Path(root_dir)
        return self

    def current_branch_name(self) -> str:
        return self.branch_name

    def resolve_head(self) -> str:
        return self.head_commit

    def branch_state(self) -> BranchState:
        return BranchState(self.current_branch_name(), self.resolve_head())

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def write_descriptor_yaml(directory: Path, data: dict) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "module.yaml"
    path.write_text(yaml.safe_dump(data, sort_keys=False))
    return path
