"""Tests for branch version resolution."""

import pytest

from branchver.config import BranchVersioningConfig
from branchver.model import GAV
from branchver.versioning.branch import BranchState, BranchType
from branchver.versioning.resolver import (
    branch_version,
    determine_versions,
    release_version,
)

from tests.helpers import HEAD_COMMIT


def versions_on(session, branch_name, config=None, head_commit=HEAD_COMMIT):
    config = config or BranchVersioningConfig()
    return determine_versions(
        session.modules, BranchState(branch_name, head_commit), config
    )


@pytest.mark.short
class TestReleaseVersion:
    def test_strips_snapshot(self):
        assert release_version("1.2.3-SNAPSHOT") == "1.2.3"

    def test_only_trailing_suffix(self):
        assert release_version("1.2.3") == "1.2.3"
        assert release_version("1.2.3-SNAPSHOTX") == "1.2.3-SNAPSHOTX"


@pytest.mark.short
class TestBranchVersion:
    def test_each_branch_type(self):
        state = BranchState("support/1.x", HEAD_COMMIT)
        assert branch_version(BranchType.DETACHED, state, "1.2.3-SNAPSHOT") == HEAD_COMMIT
        assert branch_version(BranchType.MAIN_RELEASE, state, "1.2.3-SNAPSHOT") == "1.2.3"
        assert branch_version(BranchType.RELEASE, state, "1.2.3-SNAPSHOT") == "support_1_x-1.2.3"
        assert branch_version(BranchType.SNAPSHOT, state, "1.2.3-SNAPSHOT") == "support_1_x-SNAPSHOT"


@pytest.mark.short
class TestDetermineVersions:
    def test_main_release_branch(self, session):
        version_map = versions_on(session, "master")
        assert set(version_map.values()) == {"1.2.3"}

    def test_release_branch(self, session):
        version_map = versions_on(session, "support/1.x")
        assert set(version_map.values()) == {"support_1_x-1.2.3"}

    def test_snapshot_branch(self, session):
        version_map = versions_on(session, "feature/foo")
        assert set(version_map.values()) == {"feature_foo-SNAPSHOT"}

    def test_sanitized_snapshot_branch(self, session):
        version_map = versions_on(session, "feature/foo.bar")
        assert set(version_map.values()) == {"feature_foo_bar-SNAPSHOT"}

    def test_detached_head(self, session):
        version_map = versions_on(session, HEAD_COMMIT)
        assert set(version_map.values()) == {HEAD_COMMIT}

    def test_every_module_has_one_entry(self, session):
        version_map = versions_on(session, "develop")
        assert len(version_map) == len(session.modules)
        for module in session.modules:
            assert module.gav in version_map

    def test_keyed_by_current_identity(self, session):
        version_map = versions_on(session, "master")
        assert GAV("org.example", "core", "1.2.3-SNAPSHOT") in version_map

    def test_does_not_touch_modules(self, session):
        before = [module.gav for module in session.modules]
        versions_on(session, "master")
        assert [module.gav for module in session.modules] == before

    def test_idempotent(self, session):
        first = versions_on(session, "support-2")
        second = versions_on(session, "support-2")
        assert first == second
        assert list(first.items()) == list(second.items())

    def test_custom_configuration(self, session):
        config = BranchVersioningConfig(
            main_release_branch="main", release_branch_prefixes=("release/",)
        )
        assert set(versions_on(session, "main", config).values()) == {"1.2.3"}
        assert set(versions_on(session, "release/3", config).values()) == {
            "release_3-1.2.3"
        }
        assert set(versions_on(session, "master", config).values()) == {
            "master-SNAPSHOT"
        }

    def test_logs_each_change(self, session, capture_logs):
        versions_on(session, "master")
        output = capture_logs.getvalue()
        assert "Branch: master" in output
        assert "Processing change of org.example::core::1.2.3-SNAPSHOT -> 1.2.3" in output
