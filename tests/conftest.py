import io
import logging
from pathlib import Path

import pytest

from branchver.config import BranchVersioningConfig
from branchver.reactor import load_session
from tests.helpers import write_descriptor_yaml


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("branchver")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture
def build_tree(tmp_path) -> Path:
    """
    A three-module build:

        parent  org.example:parent:1.2.3-SNAPSHOT  (aggregates core and app)
        core    inherits group and version from parent
        app     declares group and version, references parent
    """
    root = tmp_path / "build"
    write_descriptor_yaml(
        root,
        {
            "groupId": "org.example",
            "artifactId": "parent",
            "version": "1.2.3-SNAPSHOT",
            "description": "Example build",
            "modules": ["core", "app"],
            "profiles": ["release"],
        },
    )
    write_descriptor_yaml(
        root / "core",
        {
            "artifactId": "core",
            "parent": {
                "groupId": "org.example",
                "artifactId": "parent",
                "version": "1.2.3-SNAPSHOT",
            },
        },
    )
    write_descriptor_yaml(
        root / "app",
        {
            "groupId": "org.example",
            "artifactId": "app",
            "version": "1.2.3-SNAPSHOT",
            "parent": {
                "groupId": "org.example",
                "artifactId": "parent",
                "version": "1.2.3-SNAPSHOT",
            },
            "dependencies": [{"artifactId": "core"}],
        },
    )
    return root


@pytest.fixture
def session(build_tree):
    return load_session(build_tree)


@pytest.fixture
def config():
    return BranchVersioningConfig()
