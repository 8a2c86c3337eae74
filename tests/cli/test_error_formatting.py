"""Tests for CLI error formatting."""

import pytest

from branchver.cli.error_formatting import format_versioning_error
from branchver.exceptions import BuildExtensionError, VersionFormatError


@pytest.mark.short
def test_format_chain():
    try:
        try:
            raise VersionFormatError("g::a::1.0", "1.0", "<version>-SNAPSHOT")
        except VersionFormatError as e:
            raise BuildExtensionError("Version validation error") from e
    except BuildExtensionError as e:
        message = format_versioning_error(e)

    lines = message.splitlines()
    assert lines[0] == "Version validation error"
    assert lines[1].startswith("  caused by: Invalid version format for g::a::1.0")


@pytest.mark.short
def test_format_single_error():
    assert format_versioning_error(ValueError("boom")) == "boom"


@pytest.mark.short
def test_format_error_without_message():
    assert format_versioning_error(BuildExtensionError()) == "BuildExtensionError"
