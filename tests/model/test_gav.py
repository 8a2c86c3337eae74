"""Tests for the GAV identity."""

import pytest

from branchver.model import GAV, Descriptor, ParentReference


@pytest.mark.short
class TestGAV:
    def test_equality_over_all_fields(self):
        assert GAV("g", "a", "1.0") == GAV("g", "a", "1.0")
        assert GAV("g", "a", "1.0") != GAV("g", "a", "1.1")
        assert GAV("g", "a", "1.0") != GAV("h", "a", "1.0")

    def test_equality_with_none_fields(self):
        assert GAV(None, "a", None) == GAV(None, "a", None)
        assert GAV(None, "a", "1.0") != GAV("g", "a", "1.0")

    def test_usable_as_dict_key(self):
        versions = {GAV("g", "a", "1.0"): "x"}
        assert versions[GAV("g", "a", "1.0")] == "x"

    def test_immutable(self):
        gav = GAV("g", "a", "1.0")
        with pytest.raises(AttributeError):
            gav.version = "2.0"

    def test_str(self):
        assert str(GAV("org.example", "core", "1.0")) == "org.example::core::1.0"

    def test_from_descriptor_inherits_from_parent(self):
        descriptor = Descriptor(
            artifact_id="core",
            parent=ParentReference(
                group_id="org.example", artifact_id="parent", version="2.0-SNAPSHOT"
            ),
        )
        assert GAV.from_descriptor(descriptor) == GAV(
            "org.example", "core", "2.0-SNAPSHOT"
        )

    def test_from_descriptor_prefers_own_values(self):
        descriptor = Descriptor(
            group_id="org.other",
            artifact_id="core",
            version="3.0-SNAPSHOT",
            parent=ParentReference(
                group_id="org.example", artifact_id="parent", version="2.0-SNAPSHOT"
            ),
        )
        assert GAV.from_descriptor(descriptor) == GAV(
            "org.other", "core", "3.0-SNAPSHOT"
        )

    def test_from_descriptor_without_parent(self):
        descriptor = Descriptor(artifact_id="core")
        assert GAV.from_descriptor(descriptor) == GAV(None, "core", None)

    def test_from_parent(self):
        parent = ParentReference(group_id="g", artifact_id="p", version="1")
        assert GAV.from_parent(parent) == GAV("g", "p", "1")
