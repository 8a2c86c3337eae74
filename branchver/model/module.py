"""Live build module as held by the build session."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .descriptor import Descriptor
from .gav import GAV


@dataclass(frozen=True)
class VersionRange:
    """
    Version selector of a module artifact, recommending a single version.
    """

    recommended_version: Optional[str] = None

    @classmethod
    def from_version(cls, version: str) -> "VersionRange":
        return cls(recommended_version=version)

    def __str__(self) -> str:
        return self.recommended_version or ""


@dataclass
class Module:
    """
    One build unit of a multi-module build.

    Attributes:
        group_id, artifact_id, version: Live identity of the module
        resolved: Effective descriptor, with values inherited from the parent
        original: Descriptor as authored in ``descriptor_file``
        descriptor_file: Descriptor file downstream build steps read
        parent: Live parent module, None when the parent is not part of the build
        version_range: Selector form of ``version``
    """

    group_id: Optional[str]
    artifact_id: str
    version: str
    resolved: Descriptor
    original: Descriptor
    descriptor_file: Path
    parent: Optional["Module"] = None
    version_range: VersionRange = field(init=False)

    def __post_init__(self):
        self.version_range = VersionRange.from_version(self.version)

    @classmethod
    def from_descriptor(
        cls, original: Descriptor, descriptor_file: Path, parent: "Module" = None
    ) -> "Module":
        """Build a module from its authored descriptor."""
        resolved = original.resolve()
        gav = GAV.from_descriptor(resolved)
        return cls(
            group_id=gav.group_id,
            artifact_id=resolved.artifact_id,
            version=gav.version,
            resolved=resolved,
            original=original,
            descriptor_file=Path(descriptor_file),
            parent=parent,
        )

    @property
    def gav(self) -> GAV:
        return GAV.from_module(self)

    @property
    def key(self) -> str:
        """``group:artifact`` label used in log output."""
        return f"{self.group_id}:{self.artifact_id}"

    def set_version(self, version: str) -> None:
        """Set the live version and recompute its selector."""
        self.version = version
        self.version_range = VersionRange.from_version(version)

    def __repr__(self) -> str:
        return f"Module({self.gav})"
