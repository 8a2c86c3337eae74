"""Group-Artifact-Version (GAV) identity of a build module."""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .descriptor import Descriptor, ParentReference
    from .module import Module


@dataclass(frozen=True)
class GAV:
    """
    Immutable identity triple of a module.

    Two identities are equal when group, artifact and version are all equal,
    ``None`` included, so a GAV can be used as a dict key regardless of which
    view of the module it was built from.
    """

    group_id: Optional[str]
    artifact_id: Optional[str]
    version: Optional[str]

    @classmethod
    def from_module(cls, module: "Module") -> "GAV":
        """Identity of a live module."""
        return cls(module.group_id, module.artifact_id, module.version)

    @classmethod
    def from_descriptor(cls, descriptor: "Descriptor") -> "GAV":
        """
        Identity declared by a descriptor.

        Group and version fall back to the parent reference when the
        descriptor does not declare them itself.
        """
        parent = descriptor.parent
        group_id = descriptor.group_id
        if group_id is None and parent is not None:
            group_id = parent.group_id
        version = descriptor.version
        if version is None and parent is not None:
            version = parent.version
        return cls(group_id, descriptor.artifact_id, version)

    @classmethod
    def from_parent(cls, parent: "ParentReference") -> "GAV":
        """Identity a parent reference points at."""
        return cls(parent.group_id, parent.artifact_id, parent.version)

    def __str__(self) -> str:
        return f"{self.group_id}::{self.artifact_id}::{self.version}"
