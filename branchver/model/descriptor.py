"""
Pydantic models for module descriptors (``module.yaml``) and their IO.

A descriptor is the manifest of one build module: its identity, an optional
reference to a parent module, the sub-module directories it aggregates and
the profiles it declares. Keys not modelled here are kept as extra fields so
that a rewritten descriptor carries everything the author wrote.
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from branchver.exceptions import PersistenceError


def _coerce_version(v):
    """YAML reads ``version: 1.0`` as a float; keep versions as strings."""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class ParentReference(BaseModel):
    """Reference from a descriptor to its parent module."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    group_id: Optional[str] = Field(default=None, alias="groupId")
    artifact_id: str = Field(alias="artifactId")
    version: Optional[str] = None

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v):
        return _coerce_version(v)


class Descriptor(BaseModel):
    """Model of a module descriptor file."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    group_id: Optional[str] = Field(default=None, alias="groupId")
    artifact_id: str = Field(alias="artifactId")
    version: Optional[str] = None
    parent: Optional[ParentReference] = None
    modules: List[str] = Field(default_factory=list)
    profiles: List[str] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v):
        return _coerce_version(v)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "Descriptor":
        """Alternative constructor that loads from YAML string"""
        data = yaml.safe_load(yaml_str)
        if not isinstance(data, dict):
            raise ValueError("descriptor must be a YAML mapping")
        return cls(**data)

    def to_yaml(self) -> str:
        """Serialize with the authored key names, omitting unset defaults."""
        data = self.model_dump(by_alias=True, exclude_defaults=True)
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)

    def resolve(self) -> "Descriptor":
        """
        Return the effective form of this descriptor.

        The effective form is a deep copy in which group and version are
        inherited from the parent reference when not declared.
        """
        resolved = self.model_copy(deep=True)
        if resolved.parent is not None:
            if resolved.group_id is None:
                resolved.group_id = resolved.parent.group_id
            if resolved.version is None:
                resolved.version = resolved.parent.version
        return resolved


def read_descriptor(path: Union[str, Path]) -> Descriptor:
    """
    Read and parse a descriptor file.

    Raises:
        PersistenceError: If the file cannot be read or is not a valid descriptor
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            return Descriptor.from_yaml(f.read())
    except OSError as e:
        raise PersistenceError(str(path), f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise PersistenceError(str(path), f"invalid YAML: {e}") from e
    except (PydanticValidationError, ValueError) as e:
        raise PersistenceError(str(path), f"invalid descriptor: {e}") from e


def write_descriptor(descriptor: Descriptor, path: Union[str, Path]) -> None:
    """
    Serialize a descriptor to ``path``, replacing any content it had.

    Raises:
        PersistenceError: If the file cannot be written
    """
    path = Path(path)
    try:
        with open(path, "w") as f:
            f.write(descriptor.to_yaml())
    except (OSError, yaml.YAMLError) as e:
        raise PersistenceError(str(path), f"cannot write file: {e}") from e
