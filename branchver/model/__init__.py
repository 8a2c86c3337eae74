"""Data model of build modules: identities, descriptors and sessions."""

from branchver.model.gav import GAV
from branchver.model.descriptor import (
    Descriptor,
    ParentReference,
    read_descriptor,
    write_descriptor,
)
from branchver.model.module import Module, VersionRange
from branchver.model.session import BuildSession

__all__ = [
    # Identity
    "GAV",
    # Descriptors
    "Descriptor",
    "ParentReference",
    "read_descriptor",
    "write_descriptor",
    # Live build state
    "Module",
    "VersionRange",
    "BuildSession",
]
