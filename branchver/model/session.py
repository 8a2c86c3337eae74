"""Build session handed to the versioning extension by the build host."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .module import Module


@dataclass
class BuildSession:
    """
    State of one build invocation.

    ``modules`` lists every module of the build, parents before children;
    ``root`` is the top-level module and ``execution_root`` the directory the
    build was started from.
    """

    modules: List[Module]
    root: Module
    execution_root: Path
    user_properties: Dict[str, str] = field(default_factory=dict)
    profiles: List[str] = field(default_factory=list)
    active_profiles: List[str] = field(default_factory=list)

    def activate_profile(self, profile_id: str) -> None:
        if profile_id not in self.active_profiles:
            self.active_profiles.append(profile_id)
