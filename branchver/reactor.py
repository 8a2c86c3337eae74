"""
Loading of a multi-module build from its descriptor files.

The root directory holds the root ``module.yaml``; every descriptor may list
sub-module directories under ``modules``, which are loaded recursively so
that parents always come before the modules they aggregate.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from branchver.constants import DESCRIPTOR_FILE_NAME
from branchver.exceptions import PersistenceError
from branchver.model import GAV, BuildSession, Module, read_descriptor

logger = logging.getLogger(__name__)


def _load_modules(
    directory: Path, modules: List[Module], seen: Set[Path]
) -> None:
    directory = directory.resolve()
    descriptor_file = directory / DESCRIPTOR_FILE_NAME
    if directory in seen:
        raise PersistenceError(str(descriptor_file), "module is listed more than once")
    seen.add(directory)

    if not descriptor_file.is_file():
        raise PersistenceError(str(descriptor_file), "descriptor file not found")

    original = read_descriptor(descriptor_file)
    module = Module.from_descriptor(original, descriptor_file)
    logger.debug(f"Loaded {module.gav} from {descriptor_file}")
    modules.append(module)

    for sub_directory in original.modules:
        _load_modules(directory / sub_directory, modules, seen)


def link_parents(modules: List[Module]) -> None:
    """Point every module at its parent when the parent is part of the build."""
    index: Dict[GAV, Module] = {module.gav: module for module in modules}
    for module in modules:
        reference = module.resolved.parent
        if reference is None:
            continue
        module.parent = index.get(GAV.from_parent(reference))
        if module.parent is None:
            logger.debug(f"{module.artifact_id} parent {GAV.from_parent(reference)} is external")


def load_session(
    root_dir: Union[str, Path],
    user_properties: Optional[Dict[str, str]] = None,
) -> BuildSession:
    """
    Read all modules of the build rooted at ``root_dir``.

    Raises:
        PersistenceError: If a descriptor is missing, unreadable or invalid
    """
    root_dir = Path(root_dir)
    modules: List[Module] = []
    _load_modules(root_dir, modules, set())
    link_parents(modules)

    profiles: List[str] = []
    for module in modules:
        for profile in module.original.profiles:
            if profile not in profiles:
                profiles.append(profile)

    return BuildSession(
        modules=modules,
        root=modules[0],
        execution_root=root_dir.resolve(),
        user_properties=dict(user_properties or {}),
        profiles=profiles,
    )
