"""
Application of computed branch versions to the build modules.

For every module the live version, both descriptor forms and the descriptor
file are updated. The descriptor checked out in the working copy is never
written: the rewritten descriptor goes to a new temporary file, which is
removed when the interpreter exits.
"""

import atexit
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from branchver.constants import DESCRIPTOR_TEMP_PREFIX, DESCRIPTOR_TEMP_SUFFIX
from branchver.exceptions import PersistenceError, VersionLookupError
from branchver.model import GAV, Descriptor, Module, write_descriptor

logger = logging.getLogger(__name__)

_cleanup_paths: List[Path] = []


def register_for_cleanup(path: Path) -> None:
    """Remove ``path`` when the interpreter exits."""
    _cleanup_paths.append(Path(path))


def _remove_registered_files() -> None:
    while _cleanup_paths:
        path = _cleanup_paths.pop()
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove temporary descriptor {path}: {e}")


atexit.register(_remove_registered_files)


def lookup_version(version_map: Dict[GAV, str], gav: GAV) -> str:
    """
    Raises:
        VersionLookupError: If no version was computed for ``gav``
    """
    try:
        return version_map[gav]
    except KeyError:
        raise VersionLookupError(str(gav), len(version_map)) from None


def update_descriptor(
    descriptor: Descriptor, version: str, parent_version: Optional[str]
) -> None:
    """
    Set the version of a descriptor and of its parent reference.

    The parent reference is left alone when ``parent_version`` is None, which
    is the case for parents that are not part of the build.
    """
    if descriptor.parent is not None and parent_version is not None:
        descriptor.parent.version = parent_version
    descriptor.version = version


def write_descriptor_file(module: Module, cleanup: bool = True) -> Path:
    """
    Write the authored descriptor of ``module`` to a new temporary file and
    point the module at it.

    The module keeps its previous descriptor file when writing fails.

    Raises:
        PersistenceError: If the file cannot be created or written
    """
    try:
        fd, name = tempfile.mkstemp(
            prefix=DESCRIPTOR_TEMP_PREFIX, suffix=DESCRIPTOR_TEMP_SUFFIX
        )
    except OSError as e:
        raise PersistenceError(
            str(module.descriptor_file), f"cannot create temporary file: {e}"
        ) from e
    os.close(fd)
    path = Path(name)

    try:
        write_descriptor(module.original, path)
    except PersistenceError:
        path.unlink(missing_ok=True)
        raise

    if cleanup:
        register_for_cleanup(path)
    logger.debug(f"{module.artifact_id} set descriptor file {path}")
    module.descriptor_file = path
    return path


class VersionPropagator:
    """
    Applies a version map to the modules of a build.

    The map must be keyed by the identities the modules had when it was
    computed; the propagator records those identities before changing
    anything so parent lookups are not affected by the order of the modules.
    """

    def __init__(self, version_map: Dict[GAV, str], cleanup: bool = True):
        self.version_map = version_map
        self.cleanup = cleanup
        self._previous: Dict[int, GAV] = {}

    def propagate(self, modules: Iterable[Module]) -> None:
        modules = list(modules)
        self._previous = {id(module): module.gav for module in modules}
        for module in modules:
            self.update_module(module)

    def _parent_version(self, module: Module) -> Optional[str]:
        if module.parent is not None:
            parent_gav = self._previous.get(id(module.parent), module.parent.gav)
            return lookup_version(self.version_map, parent_gav)
        reference = module.original.parent or module.resolved.parent
        if reference is None:
            return None
        # Parent outside of the build keeps its version
        return self.version_map.get(GAV.from_parent(reference))

    def update_module(self, module: Module) -> None:
        """
        Raises:
            VersionLookupError: If the module or its parent has no computed version
            PersistenceError: If the rewritten descriptor cannot be written
        """
        gav = self._previous.get(id(module), module.gav)
        new_version = lookup_version(self.version_map, gav)
        parent_version = self._parent_version(module)

        logger.debug(f"{module.artifact_id} set version {new_version}")
        module.set_version(new_version)
        logger.debug(f"{module.artifact_id} set version range {module.version_range}")

        for form, descriptor in (
            ("model", module.resolved),
            ("original model", module.original),
        ):
            if descriptor.parent is not None and parent_version is not None:
                logger.debug(
                    f"{module.artifact_id} set {form} parent version {parent_version}"
                )
            logger.debug(f"{module.artifact_id} set {form} version {new_version}")
            update_descriptor(descriptor, new_version, parent_version)

        write_descriptor_file(module, cleanup=self.cleanup)


def propagate_versions(
    modules: Iterable[Module], version_map: Dict[GAV, str], cleanup: bool = True
) -> None:
    """Apply ``version_map`` to every module, see :class:`VersionPropagator`."""
    VersionPropagator(version_map, cleanup=cleanup).propagate(modules)
