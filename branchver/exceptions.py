"""
Exception classes for branch versioning.

Every failure of the versioning pipeline is one of the types below. The build
extension re-raises them wrapped in a single BuildExtensionError so the host
sees one failure with the original error attached as ``__cause__``.
"""


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class VersionFormatError(VersioningError):
    """Raised when a module version does not have the required format."""

    def __init__(self, module: str, version_string: str, expected_format: str):
        self.module = module
        self.version_string = version_string
        self.expected_format = expected_format
        super().__init__(
            f"Invalid version format for {module}: '{version_string}'. "
            f"Expected format: {expected_format}"
        )


class RepositoryError(VersioningError):
    """Raised when the git repository cannot be opened or queried."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        if message:
            super().__init__(f"Repository error for {path}: {message}")
        else:
            super().__init__(f"Could not open git repository at {path}")


class VersionLookupError(VersioningError, LookupError):
    """Raised when a module has no entry in the computed version map.

    This is an internal consistency fault: the resolver assigns a version to
    every module it is given.
    """

    def __init__(self, module: str, known: int = 0):
        self.module = module
        super().__init__(
            f"No branch version computed for {module} "
            f"({known} module version(s) known)"
        )


class PersistenceError(VersioningError):
    """Raised when a module descriptor cannot be read, parsed or written."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        if message:
            super().__init__(f"Descriptor error for {path}: {message}")
        else:
            super().__init__(f"Could not access descriptor {path}")


class BuildExtensionError(VersioningError):
    """Raised by the build extension, wrapping the error that aborted it."""

    pass
