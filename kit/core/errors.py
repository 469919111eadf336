"""Error types raised by the Kit core.

Every failure the core can report is a subclass of KitError. Components
raise these and let them propagate; only the CLI turns them into messages
and exit codes.
"""


class KitError(Exception):
    """Base class for all Kit errors."""


class PathNotDirectory(KitError):
    """Raised when a repository target exists but is not a directory."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} is not a directory")


class PathNotEmpty(KitError):
    """Raised when a repository target directory already has entries."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} is not empty")


class NotADirectory(KitError):
    """Raised when a path component under .kit exists as a regular file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Not a directory: {path}")


class NotAKitRepository(KitError):
    """Raised when no .kit directory is found."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"Not a kit repository (or any of the parent directories): {path}"
        )


class ConfigMissing(KitError):
    """Raised when the repository config file or a required key is missing."""


class ConfigVersionUnsupported(KitError):
    """Raised when core.repositoryformatversion is not a supported value."""

    def __init__(self, version):
        self.version = version
        super().__init__(f"Unsupported repositoryformatversion: {version}")


class UnknownObjectKind(KitError):
    """Raised when an object kind name is not one of the known kinds."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown object type: {name}")


class MalformedObjectEnvelope(KitError):
    """Raised when an encoded object does not follow <kind> <size>\\0<data>."""


class CorruptCompressedData(KitError):
    """Raised when a stored object cannot be decompressed."""

    def __init__(self, sha, reason):
        self.sha = sha
        super().__init__(f"Object {sha} is corrupt: {reason}")


class ObjectNotFound(KitError):
    """Raised when an object id has no file in the object database."""

    def __init__(self, sha):
        self.sha = sha
        super().__init__(f"Object {sha} not found")


class RepositoryRequiredForWrite(KitError):
    """Raised when an object write is requested without a repository."""

    def __init__(self):
        super().__init__("Writing objects requires a kit repository")
