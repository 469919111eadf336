"""Repository management for Kit VCS."""

import configparser
import logging
from pathlib import Path

from . import store
from .config import Config
from .errors import (
    ConfigMissing,
    ConfigVersionUnsupported,
    NotAKitRepository,
    PathNotDirectory,
    PathNotEmpty,
)
from .objects import KitObject, ObjectKind
from .paths import PathState, path_state, repo_dir, repo_file

logger = logging.getLogger(__name__)

KIT_DIR_NAME = '.kit'

SUPPORTED_FORMAT_VERSION = 0

SKELETON_DIRS = [
    ('branches',),
    ('objects',),
    ('refs', 'tags'),
    ('refs', 'heads'),
]

DEFAULT_DESCRIPTION = (
    "Unnamed repository: edit this file 'description' to name the repository.\n"
)

DEFAULT_HEAD = 'ref: refs/heads/master\n'

DEFAULT_CONFIG = """[core]
repositoryformatversion=0
filemode=false
bare=false
"""


class Repository:
    """
    Represents a Kit repository.

    A repository is a worktree plus the .kit directory inside it that holds
    the object database, refs and configuration. Handles are read-only once
    built; use create() to make a new repository and find() to locate an
    existing one.
    """

    def __init__(self, path='.', force: bool = False):
        """
        Open the repository rooted at path.

        Args:
            path: Worktree root
            force: Skip the .kit and config checks. Only used while creating
                a repository, before its config has been written.

        Raises:
            NotAKitRepository: If path has no .kit directory
            ConfigMissing: If the config file or format version is missing
            ConfigVersionUnsupported: If the format version is not 0
        """
        self._work_tree = Path(path).resolve()
        self._kit_dir = self._work_tree / KIT_DIR_NAME
        self._config = Config(self._kit_dir / 'config')

        if not (force or self._kit_dir.is_dir()):
            raise NotAKitRepository(self._work_tree)

        config_file = repo_file(self, 'config')
        if config_file is not None and config_file.is_file():
            try:
                self._config.load()
            except (OSError, UnicodeDecodeError, configparser.Error) as e:
                if not force:
                    raise ConfigMissing(f"Configuration file unreadable: {e}") from e
        elif not force:
            raise ConfigMissing(f"Configuration file missing: {self.config_file}")

        if not force:
            self._check_format_version()

    def _check_format_version(self) -> None:
        version = self._config.get('core', 'repositoryformatversion')
        if version is None:
            raise ConfigMissing("Config missing core.repositoryformatversion")
        try:
            number = self._config.get_int('core', 'repositoryformatversion')
        except ValueError:
            raise ConfigVersionUnsupported(version) from None
        if number != SUPPORTED_FORMAT_VERSION:
            raise ConfigVersionUnsupported(version)

    @property
    def work_tree(self) -> Path:
        """Worktree root directory."""
        return self._work_tree

    @property
    def kit_dir(self) -> Path:
        """The .kit metadata directory."""
        return self._kit_dir

    @property
    def config_file(self) -> Path:
        return self._kit_dir / 'config'

    @property
    def config(self) -> Config:
        """Parsed repository configuration."""
        return self._config

    @classmethod
    def create(cls, path='.') -> 'Repository':
        """
        Create a new repository.

        Creates the .kit directory structure:
        .kit/
        ├── branches/
        ├── objects/       # Object database
        ├── refs/
        │   ├── heads/     # Branch references
        │   └── tags/      # Tag references
        ├── description    # Free-text repository name
        ├── HEAD           # Current branch
        └── config         # Repository configuration

        Args:
            path: Worktree root; must be absent or an empty directory

        Returns:
            Repository: Handle on the new repository

        Raises:
            PathNotDirectory: If path exists and is not a directory
            PathNotEmpty: If path is a directory with entries in it
        """
        work_tree = Path(path).resolve()

        state = path_state(work_tree)
        if state is PathState.FILE:
            raise PathNotDirectory(work_tree)
        if state is PathState.DIRECTORY and any(work_tree.iterdir()):
            raise PathNotEmpty(work_tree)

        work_tree.mkdir(parents=True, exist_ok=True)
        repo = cls(work_tree, force=True)

        for segments in SKELETON_DIRS:
            repo_dir(repo, *segments, mkdir=True)

        repo_file(repo, 'description').write_text(DEFAULT_DESCRIPTION)
        repo_file(repo, 'HEAD').write_text(DEFAULT_HEAD)
        repo_file(repo, 'config').write_text(DEFAULT_CONFIG)

        logger.info("Initialized empty Kit repository in %s", repo.kit_dir)
        return cls(work_tree)

    @classmethod
    def find(cls, path='.') -> 'Repository':
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a directory with
        a .kit directory in it or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository: The enclosing repository

        Raises:
            NotAKitRepository: If no enclosing repository exists
            ConfigMissing: If the repository found has no usable config
            ConfigVersionUnsupported: If the repository found is too new
        """
        start = Path(path).resolve()
        current = start

        while True:
            if current.is_dir():
                try:
                    repo = cls(current)
                except NotAKitRepository:
                    pass
                else:
                    logger.debug("Found repository at %s", current)
                    return repo

            # Reached filesystem root
            if current == current.parent:
                raise NotAKitRepository(start)

            current = current.parent

    def head(self) -> str:
        """Return the contents of HEAD."""
        return repo_file(self, 'HEAD').read_text()

    def description(self) -> str:
        """Return the contents of the description file."""
        return repo_file(self, 'description').read_text()

    def write_object(self, obj: KitObject) -> str:
        """
        Write object to repository.

        Args:
            obj: Object to write

        Returns:
            str: SHA-1 hash of the object
        """
        return store.write_object(self, obj.kind, obj.serialize(), persist=True)

    def read_object(self, sha: str) -> KitObject:
        """Read an object by its full id."""
        return store.read_object(self, sha)

    def object_exists(self, sha: str) -> bool:
        """Check if object exists in repository."""
        return store.object_exists(self, sha)

    def hash_file(self, filepath, kind: ObjectKind = ObjectKind.BLOB,
                  write: bool = False) -> str:
        """Hash a file as an object of kind, storing it here if write is set."""
        return store.hash_file(filepath, kind, repo=self, write=write)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self.work_tree == other.work_tree and self.kit_dir == other.kit_dir

    def __hash__(self) -> int:
        return hash((self.work_tree, self.kit_dir))

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
