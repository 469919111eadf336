"""Path resolution under a repository's .kit directory.

All paths inside the metadata root are built here, so bootstrap code and
the object store agree on how joining and directory creation work.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import NotADirectory


class PathState(Enum):
    """What, if anything, lives at a filesystem path."""

    ABSENT = 'absent'
    FILE = 'file'
    DIRECTORY = 'directory'


def path_state(path) -> PathState:
    """
    Report whether a path is a directory, some other file, or absent.

    Args:
        path: Path to inspect

    Returns:
        PathState: DIRECTORY, FILE or ABSENT
    """
    path = Path(path)
    if path.is_dir():
        return PathState.DIRECTORY
    if path.exists():
        return PathState.FILE
    return PathState.ABSENT


def repo_path(repo, *segments: str) -> Path:
    """Join segments onto the repository's .kit directory."""
    return repo.kit_dir.joinpath(*segments)


def repo_dir(repo, *segments: str, mkdir: bool = False) -> Optional[Path]:
    """
    Resolve a directory under .kit, optionally creating it.

    Args:
        repo: Repository whose .kit directory is the root
        segments: Path components relative to .kit
        mkdir: Create missing directories (including parents)

    Returns:
        Path to the directory, or None if it is absent and mkdir is False

    Raises:
        NotADirectory: If the directory or one of its parents is a file
    """
    path = repo_path(repo, *segments)

    # Check each component from .kit down
    for depth in range(len(segments) + 1):
        current = repo_path(repo, *segments[:depth])
        state = path_state(current)
        if state is PathState.FILE:
            raise NotADirectory(current)
        if state is PathState.ABSENT:
            if not mkdir:
                return None
            path.mkdir(parents=True, exist_ok=True)
            return path

    return path


def repo_file(repo, *segments: str, mkdir: bool = False) -> Optional[Path]:
    """
    Resolve a file path under .kit.

    Only the parent directory is created; the file itself is left to the
    caller.

    Args:
        repo: Repository whose .kit directory is the root
        segments: Path components relative to .kit, the last being the file name
        mkdir: Create the parent directory if it is missing

    Returns:
        Path to the file, or None if its directory is absent and mkdir is False
    """
    if repo_dir(repo, *segments[:-1], mkdir=mkdir) is None:
        return None
    return repo_path(repo, *segments)
