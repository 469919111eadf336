"""Object database for Kit.

Objects are addressed by the SHA-1 of their envelope and stored loose,
zlib-compressed, under .kit/objects/<first 2 hex>/<remaining 38 hex>.
"""

import logging
import os
import tempfile
import zlib
from pathlib import Path
from typing import Optional

from .errors import CorruptCompressedData, ObjectNotFound, RepositoryRequiredForWrite
from .hash import hash_bytes, is_object_id
from .objects import ObjectKind, KitObject, encode
from .paths import repo_file

logger = logging.getLogger(__name__)

COMPRESSION_LEVEL = zlib.Z_BEST_SPEED

# Objects are never modified in place
OBJECT_MODE = 0o444


def _current_umask() -> int:
    """Read the process umask (os.umask can only read it by setting it)."""
    mask = os.umask(0)
    os.umask(mask)
    return mask


def object_id(kind: ObjectKind, data: bytes) -> str:
    """
    Compute the id an object would be stored under.

    Args:
        kind: Object kind
        data: Raw object data

    Returns:
        str: 40-character SHA-1 hash of the envelope
    """
    return hash_bytes(encode(kind, data))


def object_path(repo, sha: str, mkdir: bool = False) -> Optional[Path]:
    """
    Get filesystem path for an object.

    Objects are stored in subdirectories named by the first 2 characters
    of the hash, with the remaining 38 characters as the filename.

    Args:
        repo: Repository holding the object database
        sha: 40-character SHA-1 hash
        mkdir: Create the subdirectory if it is missing

    Returns:
        Path to the object file, or None if its subdirectory is absent
    """
    return repo_file(repo, 'objects', sha[:2], sha[2:], mkdir=mkdir)


def object_exists(repo, sha: str) -> bool:
    """Check if an object is stored in the repository."""
    if not is_object_id(sha):
        return False
    path = object_path(repo, sha)
    return path is not None and path.is_file()


def write_object(repo, kind: ObjectKind, data: bytes, persist: bool = True) -> str:
    """
    Hash an object and optionally store it.

    The file is written to a temporary name in the target directory and
    renamed into place, so a reader never sees a partial object. An object
    already on disk is left untouched.

    Args:
        repo: Repository to write into (unused when persist is False)
        kind: Object kind
        data: Raw object data
        persist: Write the object to disk

    Returns:
        str: Object id
    """
    raw = encode(kind, data)
    sha = hash_bytes(raw)

    if not persist:
        return sha

    path = object_path(repo, sha, mkdir=True)
    if path.exists():
        logger.debug("Object %s already stored", sha)
        return sha

    compressed = zlib.compress(raw, COMPRESSION_LEVEL)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix='.tmp-')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(compressed)
        os.chmod(tmp_path, OBJECT_MODE & ~_current_umask())
        Path(tmp_path).replace(path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise

    logger.debug("Wrote %s object %s (%d bytes)", kind.value, sha, len(data))
    return sha


def read_object(repo, sha: str) -> KitObject:
    """
    Read object from repository.

    Args:
        repo: Repository holding the object
        sha: Full 40-character object id

    Returns:
        KitObject: The stored object, bound to repo

    Raises:
        ObjectNotFound: If the id is malformed or nothing is stored under it
        CorruptCompressedData: If the stored bytes fail to decompress
        UnknownObjectKind: If the stored kind is not known
        MalformedObjectEnvelope: If the stored header is invalid
    """
    if not is_object_id(sha):
        raise ObjectNotFound(sha)

    path = object_path(repo, sha)
    if path is None or not path.is_file():
        raise ObjectNotFound(sha)

    compressed = path.read_bytes()
    try:
        raw = zlib.decompress(compressed)
    except zlib.error as e:
        raise CorruptCompressedData(sha, e) from e

    obj = KitObject.from_envelope(raw, repo)
    logger.debug("Read %s object %s", obj.type, sha)
    return obj


def hash_file(filepath, kind: ObjectKind = ObjectKind.BLOB, repo=None,
              write: bool = False) -> str:
    """
    Compute the id of a file's contents as an object of the given kind.

    Args:
        filepath: Path to the file
        kind: Object kind to frame the contents as
        repo: Repository to write into, if any
        write: Store the object as well as hashing it

    Returns:
        str: Object id

    Raises:
        RepositoryRequiredForWrite: If write is requested without a repository
    """
    if write and repo is None:
        raise RepositoryRequiredForWrite()

    obj = KitObject.from_file(kind, filepath, repo)
    if write:
        return write_object(repo, obj.kind, obj.serialize(), persist=True)
    return obj.hash
