"""Kit objects and the envelope they are stored in.

Every object is framed as::

    <kind> <size>\\0<data>

where <kind> is one of commit, tree, tag or blob and <size> is the decimal
byte length of <data>. The same bytes are hashed to get the object id and
compressed to store it.
"""

from enum import Enum
from typing import Optional, Tuple

from .errors import UnknownObjectKind, MalformedObjectEnvelope
from .hash import hash_bytes


class ObjectKind(Enum):
    """The four kinds of Kit object, valued by their canonical name."""

    COMMIT = 'commit'
    TREE = 'tree'
    TAG = 'tag'
    BLOB = 'blob'

    @classmethod
    def parse(cls, name: str) -> 'ObjectKind':
        """
        Look up a kind by its canonical name.

        Raises:
            UnknownObjectKind: If name is not a known kind
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownObjectKind(name) from None

    @classmethod
    def names(cls) -> list:
        """Canonical names of all kinds."""
        return [kind.value for kind in cls]

    def __str__(self) -> str:
        return self.value


def encode(kind: ObjectKind, data: bytes) -> bytes:
    """
    Frame object data in its envelope.

    Args:
        kind: Object kind
        data: Raw object data

    Returns:
        bytes: <kind> <size>\\0<data>
    """
    header = f"{kind.value} {len(data)}\0".encode('ascii')
    return header + data


def decode(raw: bytes) -> Tuple[ObjectKind, bytes]:
    """
    Split an envelope back into its kind and data.

    The NUL separator is searched for after the kind name, and the size field
    may only hold digits, so NUL bytes inside the data are preserved.

    Args:
        raw: Envelope bytes

    Returns:
        Tuple of (kind, data)

    Raises:
        UnknownObjectKind: If the kind name is not known
        MalformedObjectEnvelope: If the header or size is invalid
    """
    space = raw.find(b' ')
    if space < 0:
        raise MalformedObjectEnvelope("Invalid object header: no kind separator")

    kind = ObjectKind.parse(raw[:space].decode('ascii', errors='replace'))

    null = raw.find(b'\0', space + 1)
    if null < 0:
        raise MalformedObjectEnvelope("Invalid object header: no size terminator")

    size_field = raw[space + 1:null]
    if not size_field or not size_field.isdigit():
        raise MalformedObjectEnvelope(f"Invalid object size: {size_field!r}")

    size = int(size_field)
    data = raw[null + 1:]
    if len(data) != size:
        raise MalformedObjectEnvelope(
            f"Object size mismatch: expected {size}, got {len(data)}"
        )

    return kind, data


class KitObject:
    """
    An object of any kind held in memory.

    The four kinds share one representation: a kind tag, the raw data, and
    the repository the object belongs to. Data of None marks an object that
    has not been filled in yet and is treated as empty when hashed.
    """

    def __init__(self, kind: ObjectKind, data: Optional[bytes] = None, repo=None):
        """
        Initialize an object.

        Args:
            kind: Object kind
            data: Raw object data, or None for a placeholder
            repo: Repository the object belongs to, if any
        """
        self.kind = kind
        self.data = data
        self.repo = repo

    @property
    def type(self) -> str:
        """Canonical kind name (commit, tree, tag, blob)."""
        return self.kind.value

    def serialize(self) -> bytes:
        """
        Return the object's raw data.

        Returns:
            bytes: Object data, empty for a placeholder
        """
        return self.data if self.data is not None else b''

    def deserialize(self, data: bytes) -> None:
        """
        Replace the object's data.

        Args:
            data: Raw object data
        """
        self.data = data

    def encode(self) -> bytes:
        """Return the object framed in its envelope."""
        return encode(self.kind, self.serialize())

    @property
    def hash(self) -> str:
        """
        Get object id.

        Returns:
            str: 40-character SHA-1 hash of the envelope
        """
        return hash_bytes(self.encode())

    @classmethod
    def from_envelope(cls, raw: bytes, repo=None) -> 'KitObject':
        """Build an object from envelope bytes."""
        kind, data = decode(raw)
        return cls(kind, data, repo)

    @classmethod
    def from_file(cls, kind: ObjectKind, filepath, repo=None) -> 'KitObject':
        """
        Create an object whose data is a file's contents.

        Args:
            kind: Object kind
            filepath: Path to file
            repo: Repository the object belongs to, if any

        Returns:
            KitObject: New object containing the file's bytes
        """
        with open(filepath, 'rb') as f:
            return cls(kind, f.read(), repo)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KitObject):
            return NotImplemented
        return self.kind is other.kind and self.serialize() == other.serialize()

    def __hash__(self) -> int:
        return hash((self.kind, self.serialize()))

    def __repr__(self) -> str:
        size = len(self.serialize())
        return f"KitObject(type={self.type}, hash={self.hash[:7]}, size={size})"
