"""Core functionality for Kit.

This module contains the core data structures:
- Kit objects and their envelope codec
- The loose object database
- Repository creation and discovery
- Path resolution under .kit
- Configuration reading
- Hashing utilities
"""

from kit.core.errors import (
    KitError,
    PathNotDirectory,
    PathNotEmpty,
    NotADirectory,
    NotAKitRepository,
    ConfigMissing,
    ConfigVersionUnsupported,
    UnknownObjectKind,
    MalformedObjectEnvelope,
    CorruptCompressedData,
    ObjectNotFound,
    RepositoryRequiredForWrite,
)
from kit.core.objects import ObjectKind, KitObject, encode, decode
from kit.core.repository import Repository
from kit.core.store import object_id, write_object, read_object, object_exists, hash_file
from kit.core.config import Config

__all__ = [
    'KitError',
    'PathNotDirectory',
    'PathNotEmpty',
    'NotADirectory',
    'NotAKitRepository',
    'ConfigMissing',
    'ConfigVersionUnsupported',
    'UnknownObjectKind',
    'MalformedObjectEnvelope',
    'CorruptCompressedData',
    'ObjectNotFound',
    'RepositoryRequiredForWrite',
    'ObjectKind',
    'KitObject',
    'encode',
    'decode',
    'Repository',
    'object_id',
    'write_object',
    'read_object',
    'object_exists',
    'hash_file',
    'Config',
]
