"""Kit - a content-addressed object store and repository layer for a Git-like VCS."""

__version__ = '0.1.0'

from kit.core.repository import Repository
from kit.core.objects import ObjectKind, KitObject

__all__ = [
    'Repository',
    'ObjectKind',
    'KitObject',
]
