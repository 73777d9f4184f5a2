"""Core functionality for Rift.

This module contains the core data structures:
- Rift objects (Blob, Commit)
- Object store
- Repository management
- Index/staging area
- Configuration management
- Hashing utilities
- Error types

For utilities like ignore matching, see rift.utils
"""

from rift.core.errors import (
    RiftError,
    RiftIOError,
    NotFoundError,
    ObjectNotFoundError,
    NotARepositoryError,
    IgnoredError,
    NothingToCommitError,
    MalformedIndexError,
)
from rift.core.objects import RiftObject, Blob, Commit
from rift.core.store import ObjectStore
from rift.core.repository import Repository, StatusReport
from rift.core.hash import hash_object
from rift.core.index import Index
from rift.core.config import Config

__all__ = [
    'RiftError',
    'RiftIOError',
    'NotFoundError',
    'ObjectNotFoundError',
    'NotARepositoryError',
    'IgnoredError',
    'NothingToCommitError',
    'MalformedIndexError',
    'RiftObject',
    'Blob',
    'Commit',
    'ObjectStore',
    'Repository',
    'StatusReport',
    'Index',
    'Config',
    'hash_object',
]
