"""Rift - A minimal content-addressable version control backend."""

__version__ = '0.1.0'

from rift.core.repository import Repository, StatusReport
from rift.core.objects import RiftObject, Blob, Commit

__all__ = [
    'Repository',
    'StatusReport',
    'RiftObject',
    'Blob',
    'Commit',
]
