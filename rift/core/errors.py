"""Exceptions raised by Rift operations."""

from pathlib import Path
from typing import Optional, Union


class RiftError(Exception):
    """Base exception for Rift."""

    pass


class RiftIOError(RiftError):
    """Raised when a filesystem operation fails."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None

    def __str__(self) -> str:
        message = super().__str__()
        if self.path and self.path not in message:
            return f"{message}: {self.path}"
        return message


class NotFoundError(RiftError):
    """Raised when a referenced file or object does not exist."""

    pass


class ObjectNotFoundError(NotFoundError):
    """Raised when an object is not in the object store."""

    pass


class NotARepositoryError(NotFoundError):
    """Raised when no .rift directory exists at the repository root."""

    pass


class IgnoredError(RiftError):
    """Raised when staging a path excluded by ignore patterns."""

    def __init__(self, path: str):
        super().__init__(f"Path is ignored by ignore rules: {path}")
        self.path = path


class NothingToCommitError(RiftError):
    """Raised when committing with an empty staging index."""

    pass


class MalformedIndexError(RiftError):
    """Raised when the index file or an index entry cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
        self.line_number = line_number
