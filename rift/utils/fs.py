"""Filesystem helpers."""

import os
import tempfile
from pathlib import Path
from typing import Union

from rift.core.errors import RiftIOError


def write_bytes_atomic(path: Union[str, Path], data: bytes) -> None:
    """
    Write bytes to a file durably.
    
    The data is written to a temporary file in the same directory,
    flushed and fsynced, then renamed over the target. Either the old
    content or the complete new content is visible, never a mix.
    
    Args:
        path: Destination file
        data: Content to write
        
    Raises:
        RiftIOError: If the file cannot be written
    """
    path = Path(path)
    try:
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix='.tmp_')
    except OSError as exc:
        raise RiftIOError(f"Cannot write {path.name}: {exc.strerror}", path) from exc

    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as exc:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise RiftIOError(f"Cannot write {path.name}: {exc.strerror}", path) from exc


def write_text_atomic(path: Union[str, Path], text: str) -> None:
    """Write text (UTF-8) to a file durably."""
    write_bytes_atomic(path, text.encode('utf-8'))


def to_posix(path: str) -> str:
    """
    Normalize a relative path to forward slashes without a leading './'.
    
    Args:
        path: Relative path in any platform format
        
    Returns:
        Canonical form used for index keys and ignore matching
    """
    path = path.replace('\\', '/')
    if os.sep != '/':
        path = path.replace(os.sep, '/')
    while path.startswith('./'):
        path = path[2:]
    return path
