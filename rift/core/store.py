"""Content-addressable object store."""

import logging
from pathlib import Path
from typing import Union

from .errors import ObjectNotFoundError, RiftIOError
from .hash import hash_object, is_digest
from .objects import RiftObject
from rift.utils.fs import write_bytes_atomic

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    Stores immutable objects keyed by the SHA-256 digest of their content.
    
    Objects live in a flat directory, one file per digest, holding the
    raw bytes that were stored. Storing the same content twice yields the
    same digest and leaves the existing file untouched.
    """
    
    def __init__(self, objects_dir: Union[str, Path]):
        """
        Initialize object store.
        
        Args:
            objects_dir: Directory holding object files (.rift/objects)
        """
        self.objects_dir = Path(objects_dir)
    
    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for an object.
        
        Args:
            digest: 64-character SHA-256 hex digest
            
        Returns:
            Path: Full path to object file
        """
        return self.objects_dir / digest
    
    def put(self, data: bytes) -> str:
        """
        Write object to the store.
        
        The write is durable when this returns.
        
        Args:
            data: Object content
            
        Returns:
            str: SHA-256 digest of the content
            
        Raises:
            RiftIOError: If the object cannot be written
        """
        digest = hash_object(data)
        path = self.object_path(digest)
        
        # Object already exists
        if path.exists():
            return digest
        
        if not self.objects_dir.is_dir():
            raise RiftIOError("Object directory does not exist", self.objects_dir)
        
        write_bytes_atomic(path, data)
        logger.debug("Stored object %s (%d bytes)", digest, len(data))
        return digest
    
    def put_object(self, obj: RiftObject) -> str:
        """
        Write a Rift object to the store.
        
        The object is stored as its serialized bytes, so the returned
        digest equals obj.hash.
        
        Returns:
            str: SHA-256 digest of the object
        """
        return self.put(obj.serialize())
    
    def get(self, digest: str) -> bytes:
        """
        Read object content.
        
        Args:
            digest: 64-character SHA-256 hex digest
            
        Returns:
            bytes: Object content exactly as stored
            
        Raises:
            ObjectNotFoundError: If no object with that digest exists
            RiftIOError: If the object exists but cannot be read
        """
        if not is_digest(digest):
            raise ObjectNotFoundError(f"Object {digest} not found")
        
        path = self.object_path(digest)
        
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise ObjectNotFoundError(f"Object {digest} not found") from exc
        except OSError as exc:
            raise RiftIOError(f"Cannot read object {digest}: {exc.strerror}", path) from exc
    
    def exists(self, digest: str) -> bool:
        """Check if object exists in the store."""
        return is_digest(digest) and self.object_path(digest).is_file()
    
    def __repr__(self) -> str:
        """String representation."""
        return f"ObjectStore(path={self.objects_dir})"
