"""Rift objects."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from .hash import hash_object


class RiftObject(ABC):
    """Base class for all Rift objects."""
    
    def __init__(self):
        self._hash: Optional[str] = None
    
    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.
        
        Returns:
            bytes: Exactly the bytes stored in the object store
        """
        pass
    
    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.
        
        Args:
            data: Serialized object data
        """
        pass
    
    @property
    def type(self) -> str:
        """Return object type name (blob, commit)."""
        return self.__class__.__name__.lower()
    
    def compute_hash(self) -> str:
        """
        Compute and cache object hash.
        
        The digest covers the serialized bytes only, with no header, so it
        equals the key the object store files it under.
        
        Returns:
            str: 64-character SHA-256 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash
    
    @property
    def hash(self) -> str:
        """Get object hash."""
        return self.compute_hash()


class Blob(RiftObject):
    """
    Represents file content.
    
    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """
    
    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''
    
    def serialize(self) -> bytes:
        return self.data
    
    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None
    
    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """Create blob from file."""
        with open(filepath, 'rb') as f:
            return cls(f.read())
    
    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Commit(RiftObject):
    """
    Represents a snapshot of the staged files.
    
    A commit captures:
    - Timestamp (timezone-aware)
    - The sorted list of staged paths
    - Commit message
    
    Serialized form::
    
        timestamp 2024-05-01T12:00:00+02:00
        file a.txt
        file src/b.py
        
        <commit message>
    """
    
    def __init__(self):
        """Initialize empty commit."""
        super().__init__()
        self.message: str = ''
        self.timestamp: Optional[datetime] = None
        self.files: List[str] = []
    
    def serialize(self) -> bytes:
        lines = []
        
        if self.timestamp is not None:
            lines.append(f'timestamp {self.timestamp.isoformat()}')
        
        for path in sorted(self.files):
            lines.append(f'file {path}')
        
        lines.append('')
        lines.append(self.message)
        
        return '\n'.join(lines).encode('utf-8')
    
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from bytes.
        
        Raises:
            ValueError: If a header line is not recognized
        """
        lines = data.decode('utf-8').split('\n')
        
        self.timestamp = None
        self.files = []
        message_start = len(lines)
        for i, line in enumerate(lines):
            if not line:
                message_start = i + 1
                break
            
            if line.startswith('timestamp '):
                self.timestamp = datetime.fromisoformat(line[10:])
            elif line.startswith('file '):
                self.files.append(line[5:])
            else:
                raise ValueError(f"Invalid commit header: {line!r}")
        
        self.message = '\n'.join(lines[message_start:])
        self._hash = None
    
    @classmethod
    def create(
        cls,
        message: str,
        files: Iterable[str],
        timestamp: Optional[datetime] = None
    ) -> 'Commit':
        """
        Create a new commit.
        
        Args:
            message: Commit message
            files: Paths staged at commit time
            timestamp: Commit time (defaults to now, local timezone).
                Naive datetimes are interpreted as local time.
            
        Returns:
            Commit: New commit object
        """
        if timestamp is None:
            timestamp = datetime.now().astimezone()
        elif timestamp.tzinfo is None:
            timestamp = timestamp.astimezone()
        
        commit = cls()
        commit.message = message
        commit.timestamp = timestamp
        commit.files = sorted(set(files))
        return commit
    
    @classmethod
    def from_bytes(cls, data: bytes) -> 'Commit':
        """Parse a commit read from the object store."""
        commit = cls()
        commit.deserialize(data)
        return commit
    
    def __repr__(self) -> str:
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}, files={len(self.files)}, msg='{msg_preview}')"
