"""Index (staging area) implementation."""

from pathlib import Path
from typing import Dict, Optional, Union

from .errors import MalformedIndexError, RiftIOError
from .hash import is_digest
from rift.utils.fs import write_text_atomic


class Index:
    """
    Rift index (staging area) implementation.
    
    The index maps repository-relative paths to the digest of the content
    that will go into the next commit. Adding a path that is already
    staged replaces its digest.
    
    On disk the index is plain text, one ``<path> <digest>`` line per
    entry, sorted by path.
    """
    
    def __init__(self):
        """Initialize empty index."""
        self.entries: Dict[str, str] = {}
    
    def add(self, path: str, digest: str) -> None:
        """
        Add or update entry in index.
        
        Args:
            path: File path relative to repository root
            digest: SHA-256 digest of file content
        """
        self.entries[path] = digest
    
    def get(self, path: str) -> Optional[str]:
        """Get staged digest for a path."""
        return self.entries.get(path)
    
    def all(self) -> Dict[str, str]:
        """
        Snapshot of all entries.
        
        Returns:
            A copy of the path -> digest mapping; later changes to the
            index are not visible through it.
        """
        return dict(self.entries)
    
    def clear(self) -> None:
        """Clear all entries from index."""
        self.entries.clear()
    
    def serialize(self) -> str:
        """
        Serialize index to text.
        
        Raises:
            MalformedIndexError: If an entry cannot be represented
        """
        lines = []
        for path in sorted(self.entries):
            digest = self.entries[path]
            if not path or '\n' in path:
                raise MalformedIndexError(f"Invalid index path: {path!r}")
            if not is_digest(digest):
                raise MalformedIndexError(f"Invalid digest for {path}: {digest!r}")
            lines.append(f"{path} {digest}\n")
        return ''.join(lines)
    
    def deserialize(self, content: str) -> None:
        """
        Replace entries with those parsed from text.
        
        Entries are separated by LF only, so other line-break characters
        (CR, form feed, U+2028 ...) are ordinary path characters. The digest
        is everything after the last space on a line, so paths may contain
        spaces.
        
        Raises:
            MalformedIndexError: If a line is not a valid entry
        """
        entries = {}
        for number, line in enumerate(content.split('\n'), start=1):
            if not line:
                continue
            path, sep, digest = line.rpartition(' ')
            if not sep or not path:
                raise MalformedIndexError("Index entry has no digest", number)
            if not is_digest(digest):
                raise MalformedIndexError(f"Invalid digest {digest!r}", number)
            entries[path] = digest
        self.entries = entries
    
    def write(self, index_path: Union[str, Path]) -> None:
        """
        Write index to disk.
        
        Args:
            index_path: Path to index file
            
        Raises:
            MalformedIndexError: If an entry is invalid (nothing is written)
            RiftIOError: If the file cannot be written
        """
        write_text_atomic(index_path, self.serialize())
    
    def read(self, index_path: Union[str, Path]) -> None:
        """
        Read index from disk.
        
        A missing index file is an empty index.
        
        Args:
            index_path: Path to index file
            
        Raises:
            MalformedIndexError: If the file is not a valid index
            RiftIOError: If the file exists but cannot be read
        """
        path = Path(index_path)
        try:
            content = path.read_bytes().decode('utf-8')
        except FileNotFoundError:
            self.entries.clear()
            return
        except UnicodeDecodeError as exc:
            raise MalformedIndexError("Index is not valid UTF-8") from exc
        except OSError as exc:
            raise RiftIOError(f"Cannot read index: {exc.strerror}", path) from exc
        
        self.deserialize(content)
    
    @classmethod
    def load(cls, index_path: Union[str, Path]) -> 'Index':
        """Create an index populated from disk."""
        index = cls()
        index.read(index_path)
        return index
    
    def __contains__(self, path: str) -> bool:
        return path in self.entries
    
    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.entries)
    
    def __repr__(self) -> str:
        """String representation."""
        return f"Index(entries={len(self.entries)})"
