"""Repository management for Rift."""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from .config import Config, write_default_config
from .errors import (
    IgnoredError,
    MalformedIndexError,
    NotARepositoryError,
    NotFoundError,
    NothingToCommitError,
    RiftIOError,
)
from .index import Index
from .objects import Blob, Commit
from .store import ObjectStore
from rift.utils.fs import to_posix, write_text_atomic
from rift.utils.ignore import IGNORE_FILE, IgnoreMatcher, get_ignore_matcher

logger = logging.getLogger(__name__)

DEFAULT_HEAD = 'ref: refs/heads/main\n'


@dataclass
class StatusReport:
    """Staged entries at the time status was taken."""
    
    staged: Dict[str, str] = field(default_factory=dict)
    
    @property
    def nothing_staged(self) -> bool:
        return not self.staged
    
    @property
    def paths(self) -> List[str]:
        return sorted(self.staged)


class Repository:
    """
    Represents a Rift repository.
    
    A repository manages the .rift directory structure and ties together
    the object store, the staging index and the ignore rules. State lives
    entirely on disk; a fresh instance per command is enough.
    
    Concurrent processes working on the same repository are not
    coordinated and may race on the index and HEAD.
    """
    
    def __init__(self, path: str = '.'):
        """
        Initialize repository.
        
        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.rift_dir = self.work_tree / '.rift'
        self.objects_dir = self.rift_dir / 'objects'
        self.refs_dir = self.rift_dir / 'refs'
        self.head_file = self.rift_dir / 'HEAD'
        self.index_file = self.rift_dir / 'index'
        self.config_file = self.rift_dir / 'config'
        
        self.objects = ObjectStore(self.objects_dir)
        self._config = None
        self._ignore_matcher = None
    
    @property
    def config(self) -> Config:
        """Get Config instance."""
        if self._config is None:
            self._config = Config(self.config_file)
        return self._config
    
    @property
    def ignore(self) -> IgnoreMatcher:
        """Get IgnoreMatcher for this work tree (loaded once per instance)."""
        if self._ignore_matcher is None:
            ignore_file = self.config.get('core', 'ignorefile', fallback=IGNORE_FILE)
            self._ignore_matcher = get_ignore_matcher(self.work_tree, ignore_file)
        return self._ignore_matcher
    
    def is_initialized(self) -> bool:
        return self.rift_dir.is_dir()
    
    def _require_repository(self) -> None:
        if not self.is_initialized():
            raise NotARepositoryError(f"Not a rift repository: {self.work_tree}")
    
    def init(self) -> 'Repository':
        """
        Initialize a new repository.
        
        Creates the .rift directory structure:
        .rift/
        ├── objects/       # Object database
        ├── refs/          # Reserved for branch references
        ├── HEAD           # Current branch/commit
        └── config         # Repository configuration
        
        Running init again is safe: directories are reused, HEAD is reset
        to its default, and the index and config are left alone.
        
        Returns:
            Repository: self for method chaining
            
        Raises:
            RiftIOError: If a directory or file cannot be created
        """
        for directory in (self.rift_dir, self.objects_dir, self.refs_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise RiftIOError(
                    f"Failed to create directory: {exc.strerror}", directory
                ) from exc
        
        write_text_atomic(self.head_file, DEFAULT_HEAD)
        write_default_config(self.config_file)
        
        logger.debug("Initialized repository at %s", self.rift_dir)
        return self
    
    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.
        
        Args:
            path: Starting path for search
            
        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()
        
        while True:
            if (current / '.rift').is_dir():
                return cls(str(current))
            
            # Reached filesystem root
            if current == current.parent:
                return None
            
            current = current.parent
    
    def relative_path(self, path) -> str:
        """
        Convert a path to its repository-relative form.
        
        Relative paths are taken relative to the repository root.
        
        Raises:
            NotFoundError: If the path lies outside the work tree
        """
        file_path = Path(path)
        if not file_path.is_absolute():
            file_path = self.work_tree / file_path
        
        # Normalize '..' without following symlinks
        file_path = Path(os.path.normpath(file_path))
        try:
            rel_path = file_path.relative_to(self.work_tree)
        except ValueError:
            # work_tree is resolved, the caller's path may go through a symlink
            try:
                rel_path = file_path.resolve().relative_to(self.work_tree)
            except ValueError as exc:
                raise NotFoundError(f"Path is outside repository: {path}") from exc
        return to_posix(rel_path.as_posix())
    
    def load_index(self) -> Index:
        """
        Read the staging index.
        
        A malformed index is logged and treated as empty.
        """
        try:
            return Index.load(self.index_file)
        except MalformedIndexError as exc:
            logger.warning("Ignoring malformed index %s: %s", self.index_file, exc)
            return Index()
    
    def add_file(self, path) -> str:
        """
        Stage a file for commit.
        
        Args:
            path: Path to file (relative to repository root, or absolute)
            
        Returns:
            str: Digest of staged content
            
        Raises:
            NotARepositoryError: If the repository is not initialized
            NotFoundError: If the file does not exist or is not a file
            IgnoredError: If the path matches an ignore pattern
            RiftIOError: If reading the file or writing state fails
        """
        self._require_repository()
        
        rel_path = self.relative_path(path)
        full_path = self.work_tree / rel_path
        
        if not rel_path or not full_path.exists():
            raise NotFoundError(f"File not found: {path}")
        if not full_path.is_file():
            raise NotFoundError(f"Not a file: {path}")
        
        if self.ignore.is_ignored(rel_path):
            raise IgnoredError(rel_path)
        
        try:
            blob = Blob.from_file(str(full_path))
        except OSError as exc:
            raise RiftIOError(f"Cannot read file: {exc.strerror}", full_path) from exc
        
        digest = self.objects.put_object(blob)
        
        index = self.load_index()
        index.add(rel_path, digest)
        index.write(self.index_file)
        
        logger.debug("Staged %s as %s", rel_path, digest)
        return digest
    
    def walk_files(self) -> List[str]:
        """
        List work tree files that are not ignored.
        
        Ignored directories are pruned, their contents are never visited.
        
        Returns:
            Sorted repository-relative paths using '/' separators
        """
        files = []
        
        def on_error(exc: OSError) -> None:
            raise RiftIOError(f"Cannot list directory: {exc.strerror}", exc.filename) from exc
        
        for dirpath, dirnames, filenames in os.walk(self.work_tree, onerror=on_error):
            rel_dir = Path(dirpath).relative_to(self.work_tree).as_posix()
            prefix = '' if rel_dir == '.' else rel_dir + '/'
            
            dirnames[:] = sorted(
                name for name in dirnames
                if not self.ignore.is_ignored(prefix + name, is_dir=True)
            )
            
            for name in filenames:
                rel_path = prefix + name
                if not self.ignore.is_ignored(rel_path):
                    files.append(rel_path)
        
        return sorted(files)
    
    def add_all_files(self) -> List[str]:
        """
        Stage every non-ignored file in the work tree.
        
        Stops at the first file that fails to stage; files staged before
        it stay staged.
        
        Returns:
            List of staged paths
        """
        self._require_repository()
        
        added = []
        for rel_path in self.walk_files():
            self.add_file(rel_path)
            added.append(rel_path)
        return added
    
    def commit(self, message: str, timestamp: Optional[datetime] = None) -> str:
        """
        Create a commit from the staged files.
        
        The commit object is stored, HEAD is pointed at it, then the index
        is cleared. If updating HEAD fails the index keeps its entries so
        the commit can be retried.
        
        Args:
            message: Commit message
            timestamp: Commit time (defaults to now)
            
        Returns:
            str: Digest of the new commit
            
        Raises:
            NotARepositoryError: If the repository is not initialized
            NothingToCommitError: If nothing is staged
            RiftIOError: If writing the commit or HEAD fails
        """
        self._require_repository()
        
        index = self.load_index()
        if len(index) == 0:
            raise NothingToCommitError("Nothing to commit (staging area is empty)")
        
        commit = Commit.create(message, index.all().keys(), timestamp=timestamp)
        commit_hash = self.objects.put_object(commit)
        
        self.update_head(commit_hash)
        
        index.clear()
        index.write(self.index_file)
        
        logger.debug("Created commit %s with %d file(s)", commit_hash, len(commit.files))
        return commit_hash
    
    def status(self) -> StatusReport:
        """
        Report staged entries.
        
        Raises:
            NotARepositoryError: If the repository is not initialized
        """
        self._require_repository()
        return StatusReport(staged=self.load_index().all())
    
    def update_head(self, commit_hash: str) -> None:
        """Point HEAD directly at a commit."""
        write_text_atomic(self.head_file, f'commit: {commit_hash}\n')
    
    def read_head(self) -> str:
        """
        Read HEAD.
        
        Returns:
            The HEAD line without its newline, e.g. 'commit: <digest>'
        """
        self._require_repository()
        try:
            return self.head_file.read_text(encoding='utf-8').strip()
        except FileNotFoundError as exc:
            raise NotFoundError(f"HEAD not found: {self.head_file}") from exc
        except OSError as exc:
            raise RiftIOError(f"Cannot read HEAD: {exc.strerror}", self.head_file) from exc
    
    def head_commit(self) -> Optional[str]:
        """Get commit digest HEAD points at, or None before the first commit."""
        head = self.read_head()
        if head.startswith('commit: '):
            return head[8:]
        return None
    
    def read_commit(self, commit_hash: str) -> Commit:
        """Read and parse a commit object."""
        return Commit.from_bytes(self.objects.get(commit_hash))
    
    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
