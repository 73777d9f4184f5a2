"""Ignore pattern matching for .riftignore files."""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from rift.core.errors import RiftIOError
from rift.utils.fs import to_posix

logger = logging.getLogger(__name__)

IGNORE_FILE = '.riftignore'

DEFAULT_IGNORE_PATTERNS = [
    '.rift',
    '.rift/**',
    '.DS_Store',
    'Thumbs.db',
]

# Glob characters and their regex replacements. Everything else is passed
# to the regex engine as-is. '*' is handled separately by translate_pattern.
GLOB_TRANSLATIONS = {
    '.': r'\.',
    '?': '.',
}

STAR = '.*'
ANCHORED_PREFIX = ''
UNANCHORED_PREFIX = '(?:.*/)?'
SUBTREE_SUFFIX = '(?:/.*)?'

_STAR_RUN = re.compile(r'\*+')


def _translate_chars(text: str) -> str:
    return ''.join(GLOB_TRANSLATIONS.get(c, c) for c in text)


def translate_pattern(pattern: str) -> str:
    """
    Convert an ignore pattern to a regular expression.
    
    Rules:
    - ``.`` is literal, ``*`` matches any run of characters (``/``
      included, so ``*`` and ``**`` behave the same), ``?`` matches one
      character
    - a trailing ``/`` matches everything beneath that directory
    - a leading ``/`` anchors to the repository root, otherwise the
      pattern may start at any path segment
    - every pattern also matches paths nested below a match
    
    The result is meant for ``fullmatch``. Every ``*`` except the last
    becomes an atomic "shortest run up to the next literal" group (the
    lookahead and backreference form used by ``fnmatch``), so chains of
    stars cannot backtrack into each other.
    
    Args:
        pattern: A gitignore-style pattern
        
    Returns:
        Regular expression source
    """
    anchored = pattern.startswith('/')
    if anchored:
        pattern = pattern[1:]
    
    if pattern.endswith('/'):
        pattern += '*'
    
    pieces = [_translate_chars(piece) for piece in _STAR_RUN.split(pattern)]
    
    body = pieces[0]
    for number, piece in enumerate(pieces[1:-1], start=1):
        body += f'(?=(?P<g{number}>.*?{piece}))(?P=g{number})'
    if len(pieces) > 1:
        body += STAR + pieces[-1]
    
    prefix = ANCHORED_PREFIX if anchored else UNANCHORED_PREFIX
    return prefix + body + SUBTREE_SUFFIX


class IgnorePattern:
    """Represents a single compiled ignore pattern."""
    
    def __init__(self, pattern: str):
        """
        Compile an ignore pattern.
        
        Args:
            pattern: The glob pattern to match
            
        Raises:
            re.error: If the translated pattern is not a valid regex
        """
        self.original = pattern
        self.regex_source = translate_pattern(pattern)
        self._regex = re.compile(self.regex_source, re.DOTALL)
    
    def matches(self, path: str) -> bool:
        """
        Check if a normalized path matches this pattern.
        
        Args:
            path: Path relative to repo root, using '/' separators
        """
        return self._regex.fullmatch(path) is not None
    
    def __repr__(self) -> str:
        return f"IgnorePattern({self.original!r})"


class IgnoreMatcher:
    """Matches paths against a set of ignore patterns."""
    
    def __init__(self):
        """Initialize empty matcher."""
        self.patterns: List[IgnorePattern] = []
        self._cache: Dict[Tuple[str, bool], bool] = {}
    
    def add_pattern(self, pattern: str) -> Optional[IgnorePattern]:
        """
        Add a pattern to the matcher.
        
        Blank lines and comments are skipped. A pattern that does not
        compile is logged and dropped; the other patterns stay active.
        
        Args:
            pattern: A gitignore-style pattern
            
        Returns:
            The compiled pattern, or None if it was skipped
        """
        pattern = pattern.strip()
        if not pattern or pattern.startswith('#'):
            return None
        
        try:
            compiled = IgnorePattern(pattern)
        except re.error as exc:
            logger.warning("Skipping invalid ignore pattern %r: %s", pattern, exc)
            return None
        
        self.patterns.append(compiled)
        self._cache.clear()
        return compiled
    
    def add_patterns(self, patterns: List[str]) -> None:
        """Add multiple patterns."""
        for pattern in patterns:
            self.add_pattern(pattern)
    
    def load_file(self, path: Path) -> bool:
        """
        Load patterns from an ignore file.
        
        Args:
            path: Path to the ignore file
            
        Returns:
            True if the file existed and was loaded
            
        Raises:
            RiftIOError: If the file exists but cannot be read
        """
        try:
            content = Path(path).read_text(encoding='utf-8')
        except FileNotFoundError:
            return False
        except (OSError, UnicodeDecodeError) as exc:
            raise RiftIOError(f"Cannot read ignore file: {exc}", path) from exc
        
        for line in content.splitlines():
            self.add_pattern(line)
        return True
    
    def is_ignored(self, path: str, is_dir: bool = False) -> bool:
        """
        Check if a path should be ignored.
        
        A path is ignored if any pattern matches it. Directories are also
        tested with a trailing '/' so that ``build/`` matches ``build``.
        
        Args:
            path: The path to check (relative to repo root)
            is_dir: Whether the path is a directory
            
        Returns:
            True if the path should be ignored
        """
        cache_key = (path, is_dir)
        if cache_key in self._cache:
            return self._cache[cache_key]
        
        normalized = to_posix(path)
        candidates = [normalized]
        if is_dir and not normalized.endswith('/'):
            candidates.append(normalized + '/')
        
        ignored = any(
            pattern.matches(candidate)
            for pattern in self.patterns
            for candidate in candidates
        )
        
        self._cache[cache_key] = ignored
        return ignored
    
    def __len__(self) -> int:
        return len(self.patterns)


def get_ignore_matcher(repo_root: Path, ignore_file: str = IGNORE_FILE) -> IgnoreMatcher:
    """
    Create an IgnoreMatcher with default patterns for a repository.
    
    Loads patterns from:
    1. Built-in defaults (.rift directory, OS metadata files)
    2. The ignore file in repo root, if present
    
    Args:
        repo_root: Path to repository root
        ignore_file: Name of the ignore file, relative to repo_root
        
    Returns:
        Configured IgnoreMatcher instance
        
    Raises:
        RiftIOError: If the ignore file exists but cannot be read
    """
    matcher = IgnoreMatcher()
    matcher.add_patterns(DEFAULT_IGNORE_PATTERNS)
    matcher.load_file(Path(repo_root) / ignore_file)
    return matcher
