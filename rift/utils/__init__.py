"""Utilities module for common helper functions.

This module contains:
- Filesystem utilities (durable writes, path normalization)
- Ignore file handling (.riftignore)
"""

from rift.utils.ignore import IgnoreMatcher, IgnorePattern, get_ignore_matcher

__all__ = [
    'IgnoreMatcher', 'IgnorePattern', 'get_ignore_matcher',
]
