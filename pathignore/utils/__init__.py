"""Utilities module for common helper functions.

This module contains:
- Common ignore patterns
- Discovery of the configured ignore files
"""

from pathignore.utils.defaults import COMMON_IGNORE_PATTERNS, load_ignore_patterns

__all__ = [
    'COMMON_IGNORE_PATTERNS', 'load_ignore_patterns',
]
