"""Core functionality for pathignore.

This module contains:
- Glob to regular expression translation
- Compiled patterns (one per ignore line)
- Pattern sets and last-match-wins evaluation
- Errors raised while compiling
- Configuration management

For default patterns and ignore-file discovery, see pathignore.utils
"""

from pathignore.core.errors import PathIgnoreError, PatternSyntaxError, SourceUnavailableError
from pathignore.core.pattern import CompiledPattern, compile_line, normalize_path
from pathignore.core.pattern_set import (PatternSet, compile_from_lines, compile_from_source,
                                         compile_from_sources)
from pathignore.core.config import Config, get_config

__all__ = [
    'PathIgnoreError',
    'PatternSyntaxError',
    'SourceUnavailableError',
    'CompiledPattern',
    'compile_line',
    'normalize_path',
    'PatternSet',
    'compile_from_lines',
    'compile_from_source',
    'compile_from_sources',
    'Config',
    'get_config',
]
