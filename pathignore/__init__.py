"""pathignore - gitignore-style path matching implemented in Python."""

__version__ = '0.1.0'

from pathignore.core.errors import PathIgnoreError, PatternSyntaxError, SourceUnavailableError
from pathignore.core.pattern import CompiledPattern
from pathignore.core.pattern_set import (PatternSet, compile_from_lines, compile_from_source,
                                         compile_from_sources)

__all__ = [
    'PathIgnoreError',
    'PatternSyntaxError',
    'SourceUnavailableError',
    'CompiledPattern',
    'PatternSet',
    'compile_from_lines',
    'compile_from_source',
    'compile_from_sources',
]
