"""Ordered sets of compiled ignore patterns."""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from pathignore.core.errors import SourceUnavailableError
from pathignore.core.pattern import CompiledPattern, compile_line, normalize_path

logger = logging.getLogger(__name__)


class PatternSet:
    """
    Matches paths against an ordered sequence of ignore patterns.

    Every pattern is tested against every query and the last matching
    pattern decides: a plain pattern ignores the path, a negated one
    includes it again. A path matched by nothing is never ignored.

    Instances are immutable once built and may be shared between
    threads without locking.
    """

    def __init__(self, patterns: Iterable[CompiledPattern] = ()):
        """
        Initialize a pattern set.

        Args:
            patterns: Compiled patterns in source order
        """
        self._patterns: Tuple[CompiledPattern, ...] = tuple(patterns)

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Optional[str] = None) -> 'PatternSet':
        """
        Compile ignore lines into a pattern set.

        Args:
            lines: Raw ignore lines in order
            source: Name recorded on each pattern for diagnostics

        Returns:
            The compiled PatternSet

        Raises:
            PatternSyntaxError: If any line is invalid; nothing is returned
        """
        patterns = []
        for line_number, line in enumerate(lines, start=1):
            pattern = compile_line(line, source=source, line_number=line_number)
            if pattern is not None:
                patterns.append(pattern)
        return cls(patterns)

    @classmethod
    def from_file(cls, path, *extra_lines: str) -> 'PatternSet':
        """
        Compile an ignore file, optionally followed by extra lines.

        Args:
            path: Path to the ignore file
            *extra_lines: In-memory lines appended after the file's lines

        Returns:
            The compiled PatternSet

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
            PatternSyntaxError: If any line is invalid
        """
        source = os.fspath(path)
        try:
            content = Path(source).read_text(encoding='utf-8')
        except OSError as exc:
            raise SourceUnavailableError(source, exc.strerror or 'cannot read ignore file') from exc
        except UnicodeDecodeError as exc:
            raise SourceUnavailableError(source, 'ignore file is not valid UTF-8') from exc

        pattern_set = cls.from_lines(content.splitlines(), source=source)
        if extra_lines:
            pattern_set = pattern_set + cls.from_lines(extra_lines)

        logger.debug("Compiled %d patterns from %s", len(pattern_set), source)
        return pattern_set

    @property
    def patterns(self) -> Tuple[CompiledPattern, ...]:
        """Compiled patterns in evaluation order."""
        return self._patterns

    def match(self, path, is_dir: bool = False) -> Optional[CompiledPattern]:
        """
        Find the pattern that decides a path.

        Args:
            path: The path to check (relative to the root)
            is_dir: Whether the path is a directory

        Returns:
            The last matching pattern, negated or not, or None
        """
        path, is_dir = normalize_path(path, is_dir)
        deciding = None
        for pattern in self._patterns:
            if pattern.matches_normalized(path, is_dir):
                deciding = pattern
        return deciding

    def ignores_path(self, path, is_dir: bool = False) -> bool:
        """
        Check if a path should be ignored.

        The last matching pattern wins. Negation patterns can
        un-ignore previously ignored paths and later plain patterns
        can ignore them again.

        Args:
            path: The path to check (relative to the root)
            is_dir: Whether the path is a directory; a trailing ``/``
                on ``path`` has the same effect

        Returns:
            True if the path should be ignored
        """
        path, is_dir = normalize_path(path, is_dir)

        ignored = False
        for pattern in self._patterns:
            if pattern.matches_normalized(path, is_dir):
                ignored = not pattern.negated
        return ignored

    def includes_path(self, path, is_dir: bool = False) -> bool:
        """Check if a path is kept, the opposite of ``ignores_path``."""
        return not self.ignores_path(path, is_dir)

    def filter_paths(self, paths: Iterable[str],
                     is_dir_func: Optional[Callable[[str], bool]] = None) -> List[str]:
        """
        Filter a list of paths, removing ignored ones.

        Args:
            paths: Paths to filter
            is_dir_func: Optional function to check if path is directory

        Returns:
            List of non-ignored paths
        """
        result = []
        for path in paths:
            is_dir = is_dir_func(path) if is_dir_func else False
            if not self.ignores_path(path, is_dir):
                result.append(path)
        return result

    def __add__(self, other: 'PatternSet') -> 'PatternSet':
        if not isinstance(other, PatternSet):
            return NotImplemented
        return PatternSet(self._patterns + other._patterns)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PatternSet):
            return NotImplemented
        return self._patterns == other._patterns

    def __hash__(self) -> int:
        return hash(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[CompiledPattern]:
        return iter(self._patterns)

    def __repr__(self) -> str:
        """String representation."""
        return f"PatternSet({len(self._patterns)} patterns)"


def compile_from_lines(*lines) -> PatternSet:
    """
    Compile in-memory ignore lines.

    Accepts the lines either as separate arguments or as a single
    iterable::

        compile_from_lines('*.log', '!keep.log')
        compile_from_lines(['*.log', '!keep.log'])

    Raises:
        PatternSyntaxError: If any line is invalid
    """
    if len(lines) == 1 and not isinstance(lines[0], str):
        lines = lines[0]
    return PatternSet.from_lines(lines)


def compile_from_source(path, *extra_lines: str) -> PatternSet:
    """
    Compile an ignore file, with optional extra lines appended.

    Raises:
        SourceUnavailableError: If the file cannot be opened or read
        PatternSyntaxError: If any line is invalid
    """
    return PatternSet.from_file(path, *extra_lines)


def compile_from_sources(*paths) -> PatternSet:
    """Compile several ignore files into one set, in the order given."""
    result = PatternSet()
    for path in paths:
        result = result + PatternSet.from_file(path)
    return result
