"""Compiled ignore patterns."""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from pathignore.core.errors import PatternSyntaxError
from pathignore.core.translate import translate

logger = logging.getLogger(__name__)


def normalize_path(path, is_dir: bool = False) -> Tuple[str, bool]:
    """
    Normalise a candidate path for matching.

    Separators become ``/``, a leading ``./`` or ``/`` is dropped and a
    trailing ``/`` marks the path as a directory.

    Args:
        path: Path to normalise (str or os.PathLike)
        is_dir: Whether the caller already knows the path is a directory

    Returns:
        Tuple of (root-relative path, is_dir)
    """
    path = os.fspath(path).replace('\\', '/')
    if os.sep != '/':
        path = path.replace(os.sep, '/')

    while path.startswith('./'):
        path = path[2:]
    path = path.lstrip('/')

    if path.endswith('/'):
        is_dir = True
        path = path.rstrip('/')
    if path == '.':
        path = ''

    return path, is_dir


def _is_escaped(text: str, index: int) -> bool:
    """Check whether ``text[index]`` is preceded by an odd number of backslashes."""
    count = 0
    index -= 1
    while index >= 0 and text[index] == '\\':
        count += 1
        index -= 1
    return count % 2 == 1


def _strip_line(line: str) -> str:
    """Drop line terminators and unescaped trailing spaces."""
    text = line.rstrip('\r\n')
    while text.endswith(' ') and not _is_escaped(text, len(text) - 1):
        text = text[:-1]
    return text


@dataclass(frozen=True)
class CompiledPattern:
    """
    A single ignore line translated into a matching rule.

    ``original`` is the source line with its line terminator and
    unescaped trailing spaces removed; it keeps any ``!`` prefix and
    trailing ``/``, and two patterns compare equal when it and the
    flags agree.
    """
    original: str
    regex: re.Pattern = field(compare=False)
    negated: bool = False
    directory_only: bool = False
    anchored: bool = False
    source: Optional[str] = field(default=None, compare=False)
    line_number: Optional[int] = field(default=None, compare=False)

    def matches(self, path, is_dir: bool = False) -> bool:
        """
        Check if a path matches this pattern.

        The negation flag is not applied here; a negated pattern still
        reports the paths it matches.

        Args:
            path: The path to check (relative to the root)
            is_dir: Whether the path is a directory

        Returns:
            True if the path matches this pattern
        """
        path, is_dir = normalize_path(path, is_dir)
        return self.matches_normalized(path, is_dir)

    def matches_normalized(self, path: str, is_dir: bool = False) -> bool:
        """Like ``matches`` for a path already passed through ``normalize_path``."""
        if not path:
            return False

        # A directory-only pattern applies to a file through one of its
        # parent directories
        if self.directory_only and not is_dir:
            path, sep, _ = path.rpartition('/')
            if not sep:
                return False

        return self.regex.fullmatch(path) is not None

    @property
    def location(self) -> str:
        """``source:line`` for diagnostics, empty parts when unknown."""
        source = self.source or ''
        line_number = '' if self.line_number is None else str(self.line_number)
        return f"{source}:{line_number}"

    def __repr__(self) -> str:
        """String representation."""
        flags = []
        if self.negated:
            flags.append('negated')
        if self.directory_only:
            flags.append('dir')
        if self.anchored:
            flags.append('anchored')
        suffix = f" [{', '.join(flags)}]" if flags else ''
        return f"CompiledPattern({self.original!r}{suffix})"


def compile_line(line: str, source: Optional[str] = None,
                 line_number: Optional[int] = None) -> Optional[CompiledPattern]:
    """
    Compile one ignore line.

    Args:
        line: Raw line from an ignore file
        source: Name of the file the line came from, if any
        line_number: One-based line number within ``source``

    Returns:
        The compiled pattern, or None for blank lines and comments

    Raises:
        PatternSyntaxError: If the line is not a valid glob
    """
    text = _strip_line(line)
    if not text or text.startswith('#'):
        return None

    start = 0
    end = len(text)

    # Check for negation; "\!" is left for the translator as a literal "!"
    negated = text.startswith('!')
    if negated:
        start += 1

    # Check for directory-only (trailing unescaped /)
    directory_only = False
    if end > start and text[end - 1] == '/' and not _is_escaped(text, end - 1):
        directory_only = True
        end -= 1

    # Leading / anchors explicitly, any other / anchors implicitly
    anchored = False
    if end > start and text[start] == '/':
        anchored = True
        start += 1
    body = text[start:end]
    if '/' in body:
        anchored = True

    if not body:
        logger.debug("Pattern %r matches nothing, skipping", line)
        return None

    try:
        regex = re.compile(translate(body, anchored, line=text, offset=start), re.DOTALL)
    except PatternSyntaxError as exc:
        raise PatternSyntaxError(exc.line, exc.position, exc.reason,
                                 source=source, line_number=line_number) from None
    except re.error as exc:
        raise PatternSyntaxError(text, start, exc.msg,
                                 source=source, line_number=line_number) from exc

    return CompiledPattern(
        original=text,
        regex=regex,
        negated=negated,
        directory_only=directory_only,
        anchored=anchored,
        source=source,
        line_number=line_number,
    )
