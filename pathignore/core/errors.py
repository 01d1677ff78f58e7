"""Exceptions raised while compiling ignore patterns."""

from typing import Optional


class PathIgnoreError(Exception):
    """Base class for all pathignore errors."""


class PatternSyntaxError(PathIgnoreError, ValueError):
    """
    Raised when an ignore line cannot be translated into a matching rule.

    Attributes:
        line: The offending ignore line, as written in the source
        position: Zero-based offset of the problem within ``line``
        reason: Short description of what is wrong
        source: File the line came from, or None for in-memory lines
        line_number: One-based line number within the source
    """

    def __init__(self, line: str, position: int, reason: str,
                 source: Optional[str] = None, line_number: Optional[int] = None):
        self.line = line
        self.position = position
        self.reason = reason
        self.source = source
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self) -> str:
        where = ''
        if self.source is not None:
            where = f"{self.source}:"
        if self.line_number is not None:
            where += f"{self.line_number}:"
        if where:
            where += ' '
        return f"{where}{self.reason} at position {self.position} in pattern {self.line!r}"


class SourceUnavailableError(PathIgnoreError, OSError):
    """Raised when an ignore file cannot be opened or read."""

    def __init__(self, path: str, reason: str = 'cannot read ignore file'):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")

    def __str__(self) -> str:
        return f"{self.reason}: {self.path}"
