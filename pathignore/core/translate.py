"""Translation of gitignore-style globs into regular expressions.

The translator works one path segment at a time so that ``**`` can be
recognised only when it forms a whole segment:

- ``**/`` at the start matches zero or more leading directories
- ``/**/`` in the middle matches zero or more intermediate directories
- ``/**`` at the end matches everything inside the preceding directory
- any other run of asterisks behaves like a single ``*``

``*`` and ``?`` never match ``/``, and neither do bracket expressions.
"""

import re
from typing import List, Optional

from pathignore.core.errors import PatternSyntaxError

# Optional suffix that lets a match on a directory extend to its contents
DESCENDANTS = '(?:/.*)?'

# Prefix for patterns that may start at any segment boundary
ANY_LEADING_DIRS = '(?:.*/)?'

POSIX_CLASSES = {
    'alnum': 'a-zA-Z0-9',
    'alpha': 'a-zA-Z',
    'blank': ' \\t',
    'cntrl': '\\x00-\\x1f\\x7f',
    'digit': '0-9',
    'graph': '!-~',
    'lower': 'a-z',
    'print': ' -~',
    'punct': '!-/:-@\\[-`{-~',
    'space': ' \\t\\n\\r\\f\\v',
    'upper': 'A-Z',
    'xdigit': '0-9A-Fa-f',
}


def _class_end(pattern: str, start: int) -> int:
    """Index just past the bracket expression opening at ``pattern[start]``, or -1."""
    n = len(pattern)
    j = start + 1
    if j < n and pattern[j] in '!^':
        j += 1
    first = True
    while j < n:
        c = pattern[j]
        if c == ']' and not first:
            return j + 1
        first = False
        if pattern.startswith('[:', j):
            end = pattern.find(':]', j + 2)
            if end != -1:
                j = end + 2
                continue
        j += 2 if c == '\\' else 1
    return -1


def split_segments(pattern: str) -> List[str]:
    """
    Split a pattern on unescaped slashes outside bracket expressions.

    Escape sequences and complete bracket expressions are kept intact
    so that each segment can be translated on its own.
    """
    segments = []
    current = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == '\\' and i + 1 < len(pattern):
            current.append(pattern[i:i + 2])
            i += 2
            continue
        if c == '[':
            end = _class_end(pattern, i)
            if end != -1:
                current.append(pattern[i:end])
                i = end
                continue
        if c == '/':
            segments.append(''.join(current))
            current = []
        else:
            current.append(c)
        i += 1
    segments.append(''.join(current))
    return segments


def _translate_class(segment: str, start: int, line: str, offset: int):
    """
    Translate the bracket expression opening at ``segment[start]``.

    Returns:
        Tuple of (regex class, index just past the closing bracket)
    """
    n = len(segment)
    j = start + 1
    negate = False
    if j < n and segment[j] in '!^':
        negate = True
        j += 1

    items = []
    # Ranges and named classes may span "/", which a class never matches
    needs_guard = False
    first = True
    while True:
        if j >= n:
            raise PatternSyntaxError(line, offset + start, 'unterminated character class')
        c = segment[j]
        if c == ']' and not first:
            break
        first = False

        if segment.startswith('[:', j):
            end = segment.find(':]', j + 2)
            if end != -1:
                name = segment[j + 2:end]
                if name not in POSIX_CLASSES:
                    raise PatternSyntaxError(
                        line, offset + j, f"unknown character class '{name}'")
                items.append(POSIX_CLASSES[name])
                needs_guard = True
                j = end + 2
                continue

        if c == '\\':
            if j + 1 >= n:
                raise PatternSyntaxError(line, offset + j, 'dangling escape')
            if segment[j + 1] != '/':
                items.append(re.escape(segment[j + 1]))
            j += 2
            continue

        if c == '/':
            j += 1
            continue

        if c == '-' and items and j + 1 < n and segment[j + 1] != ']':
            # Range operator between two members
            items.append('-')
            needs_guard = True
        else:
            items.append(re.escape(c))
        j += 1

    body = ''.join(items)
    if negate:
        return f'[^/{body}]', j + 1
    if not body:
        # Only "/" was listed
        return '(?!)', j + 1
    guard = '(?!/)' if needs_guard else ''
    return f'{guard}[{body}]', j + 1


def translate_segment(segment: str, line: str = '', offset: int = 0) -> str:
    """
    Translate a single path segment (no unescaped ``/``) to a regex.

    Args:
        segment: The glob segment
        line: Full source line, used for error reporting
        offset: Position of the segment within ``line``

    Raises:
        PatternSyntaxError: On unterminated classes or a dangling backslash
    """
    parts = []
    i = 0
    n = len(segment)
    while i < n:
        c = segment[i]
        if c == '\\':
            if i + 1 >= n:
                raise PatternSyntaxError(line, offset + i, 'dangling escape')
            parts.append(re.escape(segment[i + 1]))
            i += 2
        elif c == '*':
            while i < n and segment[i] == '*':
                i += 1
            parts.append('[^/]*')
        elif c == '?':
            parts.append('[^/]')
            i += 1
        elif c == '[':
            regex_class, i = _translate_class(segment, i, line, offset)
            parts.append(regex_class)
        else:
            parts.append(re.escape(c))
            i += 1
    return ''.join(parts)


def translate(pattern: str, anchored: bool = False, line: Optional[str] = None,
              offset: int = 0) -> str:
    """
    Convert a glob into a regular expression source string.

    The pattern must already have its negation marker, trailing
    directory slash and leading anchor slash removed. The returned
    expression is meant for ``re.fullmatch`` against a normalised,
    root-relative path; it also matches anything below a matched path.

    Args:
        pattern: The glob to translate
        anchored: Whether the pattern must match from the root
        line: Full source line, used for error reporting
        offset: Position of ``pattern`` within ``line``

    Returns:
        Regular expression source
    """
    if line is None:
        line = pattern

    segments = split_segments(pattern)
    last = len(segments) - 1
    regex_parts = [] if anchored else [ANY_LEADING_DIRS]
    position = offset
    need_separator = False

    for index, segment in enumerate(segments):
        if segment == '**':
            if last == 0:
                regex_parts.append('.*')
            elif index == last:
                regex_parts.append('/.+' if need_separator else '.+')
            else:
                if need_separator:
                    regex_parts.append('/')
                regex_parts.append(ANY_LEADING_DIRS)
                need_separator = False
                position += len(segment) + 1
                continue
        else:
            if need_separator:
                regex_parts.append('/')
            regex_parts.append(translate_segment(segment, line, position))
        need_separator = True
        position += len(segment) + 1

    regex_parts.append(DESCENDANTS)
    return ''.join(regex_parts)
