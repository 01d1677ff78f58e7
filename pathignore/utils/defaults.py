"""Default ignore patterns and ignore-file discovery."""

import logging
from pathlib import Path
from typing import Optional

from pathignore.core.config import Config, get_config
from pathignore.core.pattern_set import PatternSet

logger = logging.getLogger(__name__)


def load_ignore_patterns(root: Path, config: Optional[Config] = None) -> PatternSet:
    """
    Compile the ignore files configured for a directory.

    Loads patterns from, in order:
    1. The file named by ``core.excludesfile``, if set
    2. The file named by ``core.ignorefile`` (``.gitignore``) in root

    Later files take precedence, as their patterns are evaluated last.
    Files that do not exist are skipped.

    Args:
        root: Directory the ignore file lives in
        config: Config to read the file names from

    Returns:
        Combined PatternSet, empty when no file exists

    Raises:
        SourceUnavailableError: If an existing file cannot be read
        PatternSyntaxError: If a file holds an invalid pattern
    """
    root = Path(root)
    if config is None:
        config = get_config(root)

    candidates = []
    excludes_file = config.get('core', 'excludesfile')
    if excludes_file:
        candidates.append(Path(excludes_file).expanduser())
    candidates.append(root / config.get('core', 'ignorefile'))

    pattern_set = PatternSet()
    for path in candidates:
        if not path.exists():
            logger.debug("No ignore file at %s", path)
            continue
        pattern_set = pattern_set + PatternSet.from_file(path)

    return pattern_set


# Common patterns for convenience
COMMON_IGNORE_PATTERNS = [
    # Python
    '__pycache__/',
    '*.py[cod]',
    '*$py.class',
    '.Python',
    'venv/',
    '.venv/',
    '*.egg-info/',
    'dist/',
    'build/',
    '.pytest_cache/',
    '.mypy_cache/',

    # Node.js
    'node_modules/',
    'npm-debug.log',

    # IDEs
    '.idea/',
    '.vscode/',
    '*.swp',
    '*~',

    # OS files
    '.DS_Store',
    'Thumbs.db',

    # Version control
    '.git/',
    '.hg/',
    '.svn/',
]
