"""Shared pytest fixtures for pathignore tests."""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from pathignore.core.config import Config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    """
    Run inside temp_dir with a private global config and no
    PATHIGNORE_* environment overrides.
    """
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', temp_dir / 'global.pathignorerc')
    for key in list(os.environ):
        if key.startswith('PATHIGNORE_'):
            monkeypatch.delenv(key)
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def write_ignore_file(temp_dir):
    """Factory writing an ignore file into temp_dir."""
    def _write(content, name='.gitignore'):
        path = temp_dir / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write
