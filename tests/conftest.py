"""Shared pytest fixtures for Kit tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from kit.core.repository import Repository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository.create(temp_dir / 'repo')


@pytest.fixture
def sample_file(temp_dir):
    """A file outside any repository."""
    path = temp_dir / 'greeting.txt'
    path.write_bytes(b'Hello Joe')
    return path
