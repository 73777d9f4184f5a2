"""Shared pytest fixtures for Rift tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from rift.core.repository import Repository


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the user's ~/.riftconfig and RIFT_* variables."""
    from rift.core.config import Config
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', tmp_path / '.riftconfig')
    for key in ('RIFT_CORE_IGNOREFILE', 'RIFT_DEBUG', 'RIFT_LOG_LEVEL'):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def working_files(repo):
    """Create sample file structure in repository."""
    file1 = repo.work_tree / "test1.txt"
    file2 = repo.work_tree / "test2.txt"
    
    (repo.work_tree / "subdir").mkdir()
    file3 = repo.work_tree / "subdir" / "test3.txt"
    
    file1.write_text("Content 1")
    file2.write_text("Content 2")
    file3.write_text("Content 3")
    
    return {
        'file1': file1,
        'file2': file2,
        'file3': file3
    }
