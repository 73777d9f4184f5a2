"""Integration tests for the add, status and commit workflow."""

import re

import pytest
from click.testing import CliRunner

from rift.cli.main import cli
from rift.core.errors import ObjectNotFoundError
from rift.core.repository import Repository


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_repo(runner, temp_dir, monkeypatch):
    """Initialized repository with the working directory set to its root."""
    monkeypatch.chdir(temp_dir)
    result = runner.invoke(cli, ['init'])
    assert result.exit_code == 0, result.output
    return Repository(str(temp_dir))


def test_status_nothing_staged(runner, cli_repo):
    result = runner.invoke(cli, ['status'])
    assert result.exit_code == 0, result.output
    assert 'Nothing staged for commit' in result.output
    assert 'ref: refs/heads/main' in result.output


def test_add_status_commit(runner, cli_repo):
    """Full cycle through the command line."""
    (cli_repo.work_tree / 'a.txt').write_text('hello')
    
    result = runner.invoke(cli, ['add', 'a.txt'])
    assert result.exit_code == 0, result.output
    assert 'Added 1 file(s)' in result.output
    
    result = runner.invoke(cli, ['status'])
    assert 'Changes to be committed' in result.output
    assert 'a.txt' in result.output
    
    result = runner.invoke(cli, ['commit', '-m', 'msg'])
    assert result.exit_code == 0, result.output
    assert 'Created commit' in result.output
    
    head = cli_repo.head_file.read_text()
    match = re.fullmatch(r'commit: ([0-9a-f]{64})\n', head)
    assert match
    
    commit = cli_repo.read_commit(match.group(1))
    assert commit.message == 'msg'
    assert commit.files == ['a.txt']
    
    result = runner.invoke(cli, ['status'])
    assert 'Nothing staged for commit' in result.output


def test_add_from_subdirectory(runner, cli_repo, monkeypatch):
    """Paths are relative to the working directory, keys to the root."""
    subdir = cli_repo.work_tree / 'src'
    subdir.mkdir()
    (subdir / 'main.py').write_text('print(1)')
    monkeypatch.chdir(subdir)
    
    result = runner.invoke(cli, ['add', 'main.py'])
    
    assert result.exit_code == 0, result.output
    assert cli_repo.status().paths == ['src/main.py']


def test_add_all(runner, cli_repo):
    """'add .' stages everything not ignored."""
    root = cli_repo.work_tree
    (root / '.riftignore').write_text('build/\n*.log\n')
    (root / 'build').mkdir()
    (root / 'build' / 'out.bin').write_text('x')
    (root / 'debug.log').write_text('x')
    (root / 'main.c').write_text('x')
    (root / '.DS_Store').write_text('x')
    
    result = runner.invoke(cli, ['add', '.'])
    
    assert result.exit_code == 0, result.output
    assert cli_repo.status().paths == ['.riftignore', 'main.c']


def test_add_ignored_file(runner, cli_repo):
    (cli_repo.work_tree / 'Thumbs.db').write_text('x')
    result = runner.invoke(cli, ['add', 'Thumbs.db'])
    
    assert result.exit_code != 0
    assert 'ignored' in result.output
    assert cli_repo.status().nothing_staged


def test_add_missing_file(runner, cli_repo):
    result = runner.invoke(cli, ['add', 'missing.txt'])
    assert result.exit_code != 0
    assert 'File not found' in result.output


def test_commit_nothing_staged(runner, cli_repo):
    result = runner.invoke(cli, ['commit', '-m', 'msg'])
    
    assert result.exit_code != 0
    assert 'Nothing to commit' in result.output
    assert cli_repo.head_file.read_text() == 'ref: refs/heads/main\n'


def test_commit_reports_unreadable_commit(runner, cli_repo, monkeypatch):
    """A failure reading the new commit back is reported, not raised."""
    (cli_repo.work_tree / 'a.txt').write_text('hello')
    runner.invoke(cli, ['add', 'a.txt'])

    def fail_read(self, commit_hash):
        raise ObjectNotFoundError(f"Object {commit_hash} not found")

    monkeypatch.setattr(Repository, 'read_commit', fail_read)
    result = runner.invoke(cli, ['commit', '-m', 'msg'])

    assert result.exit_code != 0
    assert isinstance(result.exception, SystemExit)
    assert 'Failed to create commit' in result.output
    assert 'not found' in result.output


def test_commit_requires_message(runner, cli_repo):
    result = runner.invoke(cli, ['commit'])
    assert result.exit_code != 0


def test_commands_outside_repository(runner, temp_dir, monkeypatch):
    monkeypatch.chdir(temp_dir)
    for args in (['status'], ['add', 'x'], ['commit', '-m', 'm']):
        result = runner.invoke(cli, args)
        assert result.exit_code != 0
        assert 'Not a rift repository' in result.output


def test_second_commit_replaces_head(runner, cli_repo):
    path = cli_repo.work_tree / 'a.txt'
    path.write_text('v1')
    runner.invoke(cli, ['add', 'a.txt'])
    runner.invoke(cli, ['commit', '-m', 'first'])
    first = cli_repo.head_commit()
    
    path.write_text('v2')
    runner.invoke(cli, ['add', 'a.txt'])
    runner.invoke(cli, ['commit', '-m', 'second'])
    second = cli_repo.head_commit()
    
    assert first != second
    assert cli_repo.objects.exists(first)
    assert cli_repo.read_commit(second).message == 'second'
