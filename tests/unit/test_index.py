"""Index tests."""

import pytest

from rift.core.errors import MalformedIndexError
from rift.core.index import Index


DIGEST_A = 'a' * 64
DIGEST_B = 'b' * 64
DIGEST_C = 'c' * 64


def test_index_creation():
    """Test creating empty index."""
    index = Index()
    assert len(index) == 0
    assert index.all() == {}


def test_index_add():
    """Test adding entry to index."""
    index = Index()
    index.add('test.txt', DIGEST_A)
    
    assert len(index) == 1
    assert 'test.txt' in index
    assert index.get('test.txt') == DIGEST_A
    assert index.get('missing.txt') is None


def test_index_add_overwrites():
    """Last write wins for a path."""
    index = Index()
    index.add('test.txt', DIGEST_A)
    index.add('test.txt', DIGEST_B)
    
    assert len(index) == 1
    assert index.get('test.txt') == DIGEST_B


def test_index_all_is_a_copy():
    """Snapshots do not see later changes."""
    index = Index()
    index.add('a.txt', DIGEST_A)
    snapshot = index.all()
    
    index.add('b.txt', DIGEST_B)
    index.clear()
    
    assert snapshot == {'a.txt': DIGEST_A}


def test_index_clear_is_idempotent():
    """Clearing an empty index is fine."""
    index = Index()
    index.add('file1.txt', DIGEST_A)
    index.clear()
    index.clear()
    assert len(index) == 0


def test_index_write_format(tmp_path):
    """Entries are written as sorted '<path> <digest>' lines."""
    index = Index()
    index.add('zebra.txt', DIGEST_A)
    index.add('apple.txt', DIGEST_B)
    index.add('dir/middle.txt', DIGEST_C)
    
    path = tmp_path / 'index'
    index.write(path)
    
    assert path.read_text() == (
        f'apple.txt {DIGEST_B}\n'
        f'dir/middle.txt {DIGEST_C}\n'
        f'zebra.txt {DIGEST_A}\n'
    )


def test_index_write_is_byte_identical(tmp_path):
    """Writing an unchanged index twice produces the same bytes."""
    index = Index()
    index.add('b.txt', DIGEST_B)
    index.add('a.txt', DIGEST_A)
    
    first, second = tmp_path / 'one', tmp_path / 'two'
    index.write(first)
    Index.load(first).write(second)
    
    assert first.read_bytes() == second.read_bytes()


def test_index_write_and_read(tmp_path):
    """Reading a persisted index reconstructs every entry."""
    index1 = Index()
    index1.add('file1.txt', DIGEST_A)
    index1.add('dir/file2.txt', DIGEST_B)
    index1.add('name with spaces.txt', DIGEST_C)
    
    path = tmp_path / 'index'
    index1.write(path)
    
    index2 = Index()
    index2.read(path)
    
    assert index2.all() == index1.all()


@pytest.mark.parametrize('path', [
    'x\x0cy',
    'x\x0by',
    'x\x1cy',
    'x\x85y',
    'line\u2028sep',
    'para\u2029sep',
    'carriage\rreturn',
])
def test_index_roundtrip_unusual_line_breaks(tmp_path, path):
    """Only LF separates entries; other line breaks stay in the path."""
    index = Index()
    index.add('a.txt', DIGEST_A)
    index.add(path, DIGEST_B)

    index_path = tmp_path / 'index'
    index.write(index_path)

    assert Index.load(index_path).all() == {'a.txt': DIGEST_A, path: DIGEST_B}


def test_index_read_replaces_entries(tmp_path):
    """Read discards in-memory entries not on disk."""
    path = tmp_path / 'index'
    path.write_text(f'a.txt {DIGEST_A}\n')
    
    index = Index()
    index.add('stale.txt', DIGEST_B)
    index.read(path)
    
    assert index.all() == {'a.txt': DIGEST_A}


def test_index_read_nonexistent(tmp_path):
    """Test reading nonexistent index returns empty."""
    index = Index()
    index.add('a.txt', DIGEST_A)
    index.read(tmp_path / 'missing')
    assert len(index) == 0


def test_index_read_empty_file(tmp_path):
    path = tmp_path / 'index'
    path.write_text('')
    assert len(Index.load(path)) == 0


def test_index_read_skips_blank_lines(tmp_path):
    path = tmp_path / 'index'
    path.write_text(f'\na.txt {DIGEST_A}\n\n')
    assert Index.load(path).all() == {'a.txt': DIGEST_A}


@pytest.mark.parametrize('content', [
    'no-digest-here\n',
    f' {DIGEST_A}\n',
    'a.txt not-a-digest\n',
    f'a.txt {DIGEST_A.upper()}\n',
])
def test_index_read_malformed(tmp_path, content):
    """Unparseable lines raise MalformedIndexError."""
    path = tmp_path / 'index'
    path.write_text(content)
    with pytest.raises(MalformedIndexError):
        Index.load(path)


def test_index_read_malformed_reports_line(tmp_path):
    path = tmp_path / 'index'
    path.write_text(f'a.txt {DIGEST_A}\nbroken\n')
    with pytest.raises(MalformedIndexError) as exc_info:
        Index.load(path)
    assert exc_info.value.line_number == 2


def test_index_write_rejects_invalid_digest(tmp_path):
    """Bad entries are never persisted."""
    index = Index()
    index.add('a.txt', 'short')
    path = tmp_path / 'index'
    
    with pytest.raises(MalformedIndexError):
        index.write(path)
    assert not path.exists()


def test_index_write_rejects_newline_in_path(tmp_path):
    index = Index()
    index.add('a\nb.txt', DIGEST_A)
    with pytest.raises(MalformedIndexError):
        index.write(tmp_path / 'index')


def test_index_repr():
    """Test index string representation."""
    index = Index()
    assert 'entries=0' in repr(index)
    index.add('test.txt', DIGEST_A)
    assert 'entries=1' in repr(index)
