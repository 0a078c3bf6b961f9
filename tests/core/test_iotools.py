import pathlib

from phq.core import iotools


def test_search(tmp_path: pathlib.Path):
    """Test the function that searches directories for a file."""
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    first.mkdir()
    second.mkdir()
    target = second / 'phq.ini'
    target.write_text('[phq]\n')
    paths = [None, tmp_path / 'missing', first, str(second)]
    assert iotools.search(paths, 'phq.ini') == target.resolve()
    assert iotools.search(paths, 'other.ini') is None
    assert iotools.search([target], 'phq.ini') is None
    (first / 'phq.ini').write_text('[phq]\n')
    assert iotools.search(paths, 'phq.ini') == (first / 'phq.ini').resolve()



def test_nonexistent_path_error():
    """The error message should name the missing path when known."""
    assert str(iotools.NonExistentPathError('phq.ini')) == (
        "phq.ini does not exist."
    )
    assert str(iotools.NonExistentPathError()) == (
        "The requested path does not exist."
    )
