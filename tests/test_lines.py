import io

import pytest

from solong.errors import InvalidFileError
from solong.lines import iter_lines, read_file_lines


def test_lines_keep_newlines_and_last_line_without_one():
    assert list(iter_lines(io.StringIO("ab\ncd"))) == ["ab\n", "cd"]


def test_tiny_buffer_gives_same_lines():
    assert list(iter_lines(io.StringIO("ab\ncd"), 1)) == ["ab\n", "cd"]


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""))) == []


def test_blank_lines_are_kept():
    assert list(iter_lines(io.StringIO("\n\n"))) == ["\n", "\n"]


def test_carriage_returns_are_not_translated():
    assert list(iter_lines(io.StringIO("a\r\nb"), 2)) == ["a\r\n", "b"]


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_non_positive_buffer_is_rejected(buffer_size):
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO("abc"), buffer_size))


@pytest.mark.parametrize(
    "text",
    ["", "a", "a\nb", "\n\n", "line one\nline two\n", "x" * 5000 + "\ny"],
)
@pytest.mark.parametrize("buffer_size", [1, 3, 1024])
def test_lines_rebuild_the_text(text, buffer_size):
    lines = list(iter_lines(io.StringIO(text), buffer_size))
    assert "".join(lines) == text
    for line in lines[:-1]:
        assert line.endswith("\n")
        assert line.count("\n") == 1
    if lines:
        assert lines[-1].count("\n") <= 1


def test_read_file_lines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes(b"111\n1P1\n111")
    assert read_file_lines(path) == ["111\n", "1P1\n", "111"]


def test_read_file_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_bytes(b"")
    assert read_file_lines(path) == []


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(InvalidFileError):
        read_file_lines(tmp_path / "missing.ber")