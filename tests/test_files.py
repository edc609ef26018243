import pytest

from strkit.compare import cmp_str
from strkit.files import read_file


def test_read_file(tmp_path):
    path = tmp_path / "example.txt"
    path.write_text("Hello World\n", encoding="utf-8")
    content = read_file(str(path))
    assert cmp_str(content, "Hello World\n") == 0
    assert content == "Hello World\n"


def test_read_file_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\nb\r\n")
    assert read_file(path) == "a\r\nb\r\n"


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert read_file(path) == ""


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")