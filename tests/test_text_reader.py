"""Tests for reading text sources."""

import io

import pytest

from wordstock.text.reader import read_texts


def test_read_texts_files(tmp_path):
    """Each file becomes one string, in order."""
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("first file", encoding="utf-8")
    b.write_text("second file", encoding="utf-8")

    assert read_texts([a, b]) == ["first file", "second file"]


def test_read_texts_missing_file(tmp_path):
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_texts([tmp_path / "nope.txt"])


def test_read_texts_stdin(monkeypatch):
    """'-' reads standard input."""
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert read_texts(["-"]) == ["from stdin"]


def test_read_texts_empty_file_warns(tmp_path, caplog):
    """An empty file is returned as-is and logged."""
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")

    with caplog.at_level("WARNING", logger="wordstock.text.reader"):
        assert read_texts([empty]) == [""]
    assert "empty" in caplog.text
