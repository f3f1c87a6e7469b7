"""
Line loader tests

Tests how raw source text is split into Line values.
"""

import pytest

from mdlive.lib.loader import lines_split, source_read
from mdlive.models.document import Line


class TestLinesSplit:
    """Test newline splitting and line numbering"""

    def test_empty_source(self):
        """Empty text has no lines"""
        assert lines_split("") == []

    def test_single_newline(self):
        """A lone newline is one empty line"""
        assert lines_split("\n") == [Line(index=0, text="")]

    def test_trailing_newline_dropped(self):
        """A final newline does not add an empty line"""
        lines = lines_split("a\nb\n")
        assert [line.text for line in lines] == ["a", "b"]

    def test_no_trailing_newline(self):
        """Last line without newline is kept"""
        lines = lines_split("a\nb")
        assert [line.text for line in lines] == ["a", "b"]

    def test_blank_lines_kept(self):
        """Blank lines between content are preserved"""
        lines = lines_split("a\n\n\nb")
        assert [line.text for line in lines] == ["a", "", "", "b"]

    def test_carriage_returns_preserved(self):
        """CRLF sources keep the \\r on each line"""
        lines = lines_split("# Title\r\nbody\r\n")
        assert [line.text for line in lines] == ["# Title\r", "body\r"]

    def test_indices_are_positions(self):
        """Each line carries its 0-based position"""
        lines = lines_split("x\ny\nz")
        assert [line.index for line in lines] == [0, 1, 2]


class TestLineValue:
    """Test Line immutability"""

    def test_text_replace_returns_new_line(self):
        """text_replace keeps the index and leaves the original alone"""
        line = Line(index=3, text="old")
        replaced = line.text_replace("new")

        assert replaced == Line(index=3, text="new")
        assert line.text == "old"

    def test_line_is_frozen(self):
        """Lines cannot be edited in place"""
        line = Line(index=0, text="a")
        with pytest.raises(AttributeError):
            line.text = "b"


class TestSourceRead:
    """Test reading source files"""

    def test_reads_utf8(self, tmp_path):
        """Files are decoded as UTF-8"""
        source = tmp_path / "notes.md"
        source.write_text("# Café\n", encoding="utf-8")
        assert source_read(source) == "# Café\n"

    def test_missing_file_raises(self, tmp_path):
        """A missing file is an OSError for the caller"""
        with pytest.raises(OSError):
            source_read(tmp_path / "absent.md")

    def test_lone_carriage_return_kept(self, tmp_path):
        """A bare \\r is part of the line text, not a line break"""
        source = tmp_path / "notes.md"
        source.write_bytes(b"a\rb\n")

        assert source_read(source) == "a\rb\n"
        assert [l.text for l in lines_split(source_read(source))] == ["a\rb"]

    def test_crlf_kept(self, tmp_path):
        source = tmp_path / "notes.md"
        source.write_bytes(b"# T\r\nbody\r\n")
        assert source_read(source) == "# T\r\nbody\r\n"
