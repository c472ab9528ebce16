"""Tests for the line buffer and cursor."""

from tejido.lines import LineBuffer, is_blank, split_lines


class TestSplitLines:
    """Tests for split_lines()."""

    def test_unix_and_windows_endings(self) -> None:
        """Both \\n and \\r\\n terminate lines."""
        assert split_lines("a\nb\r\nc") == ["a", "b", "c"]

    def test_trailing_newline_adds_no_line(self) -> None:
        """A final terminator does not produce an empty last line."""
        assert split_lines("a\nb\n") == ["a", "b"]
        assert split_lines("a\n\n\n") == ["a"]

    def test_inner_blank_lines_kept(self) -> None:
        """Blank lines between content survive."""
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_empty_text(self) -> None:
        """Empty input has no lines."""
        assert split_lines("") == []


class TestIsBlank:
    """Tests for is_blank()."""

    def test_whitespace_only(self) -> None:
        assert is_blank("")
        assert is_blank("   ")
        assert is_blank("\t ")

    def test_content(self) -> None:
        assert not is_blank("  x")


class TestLineBuffer:
    """Tests for LineBuffer cursor movement."""

    def test_current_and_peek(self) -> None:
        """current() reads the cursor line, peek() looks ahead without moving."""
        buf = LineBuffer(["a", "b", "c"])
        assert buf.current() == "a"
        assert buf.peek() == "b"
        assert buf.peek(2) == "c"
        assert buf.peek(3) is None
        assert buf.pos == 0

    def test_advance_is_clamped(self) -> None:
        """The cursor stops at the end and never moves backwards."""
        buf = LineBuffer(["a", "b"])
        buf.advance(5)
        assert buf.at_end()
        assert buf.current() is None

        buf = LineBuffer(["a", "b"])
        buf.advance()
        buf.advance(-1)
        assert buf.pos == 1

    def test_skip_blank(self) -> None:
        """skip_blank() moves past whitespace-only lines."""
        buf = LineBuffer.from_text("\n  \nx")
        buf.skip_blank()
        assert buf.current() == "x"

    def test_blank_replaces_line(self) -> None:
        """blank() empties a line in place."""
        buf = LineBuffer(["[r]: http://e.com", "text"])
        buf.blank(0)
        assert list(buf) == ["", "text"]
        assert len(buf) == 2
        assert buf[1] == "text"
