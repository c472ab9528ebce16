"""Line buffer and cursor shared by every block-level routine.

The buffer is the mutable view over a document's lines: the definition
pre-pass blanks lines in place, and block parsing reads through a cursor
that only ever moves forward.

Example:
    >>> buf = LineBuffer.from_text("a\\r\\n\\nb\\n")
    >>> list(buf)
    ['a', '', 'b']
    >>> buf.skip_blank(); buf.current()
    'a'

"""

from __future__ import annotations

import re
from collections.abc import Iterator

_LINE_SPLIT = re.compile(r"\r?\n")
_BLANK = re.compile(r"^\s*$")


def split_lines(text: str) -> list[str]:
    """Split text on ``\\r?\\n``.

    A trailing line terminator does not produce an extra empty line.
    """
    lines = _LINE_SPLIT.split(text)
    while lines and not lines[-1]:
        lines.pop()
    return lines


def is_blank(line: str) -> bool:
    """Whether a line holds only whitespace."""
    return _BLANK.match(line) is not None


class LineBuffer:
    """Lines of one document plus a monotonically advancing cursor.

    Thread Safety:
        Instances belong to a single parse and are never shared.

    """

    __slots__ = ("_lines", "_pos")

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._pos = 0

    @classmethod
    def from_text(cls, text: str) -> LineBuffer:
        return cls(split_lines(text))

    @property
    def pos(self) -> int:
        """Index of the line under the cursor."""
        return self._pos

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def current(self) -> str | None:
        """Line under the cursor, or None past the end."""
        if self._pos < len(self._lines):
            return self._lines[self._pos]
        return None

    def peek(self, offset: int = 1) -> str | None:
        """Line at ``offset`` from the cursor without moving it."""
        index = self._pos + offset
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward; it never moves backwards."""
        if count > 0:
            self._pos = min(self._pos + count, len(self._lines))

    def skip_blank(self) -> None:
        """Advance past any blank lines under the cursor."""
        while self._pos < len(self._lines) and is_blank(self._lines[self._pos]):
            self._pos += 1

    def blank(self, index: int) -> None:
        """Replace a line with an empty one so block parsing never sees it."""
        self._lines[index] = ""
