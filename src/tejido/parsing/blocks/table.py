"""Table parsing for Tejido parser.

Handles pipe tables:

    | Header 1 | Header 2 |   <- header row
    |:---------|---------:|   <- alignment row (always consumed)
    | Cell 1   | Cell 2   |   <- data rows: every following line with a |

Cells are split on ``|`` and trimmed; empty fragments are dropped.
Alignments come from the separator row and apply to every row by
column position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tejido.nodes import Alignment, Table, TableCell, TableRow
from tejido.parsing.patterns import TABLE_ALIGNMENT_ROW

if TYPE_CHECKING:
    from tejido.lines import LineBuffer


def _split_row(line: str) -> list[str]:
    """Split a row into trimmed, non-empty cell texts."""
    return [cell for cell in (part.strip() for part in line.split("|")) if cell]


def _parse_alignments(line: str | None) -> tuple[Alignment, ...]:
    """Read column alignments from a separator row.

    Format: |:---|:---:|---:|---|
    Returns an empty tuple when the line is not a separator row.
    """
    if line is None or not TABLE_ALIGNMENT_ROW.match(line):
        return ()

    alignments: list[Alignment] = []
    for part in _split_row(line):
        left = part.startswith(":")
        right = part.endswith(":")
        if left and right:
            alignments.append("center")
        elif right:
            alignments.append("right")
        elif left:
            alignments.append("left")
        else:
            alignments.append("default")
    return tuple(alignments)


class TableParsingMixin:
    """Mixin for pipe table parsing.

    Required Host Attributes:
        - _buffer: LineBuffer

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]

    """

    _buffer: LineBuffer

    def _parse_table(self) -> Table:
        """Parse header, alignment row and data rows at the cursor."""
        buffer = self._buffer

        header_line = buffer.current() or ""
        buffer.advance()
        alignments = _parse_alignments(buffer.current())
        buffer.advance()

        header = self._parse_table_row(header_line, alignments, is_header=True)

        rows: list[TableRow] = []
        while (line := buffer.current()) is not None and "|" in line:
            rows.append(self._parse_table_row(line, alignments))
            buffer.advance()

        return Table(header=header, rows=tuple(rows), alignments=alignments)

    def _parse_table_row(
        self,
        line: str,
        alignments: tuple[Alignment, ...],
        *,
        is_header: bool = False,
    ) -> TableRow:
        return TableRow(
            cells=tuple(
                TableCell(
                    children=self._parse_inline(cell),
                    align=alignments[i] if i < len(alignments) else "default",
                    is_header=is_header,
                )
                for i, cell in enumerate(_split_row(line))
            ),
            is_header=is_header,
        )
