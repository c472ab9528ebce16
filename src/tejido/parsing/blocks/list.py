"""List parsing for Tejido parser.

Handles ordered, unordered and task lists:

    * item            1. first           - [x] done
    * item              continued        - [ ] todo
      * nested        2. second

The first item fixes the list kind, the bullet and the marker indent;
later marker lines at that indent are items of the same list whatever
their marker. An item owns the lines indented by ``indent + 2`` spaces
that follow it. Those lines are inline content until one of them opens
a block (list marker, fence, quote, heading, rule); from there on the
item's remaining lines are parsed as a nested document.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tejido.lines import is_blank
from tejido.nodes import List, ListItem
from tejido.parsing.patterns import BULLETS, LIST_MARKER, PARAGRAPH_INTERRUPT, TASK_MARKER

if TYPE_CHECKING:
    from tejido.lines import LineBuffer


class ListParsingMixin:
    """Mixin for list parsing.

    Required Host Attributes:
        - _buffer: LineBuffer
        - _task_lists_enabled: bool

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]
        - _parse_nested_content(text) -> tuple[Block, ...]

    """

    _buffer: LineBuffer

    def _parse_list(self, first: re.Match[str]) -> List:
        """Parse consecutive items sharing the first item's marker indent.

        ``first`` is the marker match for the line under the cursor.
        """
        buffer = self._buffer

        indent = len(first.group(1))
        marker = first.group(2)
        if marker.endswith("."):
            ordered, start, bullet = True, int(marker[:-1]), None
        else:
            ordered, start, bullet = False, 1, BULLETS[marker]

        items: list[ListItem] = []
        while (line := buffer.current()) is not None:
            m = LIST_MARKER.match(line)
            if m is None or len(m.group(1)) != indent:
                break
            buffer.advance()
            items.append(self._parse_list_item(m.group(3), indent))

        return List(
            items=tuple(items),
            ordered=ordered,
            start=start,
            bullet=bullet,  # type: ignore[arg-type]
        )

    def _parse_list_item(self, content: str, indent: int) -> ListItem:
        """Parse one item; the cursor sits just past its marker line."""
        buffer = self._buffer

        checked: bool | None = None
        if self._task_lists_enabled and (task := TASK_MARKER.match(content)) is not None:
            checked = task.group(1) != " "
            content = content[task.end():]

        prefix = " " * (indent + 2)
        text_lines = [content]
        nested_lines: list[str] = []

        while (line := buffer.current()) is not None:
            m = LIST_MARKER.match(line)
            if m is not None and len(m.group(1)) <= indent:
                break  # next item, or the end of this list

            if is_blank(line):
                if nested_lines:
                    nested_lines.append("")
            elif line.startswith(prefix):
                stripped = line[len(prefix):]
                if nested_lines or PARAGRAPH_INTERRUPT.match(stripped):
                    nested_lines.append(stripped)
                else:
                    text_lines.append(stripped)
            else:
                break
            buffer.advance()

        nested = self._parse_nested_content("\n".join(nested_lines)) if nested_lines else ()

        return ListItem(
            children=self._parse_inline("\n".join(text_lines)),
            nested=nested,
            checked=checked,
        )
