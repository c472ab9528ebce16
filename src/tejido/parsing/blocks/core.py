"""Core block parsing for Tejido parser.

Provides block dispatch and the basic blocks (horizontal rules, headings
with their sections, code blocks, block quotes, paragraphs).

Each step classifies the line under the cursor by trying, in order:

    horizontal rule -> heading -> fenced code -> indented code
    -> block quote -> list -> table -> paragraph

Every branch consumes at least one line, so the dispatch loop always
terminates.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tejido.lines import is_blank
from tejido.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    Heading,
    HorizontalRule,
    Paragraph,
)
from tejido.parsing.patterns import (
    BLOCKQUOTE,
    FENCE_OPEN,
    HEADING,
    HORIZONTAL_RULE,
    INDENTED_CODE,
    LIST_MARKER,
    PARAGRAPH_INTERRUPT,
)
from tejido.utils.logger import get_logger

if TYPE_CHECKING:
    from tejido.lines import LineBuffer

logger = get_logger(__name__)


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Attributes:
        - _buffer: LineBuffer
        - _tables_enabled: bool

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]
        - _parse_nested_content(text) -> tuple[Block, ...]
        - _parse_list(m) -> List
        - _parse_table() -> Table

    """

    _buffer: LineBuffer

    def _parse_block(self) -> Block | None:
        """Parse the next block, or return None at end of input."""
        buffer = self._buffer
        buffer.skip_blank()
        line = buffer.current()
        if line is None:
            return None

        if HORIZONTAL_RULE.match(line):
            buffer.advance()
            return HorizontalRule()

        if (m := HEADING.match(line)) is not None:
            return self._parse_heading(m)

        if (m := FENCE_OPEN.match(line)) is not None:
            return self._parse_fenced_code(m)

        if INDENTED_CODE.match(line):
            return self._parse_indented_code()

        if BLOCKQUOTE.match(line):
            return self._parse_block_quote()

        if (m := LIST_MARKER.match(line)) is not None:
            return self._parse_list(m)

        if self._tables_enabled and "|" in line and "|" in (buffer.peek() or ""):
            return self._parse_table()

        return self._parse_paragraph()

    def _parse_heading(self, m: re.Match[str]) -> Heading:
        """Parse a heading and attach the section that follows it."""
        level = len(m.group(1))
        self._buffer.advance()
        children = self._parse_inline(m.group(2).strip())
        nested = self._parse_section()

        return Heading(
            level=level,  # type: ignore[arg-type]
            children=children,
            nested=nested,
        )

    def _parse_section(self) -> tuple[Block, ...]:
        """Collect the blocks that follow a heading, up to the next heading.

        Any heading line ends the section, whatever its level, so
        consecutive headings stay siblings. The stopping heading is left
        under the cursor for the caller.
        """
        buffer = self._buffer
        blocks: list[Block] = []

        while (line := buffer.current()) is not None:
            if HEADING.match(line):
                break
            if is_blank(line):
                buffer.advance()
                continue
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        return tuple(blocks)

    def _parse_fenced_code(self, m: re.Match[str]) -> CodeBlock:
        """Parse a ``` or ~~~ fenced block.

        The closing line is any line starting with the same fence. Without
        one, the block runs to end of input.
        """
        buffer = self._buffer
        fence = m.group(1)
        language = m.group(2).strip() or None
        start = buffer.pos
        buffer.advance()

        lines: list[str] = []
        while (line := buffer.current()) is not None and not line.startswith(fence):
            lines.append(line)
            buffer.advance()

        if buffer.at_end():
            logger.debug("Unterminated %s fence opened at line %d", fence, start + 1)
        else:
            buffer.advance()  # closing fence

        return CodeBlock(content="\n".join(lines), subtype="fenced", language=language)

    def _parse_indented_code(self) -> CodeBlock:
        """Parse lines carrying a 4-space prefix; blank lines stay in the block."""
        buffer = self._buffer
        lines: list[str] = []

        while (line := buffer.current()) is not None:
            if (m := INDENTED_CODE.match(line)) is not None:
                lines.append(m.group(1))
            elif is_blank(line):
                lines.append("")
            else:
                break
            buffer.advance()

        return CodeBlock(content="\n".join(lines).rstrip(), subtype="indented")

    def _parse_block_quote(self) -> BlockQuote:
        """Strip the > prefix and parse the quoted text as its own document."""
        buffer = self._buffer
        lines: list[str] = []

        while (line := buffer.current()) is not None:
            m = BLOCKQUOTE.match(line)
            if m is None:
                break
            lines.append(m.group(1))
            buffer.advance()

        return BlockQuote(children=self._parse_nested_content("\n".join(lines)))

    def _parse_paragraph(self) -> Paragraph:
        """Accumulate lines until a blank line or the start of another block.

        The first line is always taken, even when it looks like a block
        opener that no rule accepted (``# `` or ``***x``).
        """
        buffer = self._buffer
        lines = [buffer.current() or ""]
        buffer.advance()

        while (line := buffer.current()) is not None:
            if is_blank(line) or PARAGRAPH_INTERRUPT.match(line):
                break
            lines.append(line)
            buffer.advance()

        return Paragraph(children=self._parse_inline("\n".join(lines)))
