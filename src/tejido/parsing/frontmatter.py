"""Frontmatter extraction for Tejido parser.

A document may open with a metadata block delimited by a repeated
marker line:

    ---                 +++
    title: Example      title = "Example"
    ---                 +++

The inner text is kept verbatim; its dialect is fixed by the delimiter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tejido.nodes import Metadata
from tejido.parsing.patterns import FRONTMATTER_DELIMITERS
from tejido.utils.logger import get_logger

if TYPE_CHECKING:
    from tejido.lines import LineBuffer

logger = get_logger(__name__)


class FrontmatterMixin:
    """Mixin for leading metadata blocks.

    Required Host Attributes:
        - _buffer: LineBuffer (cursor at line 0)
        - _metadata: Metadata | None

    """

    _buffer: LineBuffer
    _metadata: Metadata | None

    def _parse_frontmatter(self) -> None:
        """Consume a frontmatter block at the cursor, if one is closed.

        An unterminated block produces no metadata and leaves the cursor on
        the opening delimiter, which then parses as ordinary content.
        """
        buffer = self._buffer
        delimiter = buffer.current()
        if delimiter is None or delimiter not in FRONTMATTER_DELIMITERS:
            return

        start = buffer.pos
        end = start + 1
        while end < len(buffer) and buffer[end] != delimiter:
            end += 1

        if end >= len(buffer):
            logger.debug("Unterminated %r frontmatter at line %d, treating as content", delimiter, start + 1)
            return

        self._metadata = Metadata(
            format=FRONTMATTER_DELIMITERS[delimiter],  # type: ignore[arg-type]
            content="\n".join(buffer[i] for i in range(start + 1, end)),
        )
        buffer.advance(end + 1 - start)
        buffer.skip_blank()
