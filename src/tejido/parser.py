"""Two-phase parser producing a typed document tree.

Phase one segments lines into blocks; phase two tokenizes each block's
leaf text into inline nodes. Before block parsing, the frontmatter block
is consumed and reference/footnote definitions are extracted from the
whole buffer.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `FrontmatterMixin`: Leading metadata block
- `DefinitionMixin`: Definition pre-pass over the line buffer
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (headings, lists, tables)

Block quotes and list items with nested blocks recurse through a fresh
Parser over their extracted text. The nested parse shares nothing with
its parent except the configuration ContextVar.

"""

from __future__ import annotations

from types import MappingProxyType

from tejido.config import ParseConfig, get_parse_config
from tejido.lines import LineBuffer
from tejido.nodes import Block, Document, Metadata, Paragraph, ReferenceDef
from tejido.parsing import (
    BlockParsingMixin,
    DefinitionMixin,
    FrontmatterMixin,
    InlineParsingMixin,
)
from tejido.utils.logger import get_logger

logger = get_logger(__name__)

# Quote and list item nesting beyond this depth is kept as paragraph text
MAX_NESTING_DEPTH = 16


class Parser(
    FrontmatterMixin,
    DefinitionMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Block/inline parser for Tejido markup.

    Usage:
        >>> parser = Parser("# Hello\\n\\nWorld")
        >>> doc = parser.parse()
        >>> doc.children[0]
        Heading(level=1, children=(Text(content='Hello'),), nested=(Paragraph(...),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar. The resulting
        tree is immutable and safe to share.

    """

    __slots__ = (
        "_source",
        "_buffer",
        "_references",
        "_footnotes",
        "_metadata",
        "_depth",
    )

    def __init__(self, source: str, *, depth: int = 0) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markup source text
            depth: Nesting level; set by the parser itself for quote and
                list item content

        """
        self._source = source
        self._depth = depth
        self._buffer = LineBuffer.from_text(source)
        self._references: dict[str, ReferenceDef] = {}
        self._footnotes: dict[str, str] = {}
        self._metadata: Metadata | None = None

    # =========================================================================
    # Configuration Properties (read from ContextVar)
    # =========================================================================

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (context-local)."""
        return get_parse_config()

    @property
    def _tables_enabled(self) -> bool:
        return self._config.tables_enabled

    @property
    def _task_lists_enabled(self) -> bool:
        return self._config.task_lists_enabled

    def parse(self) -> Document:
        """Parse the source into a Document.

        Never raises on input text: anything unrecognised ends up as
        paragraph text.
        """
        config = self._config

        if config.frontmatter_enabled:
            self._parse_frontmatter()
        if config.definitions_enabled:
            self._extract_definitions()

        blocks: list[Block] = []
        while not self._buffer.at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        return Document(
            children=tuple(blocks),
            references=MappingProxyType(dict(self._references)),
            footnotes=MappingProxyType(dict(self._footnotes)),
            metadata=self._metadata,
        )

    def _parse_nested_content(self, content: str) -> tuple[Block, ...]:
        """Parse extracted block quote or list item text as its own document.

        Only the nested document's blocks are kept. Definitions found in
        it stay in the nested document and are not merged into this one.
        """
        if not content.strip():
            return ()

        if self._depth >= MAX_NESTING_DEPTH:
            logger.debug("Nesting depth %d reached, keeping content as text", self._depth)
            return (Paragraph(children=self._parse_inline(content)),)

        logger.debug("Parsing nested document at depth %d", self._depth + 1)
        return Parser(content, depth=self._depth + 1).parse().children
