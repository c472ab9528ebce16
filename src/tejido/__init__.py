"""
Tejido: lightweight markup parser and canonical renderer.

Parses a Markdown-like markup (headings with sections, paragraphs, fenced
and indented code, block quotes, lists with task markers, pipe tables,
horizontal rules, emphasis, code spans, links and images) into an
immutable typed tree, and renders that tree back to canonical markup.
Frontmatter, reference definitions and footnotes are lifted out of the
body into document-level tables.

Quick Start:
    >>> from tejido import parse, render
    >>> doc = parse("# Hello\\n\\nWorld")
    >>> doc.children[0].level
    1
    >>> render(doc)
    '# Hello\\n\\nWorld'

    >>> # Or use the high-level Markup class
    >>> from tejido import Markup
    >>> md = Markup(tables=False)
    >>> md("* a\\n- b")
    '* a\\n* b'

Parsing never raises: anything the grammar does not recognise becomes
paragraph text. Zero runtime dependencies.
"""

from collections.abc import Iterable

from tejido.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tejido.errors import RenderError, TejidoError
from tejido.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    DirectTarget,
    Document,
    Emphasis,
    Heading,
    HorizontalRule,
    Image,
    Inline,
    LineBreak,
    Link,
    LinkTarget,
    List,
    ListItem,
    Metadata,
    Node,
    Paragraph,
    ReferenceDef,
    ReferenceTarget,
    SoftBreak,
    Table,
    TableCell,
    TableRow,
    Text,
)
from tejido.parser import Parser
from tejido.renderers.markup import MarkupRenderer
from tejido.renderers.protocol import ASTRenderer
from tejido.serialization import from_dict, from_json, to_dict, to_json
from tejido.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(source: str) -> Document:
    """Parse markup source into a typed document tree.

    Uses the parse configuration of the current context; see
    ``parse_config_context`` to switch features off.

    Args:
        source: Markup source text

    Returns:
        Document root with blocks, references, footnotes and metadata

    Example:
        >>> doc = parse("[x][r]\\n\\n[r]: http://e.com")
        >>> doc.references["r"].url
        'http://e.com'
    """
    return Parser(source).parse()


def render(doc: Document) -> str:
    """Render a document tree to canonical markup text.

    Args:
        doc: Document to render

    Returns:
        Markup text, without a trailing newline

    Raises:
        RenderError: If the tree contains a node the renderer does not know.
    """
    return MarkupRenderer().render(doc)


class Markup:
    """High-level processor combining parser and renderer.

    Usage:
        >>> md = Markup()
        >>> md("+ a\\n+ b")
        '+ a\\n+ b'

        >>> doc = md.parse("## Section")
        >>> doc.children[0].level
        2

    Thread Safety:
        Uses ContextVar for context-local configuration. Safe to use multiple
        Markup instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        tables: bool = True,
        task_lists: bool = True,
        frontmatter: bool = True,
        definitions: bool = True,
    ) -> None:
        """Initialize the processor.

        Args:
            tables: Recognise pipe tables
            task_lists: Extract [x] / [ ] markers from list items
            frontmatter: Extract a leading --- / +++ metadata block
            definitions: Lift reference and footnote definitions out of the body
        """
        # Built once and reused across calls
        self._config = ParseConfig(
            tables_enabled=tables,
            task_lists_enabled=task_lists,
            frontmatter_enabled=frontmatter,
            definitions_enabled=definitions,
        )
        self._renderer = MarkupRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render in one call, returning canonical markup."""
        return self.render(self.parse(source))

    def parse(self, source: str) -> Document:
        """Parse markup source with this processor's configuration.

        Thread Safety:
            Sets config via ContextVar (context-local). Safe for concurrent use.

        """
        with parse_config_context(self._config):
            return Parser(source).parse()

    def parse_many(self, sources: Iterable[str]) -> list[Document]:
        """Parse several sources, setting the configuration once.

        Example:
            >>> md = Markup()
            >>> docs = md.parse_many(["# Doc 1", "# Doc 2"])
        """
        with parse_config_context(self._config):
            return [Parser(source).parse() for source in sources]

    def render(self, doc: Document) -> str:
        """Render a document to canonical markup text."""
        return self._renderer.render(doc)


__all__ = [
    # Main API
    "parse",
    "render",
    "Markup",
    "Parser",
    "MarkupRenderer",
    "ASTRenderer",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "TejidoError",
    "RenderError",
    # Tree utilities
    "BaseVisitor",
    "transform",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Metadata",
    "ReferenceDef",
    "DirectTarget",
    "ReferenceTarget",
    "LinkTarget",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "HorizontalRule",
    "Text",
    "Emphasis",
    "CodeSpan",
    "Link",
    "Image",
    "LineBreak",
    "SoftBreak",
    # Version
    "__version__",
]
