"""Typed document tree for Tejido.

All nodes are frozen dataclasses with slots for:
- Immutability: a parsed tree is read-only, transforms build new trees
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally over the closed unions

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── BlockQuote
│   ├── List
│   ├── Table
│   └── HorizontalRule
├── Inline (inline elements)
│   ├── Text
│   ├── Emphasis
│   ├── CodeSpan
│   ├── Link
│   ├── Image
│   ├── LineBreak
│   └── SoftBreak
└── Structure
    ├── Document
    ├── ListItem
    ├── TableRow
    └── TableCell

Document-level records (Metadata, ReferenceDef) and link targets
(DirectTarget, ReferenceTarget) are plain frozen values, not nodes.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, TypeAlias

Alignment: TypeAlias = Literal["left", "center", "right", "default"]
Bullet: TypeAlias = Literal["asterisk", "dash", "plus"]
FrontmatterFormat: TypeAlias = Literal["yaml", "toml"]


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


# =============================================================================
# Link Targets
# =============================================================================


@dataclass(frozen=True, slots=True)
class DirectTarget:
    """Inline destination.

    Markdown: [text](url)

    """

    url: str


@dataclass(frozen=True, slots=True)
class ReferenceTarget:
    """Indirection through the document's reference table.

    Markdown: [text][label]

    """

    label: str


LinkTarget: TypeAlias = DirectTarget | ReferenceTarget


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    The most common inline node, representing literal text.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Strong or italic text.

    Markdown: **text** / __text__ (strong), *text* / _text_ (italic)

    """

    children: tuple[Inline, ...]
    kind: Literal["strong", "italic"] = "italic"


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url "title") or [text][label]

    """

    children: tuple[Inline, ...]
    target: LinkTarget
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image. ``children`` holds the alt text.

    Markdown: ![alt](url "title") or ![alt][label]

    """

    children: tuple[Inline, ...]
    target: LinkTarget
    title: str | None = None


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Hard line break.

    Markdown: two trailing spaces before a newline

    """


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Soft line break (single newline in paragraph)."""


Inline: TypeAlias = Text | Emphasis | CodeSpan | Link | Image | LineBreak | SoftBreak


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading with the section that follows it.

    Markdown: # Heading

    ``nested`` holds every block after the heading line up to the next
    heading of the same or a higher rank (lower or equal level number).

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]
    nested: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: Text separated by blank lines

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced or indented code block.

    Markdown: ```lang ... ``` / ~~~lang ... ~~~, or ····code

    """

    content: str
    subtype: Literal["fenced", "indented"] = "fenced"
    language: str | None = None


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text

    """

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Markdown: - item, 1. item, or - [x] task

    """

    children: tuple[Inline, ...]
    nested: tuple[Block, ...] = ()
    checked: bool | None = None  # For task lists: True/False/None


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: * item, - item, + item or 1. item

    Ordered lists carry ``start``; unordered lists carry ``bullet``.

    """

    items: tuple[ListItem, ...]
    ordered: bool = False
    start: int = 1
    bullet: Bullet | None = "asterisk"


@dataclass(frozen=True, slots=True)
class TableCell(Node):
    """Table cell.

    Markdown: | cell content |

    """

    children: tuple[Inline, ...]
    align: Alignment = "default"
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table row.

    Markdown: | cell1 | cell2 |

    """

    cells: tuple[TableCell, ...]
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table.

    Markdown:
        | A | B |
        |:--|--:|
        | 1 | 2 |

    ``alignments`` is read once from the separator row and applied to
    every row's cells by position.

    """

    header: TableRow
    rows: tuple[TableRow, ...] = ()
    alignments: tuple[Alignment, ...] = ()


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    Markdown: --- or *** or ___

    """


Block: TypeAlias = Heading | Paragraph | CodeBlock | BlockQuote | List | Table | HorizontalRule


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Metadata:
    """Frontmatter block, kept verbatim.

    Markdown:
        ---          +++
        key: value   key = "value"
        ---          +++

    """

    format: FrontmatterFormat
    content: str


@dataclass(frozen=True, slots=True)
class ReferenceDef:
    """Reference definition.

    Markdown: [label]: url "title"

    """

    url: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks plus the reference and footnote tables
    (label -> definition, in discovery order) and optional frontmatter.

    """

    children: tuple[Block, ...]
    references: Mapping[str, ReferenceDef] = field(default_factory=lambda: MappingProxyType({}))
    footnotes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    metadata: Metadata | None = None

    def __post_init__(self) -> None:
        # Freeze plain dicts handed in by callers so the tables stay read-only
        if not isinstance(self.references, MappingProxyType):
            object.__setattr__(self, "references", MappingProxyType(dict(self.references)))
        if not isinstance(self.footnotes, MappingProxyType):
            object.__setattr__(self, "footnotes", MappingProxyType(dict(self.footnotes)))
