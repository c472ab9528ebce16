"""Block parsing subsystem for Tejido parser.

Provides mixins for parsing block-level content:
- Horizontal rules
- Headings, with the section that follows them
- Code blocks (fenced and indented)
- Block quotes
- Lists (ordered, unordered, task lists)
- Tables
- Paragraphs

Architecture:
Block parsing is split into logical modules:
- core: Block dispatch and basic blocks
- list: List and list item parsing
- table: Pipe table parsing

"""

from tejido.parsing.blocks.core import BlockParsingCoreMixin
from tejido.parsing.blocks.list import ListParsingMixin
from tejido.parsing.blocks.table import TableParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
    TableParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _buffer: LineBuffer
        - _tables_enabled: bool
        - _task_lists_enabled: bool

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]
        - _parse_nested_content(text) -> tuple[Block, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListParsingMixin",
    "TableParsingMixin",
]
