"""Parsing subsystem for Tejido.

Provides mixin classes for modular parsing functionality:
- `FrontmatterMixin`: Leading --- / +++ metadata block
- `DefinitionMixin`: Reference and footnote definition pre-pass
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (headings, lists, tables)

Architecture:
The parser uses a mixin-based design for separation of concerns. Each
mixin handles one phase or one aspect of the grammar and reads the
shared line buffer from its host.

Example:
    >>> from tejido.parsing import (
    ...     FrontmatterMixin,
    ...     DefinitionMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(FrontmatterMixin, DefinitionMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from tejido.parsing.blocks import BlockParsingMixin
from tejido.parsing.definitions import DefinitionMixin
from tejido.parsing.frontmatter import FrontmatterMixin
from tejido.parsing.inline import InlineParsingMixin

__all__ = [
    "BlockParsingMixin",
    "DefinitionMixin",
    "FrontmatterMixin",
    "InlineParsingMixin",
]
