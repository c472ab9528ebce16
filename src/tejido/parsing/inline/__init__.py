"""Inline parsing subsystem for Tejido parser.

Provides mixins for parsing inline content:
- Code spans (`)
- Strong and italic emphasis (**, __, *, _)
- Links and images, direct and by reference
- Hard and soft line breaks

"""

from __future__ import annotations

from tejido.parsing.inline.core import InlineMatch, InlineParsingCoreMixin
from tejido.parsing.inline.links import LinkParsingMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    LinkParsingMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the Parser class.

    """

    pass


__all__ = [
    "InlineMatch",
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "LinkParsingMixin",
]
