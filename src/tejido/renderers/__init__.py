"""Tejido renderers.

Renderers turn a Document tree back into text.

Available Renderers:
- MarkupRenderer: Canonical markup output (parse/render round trip)

Thread Safety:
Renderers keep all working state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from tejido.renderers.markup import MarkupRenderer, render
from tejido.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "MarkupRenderer", "render"]
