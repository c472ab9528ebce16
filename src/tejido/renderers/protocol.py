"""ASTRenderer protocol: stable interface for document renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``MarkupRenderer`` is the reference implementation.

Example:
    from tejido.renderers.protocol import ASTRenderer

    def canonicalize(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from tejido.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for document renderers.

    Implementations accept a Document and return text. ``MarkupRenderer``
    conforms to this protocol.

    """

    def render(self, node: Document) -> str:
        """Render a Document to a string.

        Args:
            node: The document tree to render.

        Returns:
            Rendered text.

        """
        ...
