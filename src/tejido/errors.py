"""Exception classes for Tejido.

Parsing never raises: malformed markup degrades to plain text. These
exceptions cover programming errors on the tree side.
"""

from __future__ import annotations


class TejidoError(Exception):
    """Base exception for all Tejido errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(TejidoError):
    """Error during markup rendering.

    Raised when the renderer meets an object that is not one of the
    known node types.
    """

    def __init__(self, node: object, context: str = "block") -> None:
        """Initialize render error.

        Args:
            node: The offending object
            context: Where it was found ("block", "inline" or "link target")
        """
        self.node = node
        self.context = context
        super().__init__(f"Cannot render {context} node of type {type(node).__name__!r}")
