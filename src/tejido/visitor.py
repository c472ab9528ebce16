"""Tree visitor and transformer for Tejido.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen document trees.

Example: collect link labels that point into the reference table:

    class LabelCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.labels: list[str] = []

        def visit_link(self, node: Link) -> None:
            if isinstance(node.target, ReferenceTarget):
                self.labels.append(node.target.label)

    collector = LabelCollector()
    collector.visit(doc)

Example: demote every heading one level:

    def demote(node: Node) -> Node:
        if isinstance(node, Heading):
            return dataclasses.replace(node, level=min(node.level + 1, 6))
        return node

    new_doc = transform(doc, demote)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

from tejido.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SoftBreak,
    Table,
    TableCell,
    TableRow,
    Text,
)

# Tuple-valued fields holding child nodes, in document order
_CHILD_FIELDS: dict[type[Node], tuple[str, ...]] = {
    Document: ("children",),
    Heading: ("children", "nested"),
    Paragraph: ("children",),
    BlockQuote: ("children",),
    List: ("items",),
    ListItem: ("children", "nested"),
    Table: ("rows",),
    TableRow: ("cells",),
    TableCell: ("children",),
    Emphasis: ("children",),
    Link: ("children",),
    Image: ("children",),
}


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call: a heading's inline
    text before its section, a list item's text before its nested blocks,
    a table's header row before its body rows.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` override.

        Default returns None (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_block_quote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_table_row(self, node: TableRow) -> T:
        return self.visit_default(node)

    def visit_table_cell(self, node: TableCell) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_code_span(self, node: CodeSpan) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_line_break(self, node: LineBreak) -> T:
        return self.visit_default(node)

    def visit_soft_break(self, node: SoftBreak) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case BlockQuote():
                return self.visit_block_quote(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case Table():
                return self.visit_table(node)
            case TableRow():
                return self.visit_table_row(node)
            case TableCell():
                return self.visit_table_cell(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case Text():
                return self.visit_text(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case CodeSpan():
                return self.visit_code_span(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case LineBreak():
                return self.visit_line_break(node)
            case SoftBreak():
                return self.visit_soft_break(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        if isinstance(node, Table):
            self.visit(node.header)
        for name in _CHILD_FIELDS.get(type(node), ()):
            for child in getattr(node, name):
                self.visit(child)


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children, so ``fn`` always
    receives nodes whose children are already rewritten.

    Return ``None`` from ``fn`` to remove a node. Removing a table's header
    row leaves an empty header. The root Document cannot be removed;
    returning None or a non-Document for it raises TypeError.

    The reference, footnote and metadata tables are carried over unchanged.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; removed nodes are dropped."""
    changes: dict[str, object] = {}

    if isinstance(node, Table):
        header = _transform_node(node.header, fn)
        if header is None:
            header = TableRow(cells=(), is_header=True)
        if header != node.header:
            changes["header"] = header

    for name in _CHILD_FIELDS.get(type(node), ()):
        children = getattr(node, name)
        new_children = tuple(
            result for child in children
            if (result := _transform_node(child, fn)) is not None
        )
        if new_children != children:
            changes[name] = new_children

    if changes:
        return dataclasses.replace(node, **changes)  # type: ignore[arg-type]
    return node
