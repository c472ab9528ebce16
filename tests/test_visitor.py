"""Tests for the tree visitor and transform utilities."""

import dataclasses

import pytest

from tejido import parse
from tejido.nodes import (
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    ListItem,
    Node,
    Paragraph,
    ReferenceTarget,
    TableCell,
    TableRow,
    Text,
)
from tejido.visitor import BaseVisitor, transform


class _TypeCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.names: list[str] = []

    def visit_default(self, node: Node) -> None:
        self.names.append(type(node).__name__)


class _TextCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.texts: list[str] = []

    def visit_text(self, node: Text) -> None:
        self.texts.append(node.content)


class TestBaseVisitor:
    """Dispatch and child walking."""

    def test_heading_text_before_section(self) -> None:
        doc = parse("# Title\n\nbody")
        collector = _TypeCollector()
        collector.visit(doc)
        assert collector.names == ["Document", "Heading", "Text", "Paragraph", "Text"]

    def test_list_items_and_nested_blocks(self) -> None:
        doc = parse("* a\n  * b")
        collector = _TextCollector()
        collector.visit(doc)
        assert collector.texts == ["a", "b"]

    def test_table_header_then_rows(self) -> None:
        doc = parse("| H1 | H2 |\n|---|---|\n| c1 | c2 |")
        collector = _TextCollector()
        collector.visit(doc)
        assert collector.texts == ["H1", "H2", "c1", "c2"]

    def test_link_and_image_children(self) -> None:
        doc = parse("[*a*](u) ![b][r]")
        collector = _TextCollector()
        collector.visit(doc)
        assert collector.texts == ["a", " ", "b"]

    def test_block_quote_children(self) -> None:
        doc = parse("> ```\n> code\n> ```")
        blocks: list[CodeBlock] = []

        class CodeCollector(BaseVisitor[None]):
            def visit_code_block(self, node: CodeBlock) -> None:
                blocks.append(node)

        CodeCollector().visit(doc)
        assert blocks == [CodeBlock(content="code")]

    def test_return_value(self) -> None:
        class LevelReader(BaseVisitor[int]):
            def visit_heading(self, node: Heading) -> int:
                return node.level

            def visit_default(self, node: Node) -> int:
                return 0

        doc = parse("### Three")
        assert LevelReader().visit(doc.children[0]) == 3
        assert LevelReader().visit(doc) == 0

    def test_reference_labels(self) -> None:
        class LabelCollector(BaseVisitor[None]):
            def __init__(self) -> None:
                self.labels: list[str] = []

            def visit_link(self, node: Link) -> None:
                if isinstance(node.target, ReferenceTarget):
                    self.labels.append(node.target.label)

        collector = LabelCollector()
        collector.visit(parse("[a][x] and [b](u) and [c][]"))
        assert collector.labels == ["x", "c"]


class TestTransform:
    """Bottom-up immutable rewriting."""

    def test_demote_headings(self) -> None:
        doc = parse("# A\n\n## B")

        def demote(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, level=min(node.level + 1, 6))
            return node

        result = transform(doc, demote)
        assert result.children[0].level == 2
        assert result.children[1].level == 3
        assert doc.children[0].level == 1

    def test_identity_returns_same_tree(self) -> None:
        doc = parse("* a\n\n> b")
        assert transform(doc, lambda node: node) is doc

    def test_remove_nodes(self) -> None:
        doc = parse("keep **drop** keep")

        def drop_emphasis(node: Node) -> Node | None:
            return None if isinstance(node, Emphasis) else node

        result = transform(doc, drop_emphasis)
        assert result.children[0] == Paragraph(children=(Text(content="keep "), Text(content=" keep")))

    def test_rewrite_inside_list_item_nested(self) -> None:
        doc = parse("* item\n  ```\n  old\n  ```")

        def upgrade(node: Node) -> Node:
            if isinstance(node, CodeBlock):
                return dataclasses.replace(node, content="new")
            return node

        result = transform(doc, upgrade)
        item = result.children[0].items[0]
        assert isinstance(item, ListItem)
        assert item.nested == (CodeBlock(content="new"),)

    def test_rewrite_image_alt(self) -> None:
        doc = parse("![old](i.png)")

        def rename(node: Node) -> Node:
            if isinstance(node, Text) and node.content == "old":
                return Text(content="new")
            return node

        result = transform(doc, rename)
        image = result.children[0].children[0]
        assert isinstance(image, Image)
        assert image.children == (Text(content="new"),)

    def test_table_header_removal_leaves_empty_row(self) -> None:
        doc = parse("| H |\n|---|\n| c |")

        def drop_header(node: Node) -> Node | None:
            if isinstance(node, TableRow) and node.is_header:
                return None
            return node

        table = transform(doc, drop_header).children[0]
        assert table.header == TableRow(cells=(), is_header=True)
        assert len(table.rows) == 1

    def test_table_cells_rewritten(self) -> None:
        doc = parse("| a |\n|---|\n| b |")

        def upper(node: Node) -> Node:
            if isinstance(node, Text):
                return Text(content=node.content.upper())
            return node

        table = transform(doc, upper).children[0]
        assert table.header.cells[0].children == (Text(content="A"),)
        assert isinstance(table.rows[0].cells[0], TableCell)
        assert table.rows[0].cells[0].children == (Text(content="B"),)

    def test_document_tables_carried_over(self) -> None:
        doc = parse("x\n\n[r]: http://e.com\n[^1]: n")
        result = transform(doc, lambda node: None if isinstance(node, Paragraph) else node)
        assert result.children == ()
        assert result.references == doc.references
        assert result.footnotes == doc.footnotes

    def test_root_cannot_be_removed(self) -> None:
        doc = parse("x")
        with pytest.raises(TypeError, match="cannot remove root"):
            transform(doc, lambda node: None if isinstance(node, Document) else node)

    def test_root_must_stay_document(self) -> None:
        doc = parse("x")
        with pytest.raises(TypeError):
            transform(doc, lambda node: Text(content="x") if isinstance(node, Document) else node)
