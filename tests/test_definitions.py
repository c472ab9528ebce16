"""Tests for the reference and footnote definition pre-pass."""

from tejido import (
    BlockQuote,
    Link,
    List,
    Markup,
    Paragraph,
    ReferenceDef,
    ReferenceTarget,
    parse,
)


class TestReferenceDefinitions:
    """Reference definitions fill Document.references."""

    def test_reference_with_title(self) -> None:
        """The definition line is removed and recorded with its title."""
        doc = parse('[x][r]\n\n[r]: http://e.com "T"')

        assert dict(doc.references) == {"r": ReferenceDef(url="http://e.com", title="T")}
        assert len(doc.children) == 1

        para = doc.children[0]
        assert isinstance(para, Paragraph)
        links = [node for node in para.children if isinstance(node, Link)]
        assert len(links) == 1
        assert links[0].target == ReferenceTarget(label="r")

    def test_reference_without_title(self) -> None:
        doc = parse("[home]: https://example.com")
        assert doc.references["home"] == ReferenceDef(url="https://example.com")
        assert doc.references["home"].title is None
        assert doc.children == ()

    def test_definitions_anywhere(self) -> None:
        """Definitions before, between and after content are all extracted."""
        doc = parse("[a]: http://a.com\npara one\n\n[b]: http://b.com\n\npara two\n[c]: http://c.com")
        assert list(doc.references) == ["a", "b", "c"]
        assert all(isinstance(block, Paragraph) for block in doc.children)
        assert len(doc.children) == 2

    def test_indented_definition(self) -> None:
        """Leading whitespace before the label is allowed."""
        doc = parse("  [r]: http://e.com")
        assert "r" in doc.references

    def test_redefinition_last_wins(self) -> None:
        doc = parse("[r]: http://one.com\n[r]: http://two.com")
        assert doc.references["r"].url == "http://two.com"
        assert len(doc.references) == 1

    def test_unresolved_label_is_kept(self) -> None:
        """A link to an undefined label is still a reference link."""
        doc = parse("[text][missing]")
        link = doc.children[0].children[0]
        assert isinstance(link, Link)
        assert link.target == ReferenceTarget(label="missing")
        assert doc.references == {}

    def test_tables_are_read_only(self) -> None:
        """Document tables cannot be mutated."""
        import pytest

        doc = parse("[r]: http://e.com")
        with pytest.raises(TypeError):
            doc.references["x"] = ReferenceDef(url="u")  # type: ignore[index]

    def test_disabled(self) -> None:
        """With definitions off, definition lines stay in the body."""
        doc = Markup(definitions=False).parse("[r]: http://e.com")
        assert doc.references == {}
        assert isinstance(doc.children[0], Paragraph)


class TestFootnoteDefinitions:
    """Footnote definitions fill Document.footnotes."""

    def test_single_line(self) -> None:
        doc = parse("[^1]: A note.")
        assert dict(doc.footnotes) == {"1": "A note."}
        assert doc.children == ()

    def test_continuation_lines(self) -> None:
        """Indented continuation lines join the body without their indent."""
        doc = parse("Text\n\n[^note]: first\n    second\n    third")
        assert doc.footnotes["note"] == "first\nsecond\nthird"
        assert len(doc.children) == 1

    def test_blank_lines_inside_body(self) -> None:
        """Blank lines between continuation lines are part of the body."""
        doc = parse("[^n]: a\n\n    b")
        assert doc.footnotes["n"] == "a\n\nb"

    def test_body_ends_at_unindented_line(self) -> None:
        doc = parse("[^n]: a\n    b\nafter")
        assert doc.footnotes["n"] == "a\nb"
        assert isinstance(doc.children[0], Paragraph)

    def test_footnote_is_not_a_reference(self) -> None:
        """A footnote line never lands in the reference table."""
        doc = parse("[^1]: http://e.com")
        assert doc.references == {}
        assert doc.footnotes["1"] == "http://e.com"

    def test_discovery_order(self) -> None:
        doc = parse("[^b]: second\n[^a]: first")
        assert list(doc.footnotes) == ["b", "a"]


class TestNestedDefinitionScope:
    """Definitions inside quoted content stay with the nested document."""

    def test_quoted_reference_not_in_parent(self) -> None:
        """A reference defined inside a block quote is not merged upward."""
        doc = parse("> see [x][r]\n> [r]: http://e.com")

        assert doc.references == {}
        quote = doc.children[0]
        assert isinstance(quote, BlockQuote)
        assert len(quote.children) == 1
        assert isinstance(quote.children[0], Paragraph)

    def test_quoted_footnote_not_in_parent(self) -> None:
        doc = parse("> text\n>\n> [^1]: quoted note")
        assert doc.footnotes == {}

    def test_indented_list_definition_is_top_level(self) -> None:
        """List item lines are seen by the top-level pre-pass."""
        doc = parse("* item\n  [r]: http://e.com")
        assert doc.references["r"].url == "http://e.com"
        assert isinstance(doc.children[0], List)
