"""Canonical markup renderer.

Walks a Document and reconstructs markup text with a fixed layout:
frontmatter, blocks separated by one blank line, nested content prefixed
with ``> `` (quotes) or two spaces (list items), then the footnote and
reference tables.

Example:
    >>> from tejido import parse, render
    >>> render(parse("Title\\n\\n* a\\n* b"))
    'Title\\n\\n* a\\n* b'

Thread Safety:
    The renderer holds no state between calls. Safe for concurrent use.
"""

from collections.abc import Sequence

from tejido.errors import RenderError
from tejido.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    DirectTarget,
    Document,
    Emphasis,
    Heading,
    HorizontalRule,
    Image,
    Inline,
    LineBreak,
    Link,
    LinkTarget,
    List,
    ListItem,
    Metadata,
    Paragraph,
    ReferenceTarget,
    SoftBreak,
    Table,
    TableRow,
    Text,
)

_FRONTMATTER_DELIMITERS = {"yaml": "---", "toml": "+++"}

_BULLET_CHARS = {"asterisk": "*", "dash": "-", "plus": "+"}

_ALIGNMENT_MARKERS = {"left": ":---", "center": ":---:", "right": "---:", "default": "---"}


def _prefix_lines(text: str, prefix: str) -> list[str]:
    return [prefix + line for line in text.split("\n")]


class MarkupRenderer:
    """Render a Document back to canonical markup text."""

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render a document; no trailing newline is added."""
        output: list[str] = []

        if node.metadata is not None:
            output.extend(self._render_metadata(node.metadata))

        body = self._render_blocks(node.children)
        if body:
            output.append(body)

        if node.footnotes:
            if output:
                output.append("")
            for label, content in node.footnotes.items():
                output.append(f"[^{label}]: {self._render_footnote_body(content)}")

        if node.references:
            # A footnote body ending in a blank line already separates
            if output and output[-1].split("\n")[-1].strip():
                output.append("")
            for label, ref in node.references.items():
                title = f' "{ref.title}"' if ref.title is not None else ""
                output.append(f"[{label}]: {ref.url}{title}")

        return "\n".join(output)

    def _render_metadata(self, metadata: Metadata) -> list[str]:
        delimiter = _FRONTMATTER_DELIMITERS[metadata.format]
        return [delimiter, metadata.content, delimiter, ""]

    def _render_footnote_body(self, content: str) -> str:
        """Indent continuation lines so the body extracts back unchanged."""
        first, *rest = content.split("\n")
        lines = [first]
        lines.extend(f"    {line}" if line.strip() else line for line in rest)
        return "\n".join(lines)

    # -- Blocks ----------------------------------------------------------------

    def _render_blocks(self, blocks: Sequence[Block]) -> str:
        """Join rendered blocks with one blank line.

        No blank line goes before a horizontal rule or after a heading that
        carries its own section.
        """
        parts: list[str] = []
        previous: Block | None = None

        for block in blocks:
            rendered = self._render_block(block)
            if not rendered:
                continue
            if previous is not None and not (
                isinstance(block, HorizontalRule)
                or (isinstance(previous, Heading) and previous.nested)
            ):
                parts.append("")
            parts.append(rendered)
            previous = block

        return "\n".join(parts)

    def _render_block(self, block: Block) -> str:
        match block:
            case Heading():
                return self._render_heading(block)
            case Paragraph():
                return self._render_inlines(block.children)
            case CodeBlock():
                return self._render_code_block(block)
            case BlockQuote():
                if not block.children:
                    return "> "
                return "\n".join(_prefix_lines(self._render_blocks(block.children), "> "))
            case List():
                return self._render_list(block)
            case Table():
                return self._render_table(block)
            case HorizontalRule():
                return "---"
            case _:
                raise RenderError(block)

    def _render_heading(self, heading: Heading) -> str:
        result = f"{'#' * heading.level} {self._render_inlines(heading.children)}"
        if heading.nested:
            result += "\n\n" + self._render_blocks(heading.nested)
        return result

    def _render_code_block(self, block: CodeBlock) -> str:
        if block.subtype == "indented":
            return "\n".join(_prefix_lines(block.content, "    "))
        return f"```{block.language or ''}\n{block.content}\n```"

    def _render_list(self, block: List) -> str:
        lines: list[str] = []
        for index, item in enumerate(block.items):
            if block.ordered:
                marker = f"{block.start + index}."
            else:
                marker = _BULLET_CHARS.get(block.bullet or "asterisk", "*")
            lines.extend(self._render_list_item(item, marker))
        return "\n".join(lines)

    def _render_list_item(self, item: ListItem, marker: str) -> list[str]:
        task = ""
        if item.checked is not None:
            task = "[x] " if item.checked else "[ ] "

        first, *rest = self._render_inlines(item.children).split("\n")
        lines = [f"{marker} {task}{first}"]
        lines.extend(f"  {line}" for line in rest)

        if item.nested:
            lines.extend(_prefix_lines(self._render_blocks(item.nested), "  "))
        return lines

    def _render_table(self, table: Table) -> str:
        lines = [self._render_table_row(table.header)]
        markers = [_ALIGNMENT_MARKERS[cell.align] for cell in table.header.cells]
        lines.append(f"| {' | '.join(markers)} |")
        lines.extend(self._render_table_row(row) for row in table.rows)
        return "\n".join(lines)

    def _render_table_row(self, row: TableRow) -> str:
        cells = [self._render_inlines(cell.children) for cell in row.cells]
        return f"| {' | '.join(cells)} |"

    # -- Inlines ---------------------------------------------------------------

    def _render_inlines(self, inlines: Sequence[Inline]) -> str:
        return "".join(self._render_inline(inline) for inline in inlines)

    def _render_inline(self, inline: Inline) -> str:
        match inline:
            case Text():
                return inline.content
            case Emphasis(kind="strong"):
                return f"**{self._render_inlines(inline.children)}**"
            case Emphasis():
                return f"*{self._render_inlines(inline.children)}*"
            case CodeSpan():
                return f"`{inline.code}`"
            case Link():
                return self._render_link(inline.children, inline.target, inline.title)
            case Image():
                return "!" + self._render_link(inline.children, inline.target, inline.title)
            case LineBreak():
                return "  \n"
            case SoftBreak():
                return "\n"
            case _:
                raise RenderError(inline, context="inline")

    def _render_link(
        self, children: Sequence[Inline], target: LinkTarget, title: str | None
    ) -> str:
        text = self._render_inlines(children)
        match target:
            case ReferenceTarget(label=label):
                return f"[{text}][{label}]"
            case DirectTarget(url=url):
                title_part = f' "{title}"' if title is not None else ""
                return f"[{text}]({url}{title_part})"
            case _:
                raise RenderError(target, context="link target")


def render(doc: Document) -> str:
    """Render a document to canonical markup text.

    Args:
        doc: Document tree to render.

    Returns:
        Markup text joined with ``\\n``.
    """
    return MarkupRenderer().render(doc)
