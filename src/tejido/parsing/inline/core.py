"""Core inline tokenization for Tejido parser.

Scans a text span left to right. At each position the recognizers are
tried in a fixed priority order and the first match wins:

    code span -> strong -> italic -> direct link -> reference link
    -> direct image -> reference image -> hard break -> soft break
    -> plain text -> single character

The scan is greedy and never backtracks, so inputs with overlapping
``*``/``_`` delimiters resolve by rule order rather than by a full
grammar. If nothing matches, exactly one character is emitted as Text,
which guarantees forward progress.

Thread Safety:
All methods are stateless. Safe for concurrent use.

"""

from collections.abc import Callable
from typing import TypeAlias

from tejido.nodes import (
    CodeSpan,
    Emphasis,
    Inline,
    LineBreak,
    SoftBreak,
    Text,
)
from tejido.parsing.patterns import CODE_SPAN, HARD_BREAK, ITALIC, PLAIN_TEXT, STRONG

InlineMatch: TypeAlias = tuple[Inline, int] | None


class InlineParsingCoreMixin:
    """Core inline parsing methods.

    Required Host Methods (from other mixins):
        - _try_parse_link(text, pos) -> tuple | None
        - _try_parse_reference_link(text, pos) -> tuple | None
        - _try_parse_image(text, pos) -> tuple | None
        - _try_parse_reference_image(text, pos) -> tuple | None

    """

    def _parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Tokenize a text span (may contain newlines) into inline nodes."""
        if not text:
            return ()

        recognizers = self._inline_recognizers()
        nodes: list[Inline] = []
        pos = 0
        text_len = len(text)

        while pos < text_len:
            for recognize in recognizers:
                result = recognize(text, pos)
                if result is not None:
                    node, pos = result
                    nodes.append(node)
                    break
            else:
                nodes.append(Text(content=text[pos]))
                pos += 1

        return tuple(nodes)

    def _inline_recognizers(self) -> tuple[Callable[[str, int], InlineMatch], ...]:
        """Recognizers in priority order."""
        return (
            self._try_parse_code_span,
            self._try_parse_strong,
            self._try_parse_italic,
            self._try_parse_link,
            self._try_parse_reference_link,
            self._try_parse_image,
            self._try_parse_reference_image,
            self._try_parse_hard_break,
            self._try_parse_soft_break,
            self._try_parse_text,
        )

    def _try_parse_code_span(self, text: str, pos: int) -> InlineMatch:
        """`code` with no nested backticks."""
        if text[pos] != "`":
            return None
        m = CODE_SPAN.match(text, pos)
        if m is None:
            return None
        return CodeSpan(code=m.group(1)), m.end()

    def _try_parse_strong(self, text: str, pos: int) -> InlineMatch:
        """**text** or __text__; content excludes * and _."""
        if text[pos] not in "*_":
            return None
        m = STRONG.match(text, pos)
        if m is None:
            return None
        return Emphasis(children=self._parse_inline(m.group(2)), kind="strong"), m.end()

    def _try_parse_italic(self, text: str, pos: int) -> InlineMatch:
        """*text* or _text_; content excludes * and _."""
        if text[pos] not in "*_":
            return None
        m = ITALIC.match(text, pos)
        if m is None:
            return None
        return Emphasis(children=self._parse_inline(m.group(2)), kind="italic"), m.end()

    def _try_parse_hard_break(self, text: str, pos: int) -> InlineMatch:
        if text[pos] != " ":
            return None
        m = HARD_BREAK.match(text, pos)
        if m is None:
            return None
        return LineBreak(), m.end()

    def _try_parse_soft_break(self, text: str, pos: int) -> InlineMatch:
        if text[pos] != "\n":
            return None
        return SoftBreak(), pos + 1

    def _try_parse_text(self, text: str, pos: int) -> InlineMatch:
        """Longest run free of trigger characters (* _ ` ! [ newline)."""
        m = PLAIN_TEXT.match(text, pos)
        if m is None:
            return None
        return Text(content=m.group()), m.end()
