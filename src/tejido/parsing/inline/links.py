"""Link and image parsing for Tejido parser.

Handles direct links, reference links, direct images and reference
images. Link text and alt text are tokenized recursively, so emphasis
nests inside links and links nest inside emphasis.

Reference targets are not resolved here: a ``[text][label]`` whose label
is never defined still produces a Link and renders back as written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tejido.nodes import DirectTarget, Image, Link, ReferenceTarget
from tejido.parsing.patterns import (
    DIRECT_IMAGE,
    DIRECT_LINK,
    REFERENCE_IMAGE,
    REFERENCE_LINK,
)

if TYPE_CHECKING:
    from tejido.parsing.inline.core import InlineMatch


class LinkParsingMixin:
    """Mixin for link and image parsing.

    Required Host Methods:
        - _parse_inline(text) -> tuple[Inline, ...]

    """

    def _try_parse_link(self, text: str, pos: int) -> InlineMatch:
        """[text](url "title")"""
        if text[pos] != "[":
            return None
        m = DIRECT_LINK.match(text, pos)
        if m is None:
            return None
        link_text, url, title = m.groups()
        node = Link(
            children=self._parse_inline(link_text),
            target=DirectTarget(url=url),
            title=title,
        )
        return node, m.end()

    def _try_parse_reference_link(self, text: str, pos: int) -> InlineMatch:
        """[text][label]; an empty label falls back to the text itself."""
        if text[pos] != "[":
            return None
        m = REFERENCE_LINK.match(text, pos)
        if m is None:
            return None
        link_text, label = m.groups()
        node = Link(
            children=self._parse_inline(link_text),
            target=ReferenceTarget(label=label or link_text),
        )
        return node, m.end()

    def _try_parse_image(self, text: str, pos: int) -> InlineMatch:
        """![alt](url "title")"""
        if not text.startswith("![", pos):
            return None
        m = DIRECT_IMAGE.match(text, pos)
        if m is None:
            return None
        alt, url, title = m.groups()
        node = Image(
            children=self._parse_inline(alt),
            target=DirectTarget(url=url),
            title=title,
        )
        return node, m.end()

    def _try_parse_reference_image(self, text: str, pos: int) -> InlineMatch:
        """![alt][label]; an empty label falls back to the alt text."""
        if not text.startswith("![", pos):
            return None
        m = REFERENCE_IMAGE.match(text, pos)
        if m is None:
            return None
        alt, label = m.groups()
        # ![][] has nothing to resolve against
        if not (label or alt):
            return None
        node = Image(
            children=self._parse_inline(alt),
            target=ReferenceTarget(label=label or alt),
        )
        return node, m.end()
