"""Reference and footnote definition pre-pass.

Block parsing knows nothing about definition syntax, so this pass runs
over the whole buffer first, records every definition and blanks its
source lines:

    [label]: http://example.com "Title"
    [^note]: First line of the footnote.
        Indented continuation lines belong to it.

Footnote bodies take every following line that is blank or indented by
four or more whitespace characters. Indented lines lose that prefix;
blank lines are kept in the body. Bodies are joined with newlines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tejido.lines import is_blank
from tejido.nodes import ReferenceDef
from tejido.parsing.patterns import FOOTNOTE_DEF, INDENTED_4, REFERENCE_DEF
from tejido.utils.logger import get_logger

if TYPE_CHECKING:
    from tejido.lines import LineBuffer

logger = get_logger(__name__)


class DefinitionMixin:
    """Mixin extracting reference and footnote definitions.

    Required Host Attributes:
        - _buffer: LineBuffer
        - _references: dict[str, ReferenceDef]
        - _footnotes: dict[str, str]

    """

    _buffer: LineBuffer
    _references: dict[str, ReferenceDef]
    _footnotes: dict[str, str]

    def _extract_definitions(self) -> None:
        """Scan every line once, independent of the cursor."""
        buffer = self._buffer
        i = 0
        while i < len(buffer):
            line = buffer[i]

            # Footnotes first: "[^1]: text" must not read as a reference
            m = FOOTNOTE_DEF.match(line)
            if m is not None:
                i = self._collect_footnote(i, m.group(1), m.group(2))
                continue

            m = REFERENCE_DEF.match(line)
            if m is not None:
                label, url, title = m.groups()
                if label in self._references:
                    logger.debug("Reference %r redefined at line %d", label, i + 1)
                self._references[label] = ReferenceDef(url=url, title=title)
                buffer.blank(i)

            i += 1

    def _collect_footnote(self, index: int, label: str, first: str) -> int:
        """Record a footnote starting at ``index``; return the next line to scan."""
        buffer = self._buffer
        body = [first]
        buffer.blank(index)

        j = index + 1
        while j < len(buffer):
            line = buffer[j]
            if INDENTED_4.match(line):
                body.append(line[4:])
                buffer.blank(j)
            elif is_blank(line):
                body.append(line)
            else:
                break
            j += 1

        self._footnotes[label] = "\n".join(body)
        logger.debug("Footnote %r: %d line(s)", label, len(body))
        return j
