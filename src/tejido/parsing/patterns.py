"""Compiled line and inline patterns.

All patterns are compiled once at import and shared by every parser.
Block patterns are matched against a single line; inline patterns are
matched at an explicit position with ``pattern.match(text, pos)``.

Usage:
    from tejido.parsing.patterns import HEADING

    m = HEADING.match(line)
    if m:
        level = len(m.group(1))
"""

import re

# =============================================================================
# Frontmatter
# =============================================================================

# Delimiter line -> dialect
FRONTMATTER_DELIMITERS: dict[str, str] = {"---": "yaml", "+++": "toml"}

# =============================================================================
# Definitions (pre-pass)
# =============================================================================

# [^label]: body
FOOTNOTE_DEF = re.compile(r"^\s*\[\^([^\]]+)\]:\s*(.*)$")

# [label]: url "title"
REFERENCE_DEF = re.compile(r'^\s*\[([^\]^][^\]]*)\]:\s*(\S+)(?:\s+"([^"]*)")?')

# Footnote continuation: indented by at least four whitespace characters
INDENTED_4 = re.compile(r"^\s{4,}")

# =============================================================================
# Blocks
# =============================================================================

HORIZONTAL_RULE = re.compile(r"^(\*{3,}|-{3,}|_{3,})\s*$")

HEADING = re.compile(r"^(#{1,6})\s+(.+)$")

FENCE_OPEN = re.compile(r"^(```|~~~)(.*)$")

INDENTED_CODE = re.compile(r"^    (.*)$")

BLOCKQUOTE = re.compile(r"^>\s?(.*)$")

# Groups: indent, marker, content
LIST_MARKER = re.compile(r"^(\s*)([*+-]|\d{1,9}\.)\s+(.*)$")

TASK_MARKER = re.compile(r"^\[([xX ])\](?:\s+|$)")

TABLE_ALIGNMENT_ROW = re.compile(r"^[\s|:-]+$")

# Lines that end a paragraph because they would start another block
PARAGRAPH_INTERRUPT = re.compile(r"^(#{1,6}\s|```|~~~|>|\s*([*+-]|\d{1,9}\.)\s+|\*{3,}|-{3,}|_{3,})")

BULLETS: dict[str, str] = {"*": "asterisk", "-": "dash", "+": "plus"}

# =============================================================================
# Inline
# =============================================================================

CODE_SPAN = re.compile(r"`([^`]+)`")

STRONG = re.compile(r"(\*\*|__)([^*_]+)\1")

ITALIC = re.compile(r"(\*|_)([^*_]+)\1")

DIRECT_LINK = re.compile(r'\[([^\]]+)\]\(([^)]+?)(?:\s+"([^"]*)")?\)')

REFERENCE_LINK = re.compile(r"\[([^\]]+)\]\[([^\]]*)\]")

DIRECT_IMAGE = re.compile(r'!\[([^\]]*)\]\(([^)]+?)(?:\s+"([^"]*)")?\)')

REFERENCE_IMAGE = re.compile(r"!\[([^\]]*)\]\[([^\]]*)\]")

HARD_BREAK = re.compile(r" {2,}\n")

# Longest run without a trigger character; a space may not start the
# trailing spaces of a hard break
PLAIN_TEXT = re.compile(r"(?:[^*_`!\[\n ]| (?! +\n))+")
