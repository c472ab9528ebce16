"""Immutable tree transform: demote every heading by one level."""

import dataclasses

from tejido import parse, render, transform
from tejido.nodes import Heading


def demote(node) -> object:
    """Demote heading levels (e.g. # -> ##)."""
    if isinstance(node, Heading):
        return dataclasses.replace(node, level=min(node.level + 1, 6))
    return node


source = """# Top Level

Content here.

## Section

More content.
"""

doc = parse(source)
new_doc = transform(doc, demote)

print("Original:")
print(render(doc))
print()
print("After demoting headings:")
print(render(new_doc))
