"""Visitor: report reference links whose label has no definition."""

from tejido import parse
from tejido.nodes import Image, Link, ReferenceTarget
from tejido.visitor import BaseVisitor


class ReferenceCollector(BaseVisitor[None]):
    """Collect every label used by a reference link or image."""

    def __init__(self) -> None:
        self.labels: list[str] = []

    def visit_link(self, node: Link) -> None:
        if isinstance(node.target, ReferenceTarget):
            self.labels.append(node.target.label)

    def visit_image(self, node: Image) -> None:
        if isinstance(node.target, ReferenceTarget):
            self.labels.append(node.target.label)


source = """# Links

See [the guide][guide], the [changelog][] and ![logo][brand].

[guide]: https://example.com/guide "Guide"
"""

doc = parse(source)
collector = ReferenceCollector()
collector.visit(doc)

missing = [label for label in collector.labels if label not in doc.references]
print("Used labels:", collector.labels)
print("Missing definitions:", missing)
