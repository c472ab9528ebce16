"""Cache a parsed document: JSON round-trip."""

from tejido import parse
from tejido.serialization import from_json, to_json

doc = parse("---\ntitle: Cached\n---\n\n# Cached document\n\nSee [here][r].\n\n[r]: https://example.com")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("Metadata:", restored.metadata)
print("References:", dict(restored.references))
