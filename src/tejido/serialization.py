"""Tree serialization: JSON round-trip for Tejido documents.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed documents to disk
- Snapshot tests of parser output
- Debugging and inspection

All output is deterministic (sorted keys). The reference and footnote
tables are written as ``[label, value]`` pairs so their discovery order
survives key sorting.

Example:
    from tejido import parse
    from tejido.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from tejido.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    DirectTarget,
    Document,
    Emphasis,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Metadata,
    Node,
    Paragraph,
    ReferenceDef,
    ReferenceTarget,
    SoftBreak,
    Table,
    TableCell,
    TableRow,
    Text,
)

# Registry of type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        CodeBlock,
        BlockQuote,
        List,
        ListItem,
        Table,
        TableRow,
        TableCell,
        HorizontalRule,
        Text,
        Emphasis,
        CodeSpan,
        Link,
        Image,
        LineBreak,
        SoftBreak,
        # Plain records carried by nodes
        DirectTarget,
        ReferenceTarget,
        Metadata,
        ReferenceDef,
    )
}

# Mapping fields serialized as ordered [label, value] pairs
_MAPPING_FIELDS = {"references", "footnotes"}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes, link targets and document tables.

    Args:
        node: Any Tejido node (or record such as ``ReferenceDef``).

    Returns:
        Dict with ``_type`` and all fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)  # type: ignore[arg-type]
    if isinstance(value, Mapping):
        return [[key, _serialize_value(item)] for key, item in value.items()]
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed node from a dict.

    Uses the ``_type`` discriminator to determine the class.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name in _MAPPING_FIELDS:
            kwargs[f.name] = {key: _deserialize_value(item) for key, item in raw}
        else:
            kwargs[f.name] = _deserialize_value(raw)

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        if value.get("_type") is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document node.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
