"""DocumentSerializer: projects a field tree into a sample JSON document.

Each field contributes one entry keyed by its ``key``:
- STRING -> ``config.string_default`` ("string")
- NUMBER -> ``config.number_default`` (42)
- NESTED -> the recursively serialized children

The collapsed flag is ignored. Sibling fields that share a key (including the
empty key) overwrite one another in sequence order, so the last one wins.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from json_schema_builder.config import SerializerConfig
from json_schema_builder.tree.nodes import FieldKind, FieldNode

__all__ = ["DocumentSerializer", "encode_document"]


def encode_document(document: dict[str, Any], indent: int | None = 2) -> str:
    """Encode a document as JSON text, non-ASCII keys kept as-is."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


class DocumentSerializer:
    """Converts a sequence of FieldNodes into a ``dict`` document.

    Stateless apart from its config, so one instance can be shared freely.

    Example::

        serializer = DocumentSerializer()
        serializer.serialize(fields)   # {"name": "string", "age": 42}
        serializer.to_json(fields)     # same document, 2-space indented JSON
    """

    def __init__(self, config: SerializerConfig | None = None) -> None:
        self._config = config if config is not None else SerializerConfig()

    @property
    def config(self) -> SerializerConfig:
        return self._config

    def serialize(self, fields: Sequence[FieldNode]) -> dict[str, Any]:
        """Return the sample document for ``fields``.

        Args:
            fields: Sibling fields, in order.

        Returns:
            A new dict; nested fields map to nested dicts.
        """
        document: dict[str, Any] = {}
        for node in fields:
            document[node.key] = self._value_for(node)
        return document

    def to_json(self, fields: Sequence[FieldNode], indent: int | None = 2) -> str:
        """Return the sample document for ``fields`` encoded as JSON text."""
        return encode_document(self.serialize(fields), indent=indent)

    def _value_for(self, node: FieldNode) -> Any:
        if node.kind is FieldKind.STRING:
            return self._config.string_default
        if node.kind is FieldKind.NUMBER:
            return self._config.number_default
        return self.serialize(node.children or ())
