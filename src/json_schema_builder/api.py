"""Public API functions for json-schema-builder.

This module provides the user-facing functions: serialize, to_json,
field_stats and new_editor. Each call builds a fresh DocumentSerializer so
there is no global state shared between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from json_schema_builder.config import SerializerConfig
from json_schema_builder.editor.session import TreeEditor
from json_schema_builder.result import FieldStats
from json_schema_builder.serializer import DocumentSerializer
from json_schema_builder.tree.nodes import FieldNode

if TYPE_CHECKING:
    from json_schema_builder.protocols import IdFactory

__all__ = ["field_stats", "new_editor", "serialize", "to_json"]


def serialize(
    fields: Sequence[FieldNode],
    config: SerializerConfig | None = None,
) -> dict[str, Any]:
    """Return the sample document for a sequence of root fields.

    STRING fields become ``"string"``, NUMBER fields ``42`` and NESTED fields
    a nested object built from their children. Collapsed state is ignored and
    duplicate keys resolve last-write-wins.

    Args:
        fields: Root fields, in order.
        config: Sample values. Defaults to ``SerializerConfig()`` when None.

    Returns:
        A new dict.
    """
    return DocumentSerializer(config=config).serialize(fields)


def to_json(
    fields: Sequence[FieldNode],
    indent: int | None = 2,
    config: SerializerConfig | None = None,
) -> str:
    """Return the sample document for ``fields`` as JSON text.

    Args:
        fields: Root fields, in order.
        indent: Passed to ``json.dumps``. Defaults to 2, matching the preview.
        config: Sample values. Defaults to ``SerializerConfig()`` when None.
    """
    return DocumentSerializer(config=config).to_json(fields, indent=indent)


def field_stats(fields: Sequence[FieldNode], recursive: bool = False) -> FieldStats:
    """Return per-kind counts for ``fields``.

    By default only the given sequence is counted, as in the editor footer.
    With ``recursive=True`` every descendant is counted as well.
    """
    return FieldStats.of(fields, recursive=recursive)


def new_editor(
    fields: Sequence[FieldNode] | None = None,
    id_factory: IdFactory | None = None,
    config: SerializerConfig | None = None,
) -> TreeEditor:
    """Return a TreeEditor, starting from one empty STRING field unless ``fields`` is given."""
    return TreeEditor(
        fields,
        id_factory=id_factory,
        serializer=DocumentSerializer(config=config),
    )
