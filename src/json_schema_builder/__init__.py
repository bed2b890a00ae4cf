"""JSON schema builder - editable field trees and sample JSON documents."""

from __future__ import annotations

from json_schema_builder.api import field_stats, new_editor, serialize, to_json
from json_schema_builder.cache import DocumentCache
from json_schema_builder.config import SerializerConfig
from json_schema_builder.editor.session import TreeEditor
from json_schema_builder.result import FieldStats
from json_schema_builder.serializer import DocumentSerializer
from json_schema_builder.tree import (
    FieldKind,
    FieldNode,
    SequentialIdFactory,
    create_field,
    retype,
    set_key,
    toggle_collapsed,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentCache",
    "DocumentSerializer",
    "FieldKind",
    "FieldNode",
    "FieldStats",
    "SequentialIdFactory",
    "SerializerConfig",
    "TreeEditor",
    "create_field",
    "field_stats",
    "new_editor",
    "retype",
    "serialize",
    "set_key",
    "to_json",
    "toggle_collapsed",
]
