"""Tree subpackage for the schema field model.

Re-exports the public API for the tree module:
- FieldNode: frozen dataclass representing one field in the tree
- FieldKind: StrEnum of the three field kinds (STRING, NUMBER, NESTED)
- SequentialIdFactory / uuid_id_factory: id allocation
- create_field, retype, set_key, toggle_collapsed: pure node updates
"""

from json_schema_builder.tree.ids import SequentialIdFactory, uuid_id_factory
from json_schema_builder.tree.nodes import FieldKind, FieldNode
from json_schema_builder.tree.operations import (
    create_field,
    retype,
    set_key,
    toggle_collapsed,
)

__all__ = [
    "FieldKind",
    "FieldNode",
    "SequentialIdFactory",
    "create_field",
    "retype",
    "set_key",
    "toggle_collapsed",
    "uuid_id_factory",
]
