"""Editor subpackage: sibling edits, path addressing and the editing session.

Re-exports:
- add_field, update_field, delete_field: index-scoped sibling edits
- get_at, replace_at, remove_at, FieldPath: index-path addressing
- TreeEditor: path-addressed command surface owning the root fields
"""

from json_schema_builder.editor.paths import FieldPath, get_at, remove_at, replace_at
from json_schema_builder.editor.session import TreeEditor
from json_schema_builder.editor.siblings import add_field, delete_field, update_field

__all__ = [
    "FieldPath",
    "TreeEditor",
    "add_field",
    "delete_field",
    "get_at",
    "remove_at",
    "replace_at",
    "update_field",
]
