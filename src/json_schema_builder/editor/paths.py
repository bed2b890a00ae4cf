"""Index-path addressing and copy-on-write propagation.

A path is the sequence of child indexes leading from the root sequence to a
field: ``(0,)`` is the first root field, ``(0, 2)`` is the third child of that
field, and so on.

Replacing a field at depth *d* rebuilds its parent with new children, then the
grandparent with a new parent, up to a new root tuple. Fields off the path are
shared with the previous tree, never copied or mutated.

Both the path walk here and serialization recurse once per level, so tree
depth is bounded by ``sys.getrecursionlimit()``: past it (a few hundred levels
with the default limit) edits and serialization raise ``RecursionError``.
``json.dumps`` has the same bound.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace

from json_schema_builder.editor.siblings import check_index, delete_field, update_field
from json_schema_builder.tree.nodes import FieldNode

__all__ = ["FieldPath", "get_at", "remove_at", "replace_at"]

FieldPath = Sequence[int]


def _require_path(path: FieldPath) -> None:
    if len(path) == 0:
        msg = "field path must contain at least one index"
        raise ValueError(msg)


def _children_of(node: FieldNode) -> tuple[FieldNode, ...]:
    if node.children is None:
        msg = f"cannot descend into {node.kind} field {node.id!r}"
        raise TypeError(msg)
    return node.children


def get_at(root: Sequence[FieldNode], path: FieldPath) -> FieldNode:
    """Return the field addressed by ``path``.

    Raises:
        ValueError: If ``path`` is empty.
        IndexError: If an index is out of range at its level.
        TypeError:  If the path descends through a primitive field.
    """
    _require_path(path)
    *parent_path, index = path
    siblings: Sequence[FieldNode] = root
    for parent_index in parent_path:
        check_index(siblings, parent_index)
        siblings = _children_of(siblings[parent_index])
    check_index(siblings, index)
    return siblings[index]


def replace_at(
    root: Sequence[FieldNode],
    path: FieldPath,
    updater: Callable[[FieldNode], FieldNode],
) -> tuple[FieldNode, ...]:
    """Apply ``updater`` to the field at ``path`` and return the new root tuple.

    The updated node replaces the old one in its parent's children, and each
    ancestor is replaced in turn by a copy carrying the new children.
    """
    _require_path(path)
    head, rest = path[0], path[1:]
    check_index(root, head)
    node = root[head]
    if rest:
        children = replace_at(_children_of(node), rest, updater)
        new_node = replace(node, children=children)
    else:
        new_node = updater(node)
    return update_field(root, head, new_node)


def remove_at(root: Sequence[FieldNode], path: FieldPath) -> tuple[FieldNode, ...]:
    """Delete the field at ``path`` and return the new root tuple."""
    _require_path(path)
    *parent_path, index = path
    if not parent_path:
        return delete_field(root, index)

    def _drop_child(parent: FieldNode) -> FieldNode:
        return replace(parent, children=delete_field(_children_of(parent), index))

    return replace_at(root, parent_path, _drop_child)
