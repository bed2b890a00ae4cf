"""Pure update operations on FieldNode values.

Every function here returns a node value and never mutates its input; the
caller is responsible for placing the returned node in its owning sequence
(see ``json_schema_builder.editor``).

Kinds may be given as ``FieldKind`` members or as their string values
("string", "number", "nested"). Anything else raises ``ValueError``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from json_schema_builder.tree.ids import uuid_id_factory
from json_schema_builder.tree.nodes import FieldKind, FieldNode

if TYPE_CHECKING:
    from json_schema_builder.protocols import IdFactory

__all__ = ["create_field", "retype", "set_key", "toggle_collapsed"]


def create_field(
    kind: FieldKind | str = FieldKind.STRING,
    *,
    id_factory: IdFactory | None = None,
) -> FieldNode:
    """Allocate a new field with a fresh id and an empty key.

    Args:
        kind:       Kind of the new field. Defaults to STRING.
        id_factory: Id source. Defaults to ``uuid_id_factory``.

    Returns:
        A FieldNode with ``key == ""``. NESTED fields start with no children
        and ``collapsed == False``.
    """
    kind = FieldKind(kind)
    make_id = id_factory if id_factory is not None else uuid_id_factory
    if kind.is_container:
        return FieldNode(id=make_id(), kind=kind, children=(), collapsed=False)
    return FieldNode(id=make_id(), kind=kind)


def retype(node: FieldNode, new_kind: FieldKind | str) -> FieldNode:
    """Return ``node`` switched to ``new_kind``.

    Switching to NESTED always starts from an empty child list, even when the
    node was already NESTED: prior children are discarded. Switching to a
    primitive kind drops children and the collapsed flag. The id and key are
    kept.
    """
    new_kind = FieldKind(new_kind)
    if new_kind.is_container:
        return replace(node, kind=new_kind, children=(), collapsed=False)
    return replace(node, kind=new_kind, children=None, collapsed=None)


def set_key(node: FieldNode, new_key: str) -> FieldNode:
    """Return ``node`` renamed to ``new_key`` with surrounding whitespace stripped.

    A key that is empty after stripping is rejected: ``node`` itself is
    returned unchanged and no error is raised.
    """
    key = new_key.strip()
    if not key:
        return node
    return replace(node, key=key)


def toggle_collapsed(node: FieldNode) -> FieldNode:
    """Return ``node`` with its collapsed flag flipped.

    Raises:
        TypeError: If ``node`` is not a NESTED field.
    """
    if not node.is_container:
        msg = f"cannot collapse {node.kind} field {node.id!r}"
        raise TypeError(msg)
    return replace(node, collapsed=not node.collapsed)
