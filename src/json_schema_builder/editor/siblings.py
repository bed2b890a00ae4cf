"""Index-scoped edits on one sequence of sibling fields.

The same three operations apply at the root and inside any NESTED field's
children. Inputs are never mutated; each call returns a new tuple.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from json_schema_builder.tree.nodes import FieldKind, FieldNode
from json_schema_builder.tree.operations import create_field

if TYPE_CHECKING:
    from json_schema_builder.protocols import IdFactory

__all__ = ["add_field", "check_index", "delete_field", "update_field"]


def check_index(siblings: Sequence[FieldNode], index: int) -> None:
    """Raise IndexError unless ``0 <= index < len(siblings)``.

    Negative indexes are rejected rather than counted from the end.
    """
    if not 0 <= index < len(siblings):
        msg = f"field index {index} out of range for {len(siblings)} siblings"
        raise IndexError(msg)


def add_field(
    siblings: Sequence[FieldNode],
    kind: FieldKind | str = FieldKind.STRING,
    *,
    id_factory: IdFactory | None = None,
) -> tuple[FieldNode, ...]:
    """Return ``siblings`` with a freshly created field appended."""
    return (*siblings, create_field(kind, id_factory=id_factory))


def update_field(
    siblings: Sequence[FieldNode], index: int, new_node: FieldNode
) -> tuple[FieldNode, ...]:
    """Return ``siblings`` with the element at ``index`` replaced by ``new_node``."""
    check_index(siblings, index)
    return (*siblings[:index], new_node, *siblings[index + 1 :])


def delete_field(siblings: Sequence[FieldNode], index: int) -> tuple[FieldNode, ...]:
    """Return ``siblings`` without the element at ``index``.

    Later elements shift down by one; no ids change.
    """
    check_index(siblings, index)
    return (*siblings[:index], *siblings[index + 1 :])
