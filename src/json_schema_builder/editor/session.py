"""TreeEditor: the command surface of one interactive editing session.

The editor owns the root tuple of fields. Every command addresses a field by
its index path, builds a complete new root tuple through the pure operations
in ``json_schema_builder.tree`` and ``json_schema_builder.editor.paths``, and
only then swaps it in. A command that raises leaves the previous tree in
place.

Architecture:
- Node-level changes (retype, rename, collapse) are ``replace_at`` calls with
  the matching operation as the updater.
- Structural changes (add child, delete) rebuild the parent's children via
  ``editor.siblings`` and propagate the new parent upward.
- The document is never stored; ``document`` serializes the current tree on
  each access.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from json_schema_builder.editor.paths import FieldPath, get_at, remove_at, replace_at
from json_schema_builder.editor.siblings import add_field
from json_schema_builder.result import FieldStats, iter_fields
from json_schema_builder.serializer import DocumentSerializer
from json_schema_builder.tree.ids import uuid_id_factory
from json_schema_builder.tree.nodes import FieldKind, FieldNode
from json_schema_builder.tree.operations import (
    create_field,
    retype,
    set_key,
    toggle_collapsed,
)

if TYPE_CHECKING:
    from json_schema_builder.cache import DocumentCache
    from json_schema_builder.protocols import IdFactory

__all__ = ["TreeEditor"]

logger = logging.getLogger(__name__)


class TreeEditor:
    """Stateful owner of a field tree, edited through path-addressed commands.

    Every command returns the new root tuple, which is also available as
    ``fields`` afterwards. Fields created by the editor draw ids from one
    ``id_factory`` so ids stay unique across the whole session; an id the
    session has already held (including a deleted one) is refused with
    ``ValueError``.

    Example::

        editor = TreeEditor()
        editor.rename_field([0], "user")
        editor.retype_field([0], FieldKind.NESTED)
        editor.add_child_field([0], FieldKind.NUMBER)
        editor.rename_field([0, 0], "age")
        editor.document   # {"user": {"age": 42}}
    """

    def __init__(
        self,
        fields: Sequence[FieldNode] | None = None,
        *,
        id_factory: IdFactory | None = None,
        serializer: DocumentSerializer | DocumentCache | None = None,
    ) -> None:
        """Initialise the editor.

        Args:
            fields:     Initial root fields. Defaults to a single empty STRING
                        field. Ids must be unique across the whole tree.
            id_factory: Id source for fields created by this editor. Defaults
                        to ``uuid_id_factory``.
            serializer: Used for ``document`` and ``to_json``. A DocumentCache
                        may be passed to memoize repeated reads. Defaults to
                        ``DocumentSerializer()``.

        Raises:
            ValueError: If two of the initial fields share an id.
        """
        self._id_factory = id_factory if id_factory is not None else uuid_id_factory
        self._serializer = serializer if serializer is not None else DocumentSerializer()
        # every id this session has held, deleted ones included
        self._known_ids: set[str] = set()
        if fields is None:
            self._fields: tuple[FieldNode, ...] = (self._new_field(FieldKind.STRING),)
        else:
            self._fields = tuple(fields)
            for node in iter_fields(self._fields):
                if node.id in self._known_ids:
                    msg = f"duplicate field id {node.id!r} in initial fields"
                    raise ValueError(msg)
                self._known_ids.add(node.id)

    # ------------------------------------------------------------------
    # Read model
    # ------------------------------------------------------------------

    @property
    def fields(self) -> tuple[FieldNode, ...]:
        """The current root fields."""
        return self._fields

    @property
    def document(self) -> dict[str, Any]:
        """The current tree serialized to a sample document."""
        return self._serializer.serialize(self._fields)

    def to_json(self, indent: int | None = 2) -> str:
        """The current document encoded as JSON text."""
        return self._serializer.to_json(self._fields, indent=indent)

    def get_field(self, path: FieldPath) -> FieldNode:
        return get_at(self._fields, path)

    def stats(self, recursive: bool = False) -> FieldStats:
        """Per-kind counts of the root fields (or of every field if ``recursive``)."""
        return FieldStats.of(self._fields, recursive=recursive)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_field(
        self, kind: FieldKind | str = FieldKind.STRING
    ) -> tuple[FieldNode, ...]:
        """Append a new field of ``kind`` to the root."""
        return self._commit(
            "create_field",
            (),
            add_field(self._fields, kind, id_factory=self._next_id),
        )

    def retype_field(
        self, path: FieldPath, kind: FieldKind | str
    ) -> tuple[FieldNode, ...]:
        """Change the kind of the field at ``path``; NESTED always resets children."""
        return self._commit(
            "retype_field",
            path,
            replace_at(self._fields, path, lambda node: retype(node, kind)),
        )

    def rename_field(self, path: FieldPath, new_key: str) -> tuple[FieldNode, ...]:
        """Set the key of the field at ``path``.

        Blank keys are ignored: the tree is left exactly as it was.
        """
        current = get_at(self._fields, path)
        renamed = set_key(current, new_key)
        if renamed is current:
            logger.debug(f"Ignored blank key for field at path {list(path)}")
            return self._fields
        return self._commit(
            "rename_field", path, replace_at(self._fields, path, lambda _: renamed)
        )

    def toggle_collapse(self, path: FieldPath) -> tuple[FieldNode, ...]:
        """Flip the collapsed flag of the NESTED field at ``path``."""
        return self._commit(
            "toggle_collapse",
            path,
            replace_at(self._fields, path, toggle_collapsed),
        )

    def add_child_field(
        self, path: FieldPath, kind: FieldKind | str = FieldKind.STRING
    ) -> tuple[FieldNode, ...]:
        """Append a new field of ``kind`` to the children of the NESTED field at ``path``.

        Raises:
            TypeError: If the field at ``path`` is not NESTED.
        """

        def _append_child(parent: FieldNode) -> FieldNode:
            if parent.children is None:
                msg = f"cannot add a child to {parent.kind} field {parent.id!r}"
                raise TypeError(msg)
            children = add_field(parent.children, kind, id_factory=self._next_id)
            return replace(parent, children=children)

        return self._commit(
            "add_child_field", path, replace_at(self._fields, path, _append_child)
        )

    def delete_field(self, path: FieldPath) -> tuple[FieldNode, ...]:
        """Remove the field at ``path`` (and its subtree) from its parent."""
        return self._commit("delete_field", path, remove_at(self._fields, path))

    def reset(self) -> tuple[FieldNode, ...]:
        """Replace the whole tree with a single empty STRING field."""
        return self._commit("reset", (), (self._new_field(FieldKind.STRING),))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _new_field(self, kind: FieldKind) -> FieldNode:
        return create_field(kind, id_factory=self._next_id)

    def _next_id(self) -> str:
        field_id = self._id_factory()
        if field_id in self._known_ids:
            msg = f"id factory returned {field_id!r}, already used in this session"
            raise ValueError(msg)
        self._known_ids.add(field_id)
        return field_id

    def _commit(
        self, command: str, path: FieldPath, fields: tuple[FieldNode, ...]
    ) -> tuple[FieldNode, ...]:
        self._fields = fields
        logger.debug(f"{command} at path {list(path)}: {len(fields)} root fields")
        return fields
