"""FieldStats dataclass summarizing a field tree.

This module provides the count summary shown alongside the editor
(total fields and a breakdown per kind).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from json_schema_builder.tree.nodes import FieldKind, FieldNode

__all__ = ["FieldStats", "iter_fields"]


@dataclass(frozen=True, slots=True)
class FieldStats:
    """Per-kind field counts.

    Attributes:
        total:  Number of fields counted.
        string: Number of STRING fields.
        number: Number of NUMBER fields.
        nested: Number of NESTED fields.
    """

    total: int
    string: int
    number: int
    nested: int

    @classmethod
    def of(cls, fields: Sequence[FieldNode], recursive: bool = False) -> FieldStats:
        """Count ``fields``; with ``recursive`` every descendant is counted too."""
        nodes = list(iter_fields(fields)) if recursive else list(fields)
        return cls(
            total=len(nodes),
            string=sum(1 for n in nodes if n.kind is FieldKind.STRING),
            number=sum(1 for n in nodes if n.kind is FieldKind.NUMBER),
            nested=sum(1 for n in nodes if n.kind is FieldKind.NESTED),
        )


def iter_fields(fields: Sequence[FieldNode]) -> Iterator[FieldNode]:
    """Yield every field in depth-first pre-order, collapsed subtrees included."""
    for node in fields:
        yield node
        if node.children:
            yield from iter_fields(node.children)
