"""FieldNode dataclass and FieldKind StrEnum for the schema field tree.

Provides the value types the editor builds and the serializer consumes.
A FieldNode is immutable; every edit produces a replacement node which the
editor swaps into the owning sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class FieldKind(StrEnum):
    """Enumeration of the three field kinds a node can hold.

    StrEnum values are the lowercased member names:
    - STRING -> "string" : primitive, serialized as a sample string
    - NUMBER -> "number" : primitive, serialized as a sample number
    - NESTED -> "nested" : container holding an ordered sequence of children
    """

    STRING = auto()
    NUMBER = auto()
    NESTED = auto()

    @property
    def is_container(self) -> bool:
        """True only for NESTED."""
        return self is FieldKind.NESTED


@dataclass(frozen=True, slots=True)
class FieldNode:
    """A single field in the schema tree.

    Attributes:
        id:        Opaque identifier, assigned once at creation and never reused.
        key:       Field name. May be empty and may repeat among siblings.
        kind:      Which kind of field this is (see FieldKind).
        children:  Ordered child nodes. A tuple for NESTED nodes, None otherwise.
        collapsed: Presentation hint for NESTED nodes, None otherwise. Has no
                   effect on the serialized document.
    """

    id: str
    key: str = ""
    kind: FieldKind = FieldKind.STRING
    children: tuple[FieldNode, ...] | None = None
    collapsed: bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FieldKind):
            msg = f"kind must be a FieldKind, got {self.kind!r}"
            raise ValueError(msg)
        if self.kind.is_container:
            if self.children is None or self.collapsed is None:
                msg = f"nested field {self.id!r} requires children and collapsed"
                raise ValueError(msg)
            if not isinstance(self.children, tuple):
                msg = f"children must be a tuple, got {type(self.children)!r}"
                raise ValueError(msg)
        elif self.children is not None or self.collapsed is not None:
            msg = f"{self.kind} field {self.id!r} cannot carry children or collapsed"
            raise ValueError(msg)

    @property
    def is_container(self) -> bool:
        return self.kind.is_container
