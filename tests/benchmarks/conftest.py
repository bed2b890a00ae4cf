"""Deterministic field-tree generators for performance benchmarks.

All generators produce fixed, reproducible trees. No random values.
Three tiers: 10-field flat, 100-field nested, 1000-field deeply nested.
Ids come from a SequentialIdFactory so every tree is identical across runs.
"""

from __future__ import annotations

import pytest

from json_schema_builder import FieldKind, FieldNode, SequentialIdFactory


def generate_flat_fields(num_fields: int, ids: SequentialIdFactory) -> tuple[FieldNode, ...]:
    """Generate alternating STRING/NUMBER fields with distinct keys."""
    kinds = (FieldKind.STRING, FieldKind.NUMBER)
    return tuple(
        FieldNode(id=ids(), key=f"field_{i}", kind=kinds[i % 2])
        for i in range(num_fields)
    )


def _section(key: str, children: tuple[FieldNode, ...], ids: SequentialIdFactory) -> FieldNode:
    return FieldNode(
        id=ids(), key=key, kind=FieldKind.NESTED, children=children, collapsed=False
    )


def _make_nested_100() -> tuple[FieldNode, ...]:
    """10 sections x 9 leaf fields + 10 section fields = 100 fields."""
    ids = SequentialIdFactory()
    return tuple(
        _section(f"section_{i}", generate_flat_fields(9, ids), ids) for i in range(10)
    )


def _make_nested_1000() -> tuple[FieldNode, ...]:
    """5 sections x 5 groups x 8 subgroups x 4 leaves = 1030 fields over 4 levels."""
    ids = SequentialIdFactory()
    sections = []
    for i in range(5):
        groups = []
        for j in range(5):
            subgroups = tuple(
                _section(f"sub_{k}", generate_flat_fields(4, ids), ids) for k in range(8)
            )
            groups.append(_section(f"group_{j}", subgroups, ids))
        sections.append(_section(f"section_{i}", tuple(groups), ids))
    return tuple(sections)


@pytest.fixture
def fields_10() -> tuple[FieldNode, ...]:
    return generate_flat_fields(10, SequentialIdFactory())


@pytest.fixture
def fields_100() -> tuple[FieldNode, ...]:
    return _make_nested_100()


@pytest.fixture
def fields_1000() -> tuple[FieldNode, ...]:
    return _make_nested_1000()
