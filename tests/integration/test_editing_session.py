"""End-to-end editing sessions driven through TreeEditor.

Replays long, seeded sequences of random commands and checks the tree-wide
invariants after every step:
- every field id in the tree is unique
- children/collapsed are present exactly on NESTED fields
- the document only ever contains the sample values
- collapsing any container never changes the document
"""

from __future__ import annotations

import random
from typing import Any

import pytest

from json_schema_builder import FieldKind, FieldNode, SequentialIdFactory, TreeEditor
from json_schema_builder.result import iter_fields

_KINDS = list(FieldKind)


def _all_paths(
    fields: tuple[FieldNode, ...], prefix: tuple[int, ...] = ()
) -> list[tuple[int, ...]]:
    paths: list[tuple[int, ...]] = []
    for index, node in enumerate(fields):
        path = (*prefix, index)
        paths.append(path)
        if node.children is not None:
            paths.extend(_all_paths(node.children, path))
    return paths


def _container_paths(editor: TreeEditor) -> list[tuple[int, ...]]:
    return [p for p in _all_paths(editor.fields) if editor.get_field(p).is_container]


def _random_step(editor: TreeEditor, rng: random.Random) -> None:
    paths = _all_paths(editor.fields)
    containers = _container_paths(editor)
    choice = rng.randrange(7)
    if choice == 0 or not paths:
        editor.create_field(rng.choice(_KINDS))
    elif choice == 1:
        editor.retype_field(rng.choice(paths), rng.choice(_KINDS))
    elif choice == 2:
        editor.rename_field(rng.choice(paths), rng.choice(["a", "b", " c ", "", "  "]))
    elif choice == 3 and containers:
        editor.toggle_collapse(rng.choice(containers))
    elif choice in (4, 5) and containers:
        editor.add_child_field(rng.choice(containers), rng.choice(_KINDS))
    elif choice == 6 and len(paths) > 1:
        editor.delete_field(rng.choice(paths))
    else:
        editor.create_field()


def _only_sample_values(document: dict[str, Any]) -> bool:
    for value in document.values():
        if isinstance(value, dict):
            if not _only_sample_values(value):
                return False
        elif value not in ("string", 42):
            return False
    return True


@pytest.mark.parametrize("seed", range(10))
def test_random_session_keeps_invariants(seed: int) -> None:
    rng = random.Random(seed)
    editor = TreeEditor(id_factory=SequentialIdFactory())
    seen_ids: set[str] = set()
    previous_ids: set[str] = set()

    for _ in range(300):
        _random_step(editor, rng)
        nodes = list(iter_fields(editor.fields))
        ids = [n.id for n in nodes]
        assert len(ids) == len(set(ids))
        for node in nodes:
            assert (node.children is not None) == node.is_container
            assert (node.collapsed is not None) == node.is_container
        assert _only_sample_values(editor.document)
        # ids never come back after deletion
        new_ids = set(ids) - previous_ids
        assert new_ids.isdisjoint(seen_ids)
        seen_ids.update(ids)
        previous_ids = set(ids)


@pytest.mark.parametrize("seed", range(5))
def test_collapse_never_changes_document(seed: int) -> None:
    rng = random.Random(1000 + seed)
    editor = TreeEditor(id_factory=SequentialIdFactory())
    for _ in range(150):
        _random_step(editor, rng)

    expected = editor.document
    for path in _container_paths(editor):
        editor.toggle_collapse(path)
        assert editor.document == expected


def test_building_a_realistic_schema() -> None:
    editor = TreeEditor(id_factory=SequentialIdFactory())
    editor.rename_field([0], "name")
    editor.create_field(FieldKind.NUMBER)
    editor.rename_field([1], "age")
    editor.create_field(FieldKind.NESTED)
    editor.rename_field([2], "address")
    editor.add_child_field([2])
    editor.rename_field([2, 0], "street")
    editor.add_child_field([2], FieldKind.NESTED)
    editor.rename_field([2, 1], "geo")
    editor.add_child_field([2, 1], FieldKind.NUMBER)
    editor.add_child_field([2, 1], FieldKind.NUMBER)
    editor.rename_field([2, 1, 0], "lat")
    editor.rename_field([2, 1, 1], "lng")
    editor.toggle_collapse([2])

    assert editor.document == {
        "name": "string",
        "age": 42,
        "address": {"street": "string", "geo": {"lat": 42, "lng": 42}},
    }

    # deleting a middle field shifts later siblings without touching their ids
    before_ids = [n.id for n in editor.fields]
    editor.delete_field([1])
    assert [n.id for n in editor.fields] == [before_ids[0], before_ids[2]]
    assert editor.document == {
        "name": "string",
        "address": {"street": "string", "geo": {"lat": 42, "lng": 42}},
    }

    # retyping a populated container discards the subtree
    editor.retype_field([1], FieldKind.NESTED)
    assert editor.document == {"name": "string", "address": {}}
    assert editor.stats(recursive=True).total == 2
