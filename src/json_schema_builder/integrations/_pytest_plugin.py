"""pytest plugin for json-schema-builder.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from json_schema_builder import (
    FieldNode,
    SequentialIdFactory,
    SerializerConfig,
    TreeEditor,
    serialize,
)


@pytest.fixture
def field_tree_editor() -> TreeEditor:
    """Fixture that returns a fresh TreeEditor with deterministic ids.

    Function-scoped: every test gets its own session starting from a single
    empty STRING field with id ``"field-1"``.

    Usage in tests::

        def test_nested(field_tree_editor):
            field_tree_editor.retype_field([0], "nested")
            field_tree_editor.add_child_field([0], "number")
            assert field_tree_editor.document == {"": {"": 42}}
    """
    return TreeEditor(id_factory=SequentialIdFactory())


@pytest.fixture(scope="session")
def assert_serializes_to() -> Any:
    """Fixture that returns a callable document asserter.

    Session-scoped because the returned callable is stateless (delegates to
    serialize() which creates a fresh DocumentSerializer per call).

    Usage in tests::

        def test_doc(assert_serializes_to, field_tree_editor):
            field_tree_editor.rename_field([0], "name")
            assert_serializes_to(field_tree_editor.fields, {"name": "string"})

    Returns:
        A callable ``_assert(fields, expected, config=None) -> None`` that
        raises ``AssertionError`` when the serialized document differs.
    """

    def _assert(
        fields: Sequence[FieldNode],
        expected: dict[str, Any],
        config: SerializerConfig | None = None,
    ) -> None:
        """Assert that ``fields`` serialize to exactly ``expected``.

        Raises:
            AssertionError: With the actual and expected documents and the
                top-level keys that are missing, unexpected or different.
        """
        actual = serialize(fields, config=config)
        if actual != expected:
            missing = sorted(k for k in expected if k not in actual)
            unexpected = sorted(k for k in actual if k not in expected)
            differing = sorted(
                k for k in actual if k in expected and actual[k] != expected[k]
            )
            raise AssertionError(
                f"Serialized document does not match:\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}\n"
                f"  missing keys:    {missing}\n"
                f"  unexpected keys: {unexpected}\n"
                f"  differing keys:  {differing}"
            )

    return _assert
