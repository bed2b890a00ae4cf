"""Integrations subpackage for json-schema-builder.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``field_tree_editor`` and ``assert_serializes_to`` fixtures
"""

from __future__ import annotations

__all__: list[str] = []
