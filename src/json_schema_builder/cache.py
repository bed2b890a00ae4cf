"""DocumentCache: LRU-backed memo for serialized documents.

Wraps a DocumentSerializer and remembers the document produced for each root
tuple. FieldNodes are frozen and hashable, so an unchanged tree hits the cache
and any edit (which always yields a new root tuple with different contents)
misses it. LRU eviction occurs silently when ``max_size`` is exceeded.

Serialization is cheap, so this is only worth using when the same large tree
is projected repeatedly (e.g. a preview re-rendered on every keystroke).

Example::

    from json_schema_builder.cache import DocumentCache

    cache = DocumentCache(max_size=64)
    doc = cache.serialize(editor.fields)        # computed
    doc_again = cache.serialize(editor.fields)  # served from memory
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Any

from cachetools import LRUCache

from json_schema_builder.serializer import DocumentSerializer, encode_document
from json_schema_builder.tree.nodes import FieldNode

__all__ = ["DocumentCache"]

logger = logging.getLogger(__name__)


class DocumentCache:
    """LRU-backed caching proxy around a DocumentSerializer.

    Each instance maintains its own ``LRUCache``; two instances never share
    entries. Returned documents are deep copies, so callers may mutate them
    without corrupting the cache.

    Args:
        serializer: Serializer to delegate to on a miss. Defaults to
            ``DocumentSerializer()``.
        max_size: Maximum number of documents to hold. Defaults to 128.
            Must be at least 1.

    Raises:
        ValueError: If ``max_size`` is less than 1.
    """

    def __init__(
        self, serializer: DocumentSerializer | None = None, max_size: int = 128
    ) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._serializer = serializer if serializer is not None else DocumentSerializer()
        self._cache: LRUCache[tuple[FieldNode, ...], dict[str, Any]] = LRUCache(
            maxsize=max_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of documents this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of documents stored in the cache."""
        return int(self._cache.currsize)

    @property
    def serializer(self) -> DocumentSerializer:
        return self._serializer

    # ------------------------------------------------------------------
    # Serializer surface
    # ------------------------------------------------------------------

    def serialize(self, fields: Sequence[FieldNode]) -> dict[str, Any]:
        """Return the document for ``fields``, computing it only on a miss."""
        key = tuple(fields)
        document = self._cache.get(key)
        if document is None:
            logger.debug(f"Document cache miss for {len(key)} root fields")
            document = self._serializer.serialize(key)
            self._cache[key] = document
        return copy.deepcopy(document)

    def to_json(self, fields: Sequence[FieldNode], indent: int | None = 2) -> str:
        """Return the (possibly cached) document for ``fields`` as JSON text."""
        return encode_document(self.serialize(fields), indent=indent)

    def clear(self) -> None:
        """Drop every cached document."""
        self._cache.clear()
