"""Field id factories.

Two factories are provided:
- ``uuid_id_factory``: random UUID4 hex strings, globally unique. Default.
- ``SequentialIdFactory``: monotonic counter with a prefix. Deterministic,
  useful for tests and for sessions that want readable ids.
"""

from __future__ import annotations

import itertools
import uuid

__all__ = ["SequentialIdFactory", "uuid_id_factory"]


def uuid_id_factory() -> str:
    """Return a fresh UUID4 as a 32-character hex string."""
    return uuid.uuid4().hex


class SequentialIdFactory:
    """Monotonic id allocator.

    Each call returns ``f"{prefix}{n}"`` with ``n`` strictly increasing from
    ``start``. Two factories with the same prefix will collide, so a tree should
    draw all of its ids from one instance.

    Example::

        ids = SequentialIdFactory()
        ids()  # "field-1"
        ids()  # "field-2"
    """

    def __init__(self, prefix: str = "field-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    @property
    def prefix(self) -> str:
        return self._prefix

    def __call__(self) -> str:
        return f"{self._prefix}{next(self._counter)}"
