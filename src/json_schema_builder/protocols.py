"""IdFactory Protocol for json-schema-builder id allocation.

Defines the structural interface used to mint field ids. Any zero-argument
callable returning a string satisfies it; no base class is required.

Example::

    import itertools
    from json_schema_builder.protocols import IdFactory

    counter = itertools.count()

    def my_ids() -> str:
        return f"node-{next(counter)}"

    assert isinstance(my_ids, IdFactory)  # True — structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdFactory(Protocol):
    """Structural protocol for field id factories.

    A conforming factory must:
    - Return a new ``str`` on every call.
    - Never return a value it has returned before during the lifetime of the
      trees it feeds (ids are never reused, even after deletion).
    """

    def __call__(self) -> str: ...
