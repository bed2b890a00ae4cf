"""SerializerConfig for document serialization.

SerializerConfig is a frozen (immutable) dataclass holding the sample values
written for primitive fields.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SerializerConfig"]


@dataclass(frozen=True, slots=True)
class SerializerConfig:
    """Immutable configuration for DocumentSerializer.

    Attributes:
        string_default: Sample value emitted for STRING fields.
        number_default: Sample value emitted for NUMBER fields. Must be an int
            or float; bool is rejected even though it subclasses int.
    """

    string_default: str = "string"
    number_default: int | float = 42

    def __post_init__(self) -> None:
        if not isinstance(self.string_default, str):
            msg = f"string_default must be a str, got {type(self.string_default)!r}"
            raise TypeError(msg)
        # bool subclasses int
        if isinstance(self.number_default, bool) or not isinstance(
            self.number_default, (int, float)
        ):
            msg = (
                "number_default must be an int or float, "
                f"got {type(self.number_default)!r}"
            )
            raise TypeError(msg)
