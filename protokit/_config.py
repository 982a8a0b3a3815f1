import dataclasses
from typing import Self

from ._typecheck import typecheck

__all__ = [
    "CircularConfig",
    "DEFAULT_CONFIG",
]


@typecheck
@dataclasses.dataclass(frozen=True)
class CircularConfig:
    """
    Options of the encoded series format shared by `decircular` and
    `encircular`. Both sides of a round trip must use equal configs.

    Attributes
    ---
    pointer_key: str
        Name of the single key of a pointer record.

    string_positions: bool
        Write positions as decimal strings instead of integers.
        Either form is accepted when restoring.
    """

    pointer_key: str = "o"
    string_positions: bool = False

    def __post_init__(self: Self) -> None:
        if not isinstance(self.pointer_key, str):
            raise TypeError("Pointer key must be a string")

        if not self.pointer_key:
            raise ValueError("Pointer key must not be empty")

        if not isinstance(self.string_positions, bool):
            raise TypeError("String positions flag must be a boolean")

    def position(self: Self, index: int) -> int | str:
        return str(index) if self.string_positions else index


DEFAULT_CONFIG = CircularConfig()
