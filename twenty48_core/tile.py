from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidTileError


@dataclass(frozen=True)
class Tile:
    """A single grid cell: empty (value is None) or holding a positive integer."""
    value: Optional[int] = None

    def __post_init__(self) -> None:
        v = self.value
        if v is None:
            return
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidTileError(f"tile value must be an int, got {v!r}")
        if v <= 0:
            raise InvalidTileError(f"tile value must be positive, got {v}")

    @classmethod
    def new(cls, value: Optional[int] = None) -> 'Tile':
        return cls(value)

    @classmethod
    def empty(cls) -> 'Tile':
        return EMPTY

    @classmethod
    def occupied(cls, value: int) -> 'Tile':
        if value is None:
            raise InvalidTileError('an occupied tile needs a value')
        return cls(value)

    @property
    def is_empty(self) -> bool:
        return self.value is None

    @property
    def is_occupied(self) -> bool:
        return self.value is not None

    def doubled(self) -> 'Tile':
        """Returns the tile produced by merging this tile with an equal one."""
        if self.value is None:
            raise InvalidTileError('cannot merge an empty tile')
        return Tile(self.value * 2)


EMPTY = Tile()
