from __future__ import annotations

from enum import Enum
from typing import Tuple, Union


class Direction(Enum):
    """Sliding direction. Indices follow the usual 2048 front-end order."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def index(self) -> int:
        return self.value

    @property
    def dx(self) -> int:
        return _OFFSETS[self][0]

    @property
    def dy(self) -> int:
        # y grows downward, so UP steps to smaller rows
        return _OFFSETS[self][1]

    @property
    def is_horizontal(self) -> bool:
        return self.dy == 0

    def opposite(self) -> 'Direction':
        return Direction((self.value + 2) % 4)

    @classmethod
    def from_index(cls, index: int) -> 'Direction':
        try:
            return cls(int(index))
        except ValueError:
            raise ValueError(f"invalid direction index: {index!r}") from None

    @classmethod
    def parse(cls, raw: Union['Direction', int, str]) -> 'Direction':
        """Accepts a Direction, an index, a name ('left') or a wasd/arrow alias."""
        if isinstance(raw, Direction):
            return raw
        if isinstance(raw, bool):
            raise ValueError(f"invalid direction: {raw!r}")
        if isinstance(raw, int):
            return cls.from_index(raw)
        text = str(raw).strip().lower()
        if text.isdigit():
            return cls.from_index(int(text))
        try:
            return _ALIASES[text]
        except KeyError:
            raise ValueError(f"invalid direction: {raw!r}") from None


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_ALIASES = {
    'up': Direction.UP, 'u': Direction.UP, 'w': Direction.UP,
    'right': Direction.RIGHT, 'r': Direction.RIGHT, 'd': Direction.RIGHT,
    'down': Direction.DOWN, 's': Direction.DOWN,
    'left': Direction.LEFT, 'l': Direction.LEFT, 'a': Direction.LEFT,
}

ALL_DIRECTIONS: Tuple[Direction, ...] = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)
