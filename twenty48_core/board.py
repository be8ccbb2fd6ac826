from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple

from .errors import BoardSizeError
from .tile import EMPTY, Tile

Coord = Tuple[int, int]  # (x, y) == (column, row)

# Search and move simulation cost grows with width * height; keep both bounded.
MAX_WIDTH = 5
MAX_HEIGHT = 5

EMPTY_MARK = '.'


def check_size(width: int, height: int) -> None:
    for v in (width, height):
        if not isinstance(v, int) or isinstance(v, bool):
            raise BoardSizeError(
                f"board dimensions must be ints, got {(width, height)!r}"
            )
    if not 1 <= width <= MAX_WIDTH or not 1 <= height <= MAX_HEIGHT:
        raise BoardSizeError(
            f"board size {width}x{height} is outside the supported range "
            f"1x1..{MAX_WIDTH}x{MAX_HEIGHT}"
        )


def create_tiles(width: int, height: int) -> Tuple[Tile, ...]:
    """Creates a row-major grid of width * height empty tiles."""
    check_size(width, height)
    return (EMPTY,) * (width * height)


@dataclass(frozen=True)
class Board:
    """A fixed-size grid of tiles. Every update returns a new Board."""
    width: int
    height: int
    grid: Tuple[Tile, ...]  # row-major, length == width * height

    def __post_init__(self) -> None:
        check_size(self.width, self.height)
        if not isinstance(self.grid, tuple):
            object.__setattr__(self, 'grid', tuple(self.grid))
        if len(self.grid) != self.width * self.height:
            raise BoardSizeError(
                f"grid has {len(self.grid)} tiles, expected {self.width * self.height}"
            )
        for tile in self.grid:
            if not isinstance(tile, Tile):
                raise TypeError(f"grid cells must be Tile instances, got {tile!r}")

    @classmethod
    def empty(cls, width: int = 4, height: int = 4) -> 'Board':
        return cls(width=width, height=height, grid=create_tiles(width, height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[int]]]) -> 'Board':
        """Builds a board from nested rows of ints; 0 and None mean empty."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        check_size(width, height)
        grid: List[Tile] = []
        for row in rows:
            if len(row) != width:
                raise BoardSizeError('all rows must have the same length')
            grid.extend(Tile.new(v) if v else EMPTY for v in row)
        return cls(width=width, height=height, grid=tuple(grid))

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} board")
        return self.grid[self.index(x, y)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def rows(self) -> Iterator[Tuple[Tile, ...]]:
        for y in range(self.height):
            start = y * self.width
            yield self.grid[start:start + self.width]

    def values(self) -> List[List[int]]:
        """Plain nested rows of ints with 0 for empty cells."""
        return [[t.value or 0 for t in row] for row in self.rows()]

    def with_tile(self, x: int, y: int, tile: Tile) -> 'Board':
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} board")
        grid = list(self.grid)
        grid[self.index(x, y)] = tile
        return Board(self.width, self.height, tuple(grid))

    def set_value(self, x: int, y: int, value: Optional[int]) -> 'Board':
        return self.with_tile(x, y, Tile.new(value) if value else EMPTY)

    def occupied_coords(self) -> List[Coord]:
        return [c for c in self.coords() if self.at(*c).is_occupied]

    def empty_coords(self) -> List[Coord]:
        return [c for c in self.coords() if self.at(*c).is_empty]

    def total_value(self) -> int:
        return sum(t.value or 0 for t in self.grid)

    def max_value(self) -> int:
        return max((t.value or 0 for t in self.grid), default=0)

    def __str__(self) -> str:
        return board_to_string(self)


def board_to_string(board: Board) -> str:
    """Renders the board one row per line, columns right-aligned, '.' for empty cells."""
    cells = [EMPTY_MARK if t.is_empty else str(t.value) for t in board.grid]
    width = max(len(c) for c in cells)
    lines: List[str] = []
    for y in range(board.height):
        row = cells[y * board.width:(y + 1) * board.width]
        lines.append(' '.join(c.rjust(width) for c in row))
    return '\n'.join(lines) + '\n'


def print_board(board: Board, file: Optional[TextIO] = None) -> None:
    out = file if file is not None else sys.stdout
    out.write(board_to_string(board))
