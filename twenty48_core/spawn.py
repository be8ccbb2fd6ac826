from __future__ import annotations

import random
from typing import Optional, Tuple

from .board import Board, Coord
from .tile import Tile

# three in four spawns are a 2
SPAWN_VALUES = (2, 2, 2, 4)


def random_tile(board: Board, rng: random.Random) -> Optional[Tuple[Coord, Tile]]:
    """Picks an empty cell and a spawn value, or None when the board is full."""
    free = board.empty_coords()
    if not free:
        return None
    coord = rng.choice(free)
    return coord, Tile.occupied(rng.choice(SPAWN_VALUES))


def add_random_tile(board: Board, rng: random.Random) -> Board:
    picked = random_tile(board, rng)
    if picked is None:
        return board
    (x, y), tile = picked
    return board.with_tile(x, y, tile)


def new_board(width: int = 4, height: int = 4, seed: Optional[int] = None, start_tiles: int = 2) -> Board:
    """Creates an empty board and places `start_tiles` random tiles on it."""
    rng = random.Random(seed)
    board = Board.empty(width, height)
    for _ in range(start_tiles):
        board = add_random_tile(board, rng)
    return board
