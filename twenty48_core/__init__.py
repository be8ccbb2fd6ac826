"""
2048 engine core package.

Pure-logic building blocks shared by the Flask app and the terminal CLI.
Modules:
- tile.py: Tile value type
- direction.py: Direction
- board.py: Board, create_tiles, board_to_string, print_board
- moves.py: directional tile search and move simulation
- rules.py: win/game-over checks and breaks
- spawn.py: seeded random tile placement
- codec.py: JSON and text decoding
"""
from .board import MAX_HEIGHT, MAX_WIDTH, Board, Coord, board_to_string, create_tiles, print_board
from .direction import ALL_DIRECTIONS, Direction
from .errors import (
    BoardSizeError,
    BreakError,
    HasNoEffect,
    InvalidTileError,
    MoveError,
    NoValidMovesLeft,
    NotEnoughScoreToBreak,
    TooManyBreaks,
    Twenty48Error,
)
from .moves import (
    MoveResult,
    apply_move,
    find_closest_tile,
    find_farthest_tile,
    get_closest_tile,
    get_farthest_tile,
    has_possible_moves,
    is_move_possible,
    legal_directions,
    possible_moves,
)
from .tile import Tile
