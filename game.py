from __future__ import annotations

# Facade module that re-exports the 2048 engine.
# Used by the Flask app and tests; single-responsibility modules live under twenty48_core/*.

from twenty48_core.board import (  # noqa: F401
    MAX_HEIGHT,
    MAX_WIDTH,
    Board,
    Coord,
    board_to_string,
    check_size,
    create_tiles,
    print_board,
)
from twenty48_core.codec import board_from_json, board_from_string, board_to_json  # noqa: F401
from twenty48_core.direction import ALL_DIRECTIONS, Direction  # noqa: F401
from twenty48_core.errors import (  # noqa: F401
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
from twenty48_core.moves import (  # noqa: F401
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
    sweep_order,
)
from twenty48_core.rules import ClassicV1, ClassicV2, Ruleset, apply_break, can_break  # noqa: F401
from twenty48_core.spawn import SPAWN_VALUES, add_random_tile, new_board, random_tile  # noqa: F401
from twenty48_core.tile import EMPTY, Tile  # noqa: F401


def main() -> None:
    # CLI driver delegated to twenty48_core.cli
    from twenty48_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
