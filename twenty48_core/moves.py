from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional, Sequence, Set, Tuple

from .board import Board, Coord
from .direction import ALL_DIRECTIONS, Direction
from .errors import HasNoEffect, NoValidMovesLeft
from .tile import EMPTY, Tile

log = logging.getLogger(__name__)

Mask = Optional[int]  # None matches empty tiles, an int matches tiles of that value


class MoveResult(NamedTuple):
    board: Board
    possible: bool
    score_gain: int


def _check_start(board: Board, t: Coord) -> None:
    if not board.in_bounds(*t):
        raise IndexError(f"start {t} is outside a {board.width}x{board.height} board")


def _scan_closest(cells: Sequence[Tile], width: int, height: int,
                  t: Coord, direction: Direction, mask: Mask) -> Optional[Coord]:
    x, y = t
    dx, dy = direction.dx, direction.dy
    while True:
        x += dx
        y += dy
        if not (0 <= x < width and 0 <= y < height):
            return None
        tile = cells[y * width + x]
        if tile.value == mask:
            return (x, y)
        if tile.is_occupied:
            # a non-matching tile blocks anything behind it
            return None


def _scan_farthest(cells: Sequence[Tile], width: int, height: int,
                   t: Coord, direction: Direction, mask: Mask) -> Optional[Coord]:
    x, y = t
    dx, dy = direction.dx, direction.dy
    last: Optional[Coord] = None
    while True:
        x += dx
        y += dy
        if not (0 <= x < width and 0 <= y < height):
            return last
        if cells[y * width + x].value != mask:
            return last
        last = (x, y)


def find_closest_tile(board: Board, t: Coord, direction: Direction, mask: Mask) -> Optional[Coord]:
    """
    Scans from `t` (exclusive) along `direction` and returns the first tile matching `mask`.
    Empty tiles are passed over; the first occupied tile that does not match ends the
    search. Returns None when nothing matches before the edge or a blocking tile.
    """
    _check_start(board, t)
    return _scan_closest(board.grid, board.width, board.height, t, direction, mask)


def find_farthest_tile(board: Board, t: Coord, direction: Direction, mask: Mask) -> Optional[Coord]:
    """
    Returns the last tile of the unbroken run of `mask`-matching tiles next to `t` along
    `direction`, e.g. the farthest empty cell a tile can slide into. None if the
    neighbouring cell does not match or lies outside the board.
    """
    _check_start(board, t)
    return _scan_farthest(board.grid, board.width, board.height, t, direction, mask)


def get_closest_tile(board: Board, t: Coord, direction: Direction, mask: Mask) -> Coord:
    """Like find_closest_tile, but returns `t` itself when no tile matches."""
    found = find_closest_tile(board, t, direction, mask)
    return t if found is None else found


def get_farthest_tile(board: Board, t: Coord, direction: Direction, mask: Mask) -> Coord:
    """Like find_farthest_tile, but returns `t` itself when no tile matches."""
    found = find_farthest_tile(board, t, direction, mask)
    return t if found is None else found


def sweep_order(board: Board, direction: Direction) -> List[Coord]:
    """Coordinates ordered from the edge the tiles travel toward, back to the opposite edge."""
    coords = list(board.coords())
    if direction is Direction.LEFT:
        coords.sort(key=lambda c: c[0])
    elif direction is Direction.RIGHT:
        coords.sort(key=lambda c: -c[0])
    elif direction is Direction.UP:
        coords.sort(key=lambda c: c[1])
    else:
        coords.sort(key=lambda c: -c[1])
    return coords


def is_move_possible(board: Board, direction: Direction) -> MoveResult:
    """
    Simulates sliding every tile toward `direction`.
    Each tile merges with the closest equal tile ahead of it unless that tile was
    itself produced by a merge during this move; otherwise it slides to the farthest
    empty cell ahead. The input board is never modified.
    """
    width, height = board.width, board.height
    cells: List[Tile] = list(board.grid)
    merged: Set[Coord] = set()
    score = 0
    changed = False

    for x, y in sweep_order(board, direction):
        tile = cells[y * width + x]
        if tile.is_empty:
            continue
        target = _scan_closest(cells, width, height, (x, y), direction, tile.value)
        if target is not None and target not in merged:
            combined = tile.doubled()
            tx, ty = target
            cells[ty * width + tx] = combined
            cells[y * width + x] = EMPTY
            merged.add(target)
            score += combined.value
            changed = True
            continue
        dest = _scan_farthest(cells, width, height, (x, y), direction, None)
        if dest is not None:
            fx, fy = dest
            cells[fy * width + fx] = tile
            cells[y * width + x] = EMPTY
            changed = True

    if not changed:
        log.debug("move %s has no effect", direction.name)
        return MoveResult(board, False, 0)
    return MoveResult(Board(width, height, tuple(cells)), True, score)


def has_possible_moves(board: Board) -> bool:
    """True if there is an empty cell or two orthogonally adjacent equal tiles."""
    for x, y in board.coords():
        tile = board.at(x, y)
        if tile.is_empty:
            return True
        if x + 1 < board.width and board.at(x + 1, y) == tile:
            return True
        if y + 1 < board.height and board.at(x, y + 1) == tile:
            return True
    return False


def possible_moves(board: Board) -> Dict[Direction, MoveResult]:
    return {d: is_move_possible(board, d) for d in ALL_DIRECTIONS}


def legal_directions(board: Board) -> List[Direction]:
    """Directions that change the board, in index order."""
    return [d for d, res in possible_moves(board).items() if res.possible]


def apply_move(board: Board, direction: Direction) -> Tuple[Board, int]:
    """Applies a move and returns (new_board, score_gain); raises MoveError if it does nothing."""
    if not has_possible_moves(board):
        log.debug("board has no moves left")
        raise NoValidMovesLeft('no valid moves left')
    result = is_move_possible(board, direction)
    if not result.possible:
        raise HasNoEffect(direction)
    return result.board, result.score_gain
