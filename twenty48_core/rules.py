from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from .board import Board
from .errors import NotEnoughScoreToBreak, TooManyBreaks
from .moves import has_possible_moves
from .tile import EMPTY

WINNING_VALUE = 2048


class Ruleset(ABC):
    """Win/loss predicates and the cost of a "break" (clearing small tiles for score)."""

    @abstractmethod
    def break_cost(self, board: Board) -> int:
        ...

    def break_max(self, board: Board) -> int:
        return 3

    def break_tile_threshold(self, board: Board) -> int:
        return 16

    def game_over(self, board: Board) -> bool:
        return not has_possible_moves(board)

    def won(self, board: Board) -> bool:
        return board.max_value() >= WINNING_VALUE


class ClassicV1(Ruleset):
    def break_cost(self, board: Board) -> int:
        return 1000


class ClassicV2(Ruleset):
    # keyed by sorted (short side, long side)
    COSTS = {
        (2, 2): 100,
        (2, 3): 250,
        (3, 3): 500,
        (3, 4): 750,
        (4, 4): 1000,
        (4, 5): 1250,
        (5, 5): 1500,
    }
    DEFAULT_COST = 2500

    def break_cost(self, board: Board) -> int:
        key = tuple(sorted((board.width, board.height)))
        return self.COSTS.get(key, self.DEFAULT_COST)


def can_break(rules: Ruleset, board: Board, score: int, breaks: int) -> bool:
    return breaks < rules.break_max(board) and rules.break_cost(board) <= score


def apply_break(rules: Ruleset, board: Board, score: int, breaks: int) -> Tuple[Board, int]:
    """Clears every tile below the ruleset's threshold and returns (new_board, new_score)."""
    allowed = rules.break_max(board)
    if breaks >= allowed:
        raise TooManyBreaks(breaks, allowed)
    cost = rules.break_cost(board)
    if score < cost:
        raise NotEnoughScoreToBreak(score, cost)
    threshold = rules.break_tile_threshold(board)
    grid = tuple(
        EMPTY if t.is_occupied and t.value < threshold else t
        for t in board.grid
    )
    return Board(board.width, board.height, grid), score - cost
