from __future__ import annotations


class Twenty48Error(Exception):
    """Base class for every error raised by the engine."""


class BoardSizeError(Twenty48Error, ValueError):
    """Requested board dimensions are zero or exceed MAX_WIDTH/MAX_HEIGHT."""


class InvalidTileError(Twenty48Error, ValueError):
    """A tile was given a value that is not a positive integer."""


class MoveError(Twenty48Error):
    pass


class NoValidMovesLeft(MoveError):
    """No direction changes the board; the game is over."""


class HasNoEffect(MoveError):
    """The requested direction leaves the board unchanged."""

    def __init__(self, direction) -> None:
        super().__init__(f"move {direction.name.lower()} has no effect")
        self.direction = direction


class BreakError(Twenty48Error):
    pass


class TooManyBreaks(BreakError):
    def __init__(self, used: int, allowed: int) -> None:
        super().__init__(f"can't break: {used}/{allowed} breaks already used")
        self.used = used
        self.allowed = allowed


class NotEnoughScoreToBreak(BreakError):
    def __init__(self, score: int, cost: int) -> None:
        super().__init__(f"can't break: score {score} is below the cost {cost}")
        self.score = score
        self.cost = cost
