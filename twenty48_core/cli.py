from __future__ import annotations

import argparse
import logging
import os
import random
from typing import Optional, Sequence

from .board import MAX_HEIGHT, MAX_WIDTH, print_board
from .direction import Direction
from .errors import BoardSizeError, BreakError
from .moves import has_possible_moves, is_move_possible, legal_directions
from .rules import ClassicV2, apply_break
from .spawn import add_random_tile, new_board


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Play 2048 in the terminal')
    parser.add_argument('--width', type=int, default=_env_int('TWENTY48_WIDTH', 4),
                        choices=range(1, MAX_WIDTH + 1), metavar='N',
                        help=f'Board width (1..{MAX_WIDTH})')
    parser.add_argument('--height', type=int, default=_env_int('TWENTY48_HEIGHT', 4),
                        choices=range(1, MAX_HEIGHT + 1), metavar='N',
                        help=f'Board height (1..{MAX_HEIGHT})')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for tile spawns')
    args = parser.parse_args(argv)

    debug = os.getenv('TWENTY48_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    rng = random.Random(args.seed)
    try:
        board = new_board(args.width, args.height, seed=rng.randrange(2 ** 32))
    except BoardSizeError as e:
        # env defaults bypass argparse choices
        parser.error(str(e))
    rules = ClassicV2()
    score = 0
    breaks = 0
    reached = False

    print('Moves: w/a/s/d or up/left/down/right, b to break small tiles, q to quit.')
    print_board(board)
    while True:
        if not reached and rules.won(board):
            print(f'You reached {board.max_value()}!')
            reached = True
        if not has_possible_moves(board):
            print(f'Game over. Final score: {score}')
            break
        try:
            text = input(f'[score {score}] move: ').strip().lower()
        except EOFError:
            break
        if text in ('q', 'quit', 'exit'):
            break
        if text in ('b', 'break'):
            try:
                board, score = apply_break(rules, board, score, breaks)
            except BreakError as e:
                print(e)
                continue
            breaks += 1
            print_board(board)
            continue
        try:
            direction = Direction.parse(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        result = is_move_possible(board, direction)
        if not result.possible:
            options = ', '.join(d.name.lower() for d in legal_directions(board))
            print(f'That move does nothing. Possible: {options}')
            continue
        score += result.score_gain
        board = add_random_tile(result.board, rng)
        print_board(board)


if __name__ == '__main__':
    main()
