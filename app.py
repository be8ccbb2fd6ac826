from __future__ import annotations

import logging
import os
import random
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    ALL_DIRECTIONS,
    Board,
    ClassicV2,
    Direction,
    MoveResult,
    add_random_tile,
    board_from_json,
    board_to_json,
    board_to_string,
    is_move_possible,
    new_board,
)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


DEFAULT_WIDTH = _env_int("TWENTY48_WIDTH", 4)
DEFAULT_HEIGHT = _env_int("TWENTY48_HEIGHT", 4)
DEBUG = os.getenv("TWENTY48_DEBUG", "0").lower() in ("1", "true", "yes", "on")

app = Flask(__name__)
app.logger.setLevel(logging.DEBUG if DEBUG else logging.INFO)

RULES = ClassicV2()

# Errors raised while decoding a request body; answered with HTTP 400.
BAD_INPUT = (ValueError, KeyError, TypeError)


def _bad_request(message: str) -> Tuple[Any, int]:
    app.logger.info("rejected request to %s: %s", request.path, message)
    return jsonify({"ok": False, "error": message}), 400


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _board_payload(board: Board) -> Dict[str, Any]:
    return {
        "board": board_to_json(board),
        "text": board_to_string(board),
        "won": RULES.won(board),
        "gameOver": RULES.game_over(board),
    }


def _result_to_json(res: MoveResult) -> Dict[str, Any]:
    return {
        "board": board_to_json(res.board),
        "possible": res.possible,
        "scoreGain": res.score_gain,
    }


@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    try:
        width = int(body.get("width", DEFAULT_WIDTH))
        height = int(body.get("height", DEFAULT_HEIGHT))
        seed: Optional[int] = body.get("seed")
        board = new_board(width, height, seed=seed)
    except BAD_INPUT as e:
        return _bad_request(f"bad board size: {e}")
    return jsonify({"ok": True, **_board_payload(board)})


@app.post("/api/move")
def api_move() -> Any:
    body = _body()
    try:
        board = board_from_json(body["board"])
        direction = Direction.parse(body["direction"])
        rng = random.Random(body.get("seed"))
    except BAD_INPUT as e:
        return _bad_request(f"bad move request: {e}")
    res = is_move_possible(board, direction)
    next_board = res.board
    if res.possible and body.get("spawn"):
        next_board = add_random_tile(next_board, rng)
    return jsonify({
        "ok": True,
        "direction": direction.name.lower(),
        "possible": res.possible,
        "scoreGain": res.score_gain,
        **_board_payload(next_board),
    })


@app.post("/api/moves")
def api_moves() -> Any:
    body = _body()
    try:
        board = board_from_json(body["board"])
    except BAD_INPUT as e:
        return _bad_request(f"bad board: {e}")
    moves = {d.name.lower(): _result_to_json(is_move_possible(board, d)) for d in ALL_DIRECTIONS}
    return jsonify({
        "ok": True,
        "moves": moves,
        "legal": [name for name, m in moves.items() if m["possible"]],
    })


@app.post("/api/render")
def api_render() -> Any:
    body = _body()
    try:
        board = board_from_json(body["board"])
    except BAD_INPUT as e:
        return _bad_request(f"bad board: {e}")
    return jsonify({"ok": True, "text": board_to_string(board)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
