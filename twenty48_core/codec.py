from __future__ import annotations

from typing import Any, Dict, List, Optional

from .board import EMPTY_MARK, Board


def board_to_json(board: Board) -> Dict[str, Any]:
    return {
        "width": int(board.width),
        "height": int(board.height),
        "grid": [[t.value for t in row] for row in board.rows()],
    }


def board_from_json(obj: Any) -> Board:
    """Decodes board_to_json output. Cells may be null, 0 or a positive int."""
    if not isinstance(obj, dict):
        raise ValueError("board must be an object")
    try:
        rows = obj["grid"]
    except KeyError:
        raise ValueError("board.grid is required") from None
    if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
        raise ValueError("board.grid must be a list of rows")
    values: List[List[Optional[int]]] = []
    for row in rows:
        out: List[Optional[int]] = []
        for v in row:
            if v is not None and (isinstance(v, bool) or not isinstance(v, int)):
                raise ValueError(f"bad tile value: {v!r}")
            out.append(v)
        values.append(out)
    board = Board.from_rows(values)
    for key, actual in (("width", board.width), ("height", board.height)):
        if key in obj and int(obj[key]) != actual:
            raise ValueError(f"board.{key} is {obj[key]} but the grid has {actual}")
    return board


def board_from_string(text: str) -> Board:
    """Parses the text produced by board_to_string."""
    rows: List[List[Optional[int]]] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        row: List[Optional[int]] = []
        for cell in line.split():
            if cell == EMPTY_MARK:
                row.append(None)
            elif cell.isdigit():
                row.append(int(cell))
            else:
                raise ValueError(f"unexpected cell {cell!r}")
        rows.append(row)
    if not rows:
        raise ValueError("no rows to parse")
    return Board.from_rows(rows)
