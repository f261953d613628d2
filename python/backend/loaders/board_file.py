"""Reads and writes boards in the plain-text sample format.

The format is a stream of whitespace-separated integers: the width and the
height of the board, followed by the tokens row by row (``0`` is the blank)::

    3 3
    1 2 3
    4 0 6
    7 5 8
"""

from __future__ import annotations

from pathlib import Path

from backend.errors import BoardFormatError, InvalidBoard
from backend.models.board import Board


def parse_board(text: str) -> Board:
    try:
        values = [int(tok) for tok in text.split()]
    except ValueError as exc:
        raise BoardFormatError(f"Board file contains a non-integer: {exc}") from None

    if len(values) < 2:
        raise BoardFormatError("Board file must start with width and height.")
    width, height, *flat = values
    if width <= 0 or height <= 0:
        raise BoardFormatError(f"Invalid board dimensions {width}×{height}.")
    if len(flat) != width * height:
        raise BoardFormatError(
            f"Expected {width * height} tokens for a {width}×{height} board, "
            f"got {len(flat)}."
        )
    try:
        return Board.from_flat(width, height, flat)
    except InvalidBoard as exc:
        raise BoardFormatError(str(exc)) from exc


def load_board(path: Path) -> Board:
    return parse_board(Path(path).read_text())


def dump_board(board: Board) -> str:
    lines = [f"{board.width} {board.height}"]
    lines.extend(" ".join(str(v) for v in row) for row in board.tiles)
    return "\n".join(lines) + "\n"
