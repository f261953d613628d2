from backend.models.board import BLANK, OFF_BOARD, Board
from backend.models.coordinate import Coordinate, grid_positions
from backend.models.move import Direction, Move

__all__ = [
    "BLANK",
    "OFF_BOARD",
    "Board",
    "Coordinate",
    "Direction",
    "Move",
    "grid_positions",
]
