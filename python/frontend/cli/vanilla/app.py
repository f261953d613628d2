"""Vanilla terminal frontend — no third-party dependencies.

Uses only ``print`` and ANSI codes.  Solves a board file and prints the
board before every move of the solution, followed by the solved board.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.engine.replay import replay, replay_steps
from backend.engine.search import SearchConfig, SearchResult, solve_by_astar
from backend.errors import SearchExhausted
from backend.loaders import load_board
from backend.models.board import Board
from backend.models.coordinate import Coordinate

logger = logging.getLogger(__name__)


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, moving: Coordinate | None = None) -> str:
    """Return an ANSI-coloured text representation of the board.

    The tile on *moving* (the one about to slide) is bracketed.
    """
    width = len(str(board.width * board.height - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.width)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif Coordinate(c, r) == moving:
                cells.append(f"{_C}[{val:>{width}}]{_R}")
            elif board.is_tile_correct(c, r):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _stats_line(result: SearchResult) -> str:
    s = result.stats
    return (
        f"  Expanded: {_Y}{s.expanded}{_R}  |  "
        f"Generated: {_Y}{s.generated}{_R}  |  "
        f"Duplicates: {_Y}{s.duplicates}{_R}  |  "
        f"Time: {_Y}{s.elapsed * 1000:.0f} ms{_R}"
    )


# -- output -------------------------------------------------------------------


def print_board_sequence(board: Board, result: SearchResult) -> None:
    """Print *board* before each move of the solution, then the solved board."""
    moves = result.move_sequence()
    for i, move, current in replay_steps(board, moves):
        h = current.manhattan()
        print(f"  {_DIM}Manhattan metric: {h} -> cost = {i + h}{_R}")
        print(_render_board(current, move.source))
        print(f"  {_C}{i + 1}. Move:{_R} {move}")
        print()
    print(f"  {_G}Solved board:{_R}")
    print(_render_board(replay(board, moves)))


# -- public entry point -------------------------------------------------------


def run(board_path: Path, config: SearchConfig) -> bool:
    """Solve the board in *board_path* and print the solution."""
    board = load_board(board_path)
    logger.info("Loaded %d×%d board from %s", board.width, board.height, board_path)

    print(f"  {_C}=== Sliding Puzzle ({board.width}×{board.height}) ==={_R}")
    print()
    result = solve_by_astar(board, config)
    print(f"  Time: {result.stats.elapsed * 1000:.0f} ms")

    try:
        print_board_sequence(board, result)
    except SearchExhausted as exc:
        print(f"  {_Y}No solution found.{_R} {exc}")
        print(_stats_line(result))
        return False

    print()
    print(f"  {_G}Solved in {len(result.move_sequence())} moves!{_R}")
    print(_stats_line(result))
    return True
