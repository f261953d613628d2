"""Sliding puzzle solver."""

from __future__ import annotations

from backend.engine.search.astar import SearchConfig, solve_by_astar
from backend.models.board import Board
from backend.models.move import Move


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, config: SearchConfig | None = None) -> list[Move]:
        """Return a shortest move sequence that solves *board*.

        Returns ``[]`` if the board is already solved.  Raises
        ``SearchExhausted`` (or one of its subclasses) if no solution was
        found.
        """
        if board.is_solved():
            return []
        return list(solve_by_astar(board, config).move_sequence())

    @staticmethod
    def hint(board: Board, config: SearchConfig | None = None) -> Move | None:
        """Return the first move of a shortest solution, or ``None`` if solved.

        Raises the same errors as :meth:`solve`.
        """
        moves = Solver.solve(board, config)
        return moves[0] if moves else None
