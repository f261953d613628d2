"""Search nodes for the A* solver."""

from __future__ import annotations

from collections.abc import Iterator
from functools import total_ordering

from backend.models.board import Board
from backend.models.move import Move


@total_ordering
class PartialSolution:
    """A board reached from the initial state plus the moves that led there.

    ``cost`` is kept equal to ``len(moves) + board.manhattan()`` (the A*
    evaluation ``f = g + h``) and nodes are ordered by it.  Nodes with equal
    cost compare equal.
    """

    __slots__ = ("_board", "_moves", "cost")

    def __init__(self, board: Board) -> None:
        self._board = board.copy()
        self._moves: list[Move] = []
        self.cost: int = self._board.manhattan()

    def copy(self) -> PartialSolution:
        """Deep copy; the cost is taken over without recomputing it."""
        obj = object.__new__(PartialSolution)
        obj._board = self._board.copy()
        obj._moves = list(self._moves)
        obj.cost = self.cost
        return obj

    # -- state ----------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def depth(self) -> int:
        """Number of moves made so far (g)."""
        return len(self._moves)

    @property
    def heuristic(self) -> int:
        """Manhattan distance of the current board (h)."""
        return self.cost - len(self._moves)

    @property
    def last_move(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    # -- moves ----------------------------------------------------------------

    def apply_move(self, move: Move) -> None:
        """Perform a move obtained from :meth:`valid_moves` and update the cost."""
        self._board.do_move(move)
        self._moves.append(move)
        self.cost = self._board.manhattan() + len(self._moves)

    def valid_moves(self) -> Iterator[Move]:
        """All legal moves except the one undoing the previous move."""
        return self._board.valid_moves(self.last_move)

    def move_sequence(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def is_goal(self) -> bool:
        return self._board.is_solved()

    # -- ordering -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialSolution):
            return NotImplemented
        return self.cost == other.cost

    def __lt__(self, other: PartialSolution) -> bool:
        if not isinstance(other, PartialSolution):
            return NotImplemented
        return self.cost < other.cost

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<PartialSolution g={self.depth} h={self.heuristic} f={self.cost}>"

    def __str__(self) -> str:
        return "Partial solution with moves: \n" + ", ".join(
            str(m) for m in self._moves
        )
