"""Replays a move sequence against a board and checks each move."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from backend.errors import IllegalMove
from backend.models.board import Board
from backend.models.move import Move


def replay_steps(
    board: Board, moves: Iterable[Move]
) -> Iterator[tuple[int, Move, Board]]:
    """Yield ``(index, move, board_before_move)`` while applying *moves*.

    Works on a copy of *board*; the yielded board is the live copy, so it
    must not be mutated by the consumer.
    """
    current = board.copy()
    for i, move in enumerate(moves):
        if not current.check_move(move):
            raise IllegalMove(i, move)
        yield i, move, current
        current.do_move(move)


def replay(board: Board, moves: Iterable[Move]) -> Board:
    """Return a copy of *board* with all *moves* applied."""
    current = board.copy()
    for i, move in enumerate(moves):
        if not current.check_move(move):
            raise IllegalMove(i, move)
        current.do_move(move)
    return current
