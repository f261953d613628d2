"""A* driver: optimality, termination, limits, and reproducibility."""

from __future__ import annotations

import threading
from collections import deque

import pytest

from backend.engine.replay import replay
from backend.engine.search import (
    SearchConfig,
    SearchStatus,
    solve_by_astar,
)
from backend.errors import BudgetExceeded, SearchCancelled, SearchExhausted
from backend.models import Board
from conftest import board_from_data, board_from_rows, load_fixture

_BOARDS = load_fixture("boards.json")


def _ids(board_data: dict) -> str:
    return board_data["id"]


def _unsolvable_2x2() -> Board:
    return board_from_rows([2, 1], [3, 0])


def _distances_from_goal(width: int, height: int, max_depth: int) -> dict:
    """Breadth-first distances of all boards within *max_depth* of the goal."""
    goal = Board.solved(width, height)
    dist = {goal.key(): 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        d = dist[board.key()]
        if d == max_depth:
            continue
        for move in board.valid_moves():
            nxt = board.copy()
            nxt.do_move(move)
            if nxt.key() not in dist:
                dist[nxt.key()] = d + 1
                queue.append(nxt)
    return dist


# -- solved instances ---------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_finds_optimal_solution(board_data: dict) -> None:
    board = board_from_data(board_data)
    result = solve_by_astar(board)

    assert result.status is SearchStatus.SOLVED
    assert result.solved
    moves = result.move_sequence()
    assert len(moves) == board_data["optimal"]
    assert replay(board, moves).is_solved()


@pytest.mark.parametrize("board_data", _BOARDS[:5], ids=_ids)
def test_plain_astar_matches(board_data: dict) -> None:
    board = board_from_data(board_data)
    result = solve_by_astar(board, SearchConfig(detect_duplicates=False))

    assert result.solved
    assert len(result.move_sequence()) == board_data["optimal"]
    assert result.stats.duplicates == 0


def test_already_solved() -> None:
    result = solve_by_astar(Board.solved(4, 4))
    assert result.solved
    assert result.move_sequence() == ()
    assert result.stats.expanded == 0


def test_two_step_sample(two_step_board: Board) -> None:
    result = solve_by_astar(two_step_board)
    moves = result.move_sequence()
    assert [str(m) for m in moves] == ["(1, 2)->(1, 1)", "(2, 2)->(1, 2)"]
    assert result.solution is not None
    assert result.solution.board == Board.solved(3, 3)


def test_matches_breadth_first_distances() -> None:
    dist = _distances_from_goal(3, 3, max_depth=10)
    for i, (key, d) in enumerate(sorted(dist.items())):
        board = Board.from_flat(3, 3, list(key))
        assert board.manhattan() <= d, f"heuristic overestimates {key}"
        if i % 25 == 0:
            result = solve_by_astar(board)
            assert len(result.move_sequence()) == d, key


@pytest.mark.timeout(120)
def test_hardest_eight_puzzle() -> None:
    board = board_from_rows([8, 6, 7], [2, 5, 4], [3, 0, 1])
    result = solve_by_astar(board)
    moves = result.move_sequence()
    assert len(moves) == 31
    assert replay(board, moves).is_solved()


# -- cost ordering ------------------------------------------------------------


@pytest.mark.parametrize("detect_duplicates", [True, False])
def test_popped_costs_never_decrease(detect_duplicates: bool) -> None:
    board = board_from_rows([4, 1, 2], [7, 0, 3], [8, 5, 6])
    config = SearchConfig(record_trace=True, detect_duplicates=detect_duplicates)
    result = solve_by_astar(board, config)

    trace = result.stats.trace
    assert trace, "trace must be recorded"
    assert trace[0] == board.manhattan()
    assert trace[-1] == result.solution.cost
    assert all(a <= b for a, b in zip(trace, trace[1:]))


def test_trace_off_by_default(two_step_board: Board) -> None:
    assert solve_by_astar(two_step_board).stats.trace == []


def test_search_is_reproducible() -> None:
    board = board_from_rows([2, 0, 3], [1, 4, 6], [7, 5, 8])
    first = solve_by_astar(board)
    second = solve_by_astar(board)
    assert first.move_sequence() == second.move_sequence()
    assert first.stats.expanded == second.stats.expanded


# -- failure ------------------------------------------------------------------


def test_unsolvable_board_exhausts_frontier() -> None:
    result = solve_by_astar(_unsolvable_2x2())

    assert result.status is SearchStatus.EXHAUSTED
    assert result.solution is None
    # a 2×2 board reaches exactly half of the 24 permutations
    assert result.stats.expanded == 12
    with pytest.raises(SearchExhausted) as info:
        result.move_sequence()
    assert not isinstance(info.value, BudgetExceeded)


def test_expansion_budget() -> None:
    # without duplicate detection the 2×2 cycle never empties the frontier
    config = SearchConfig(max_expansions=50, detect_duplicates=False)
    result = solve_by_astar(_unsolvable_2x2(), config)

    assert result.status is SearchStatus.BUDGET_EXCEEDED
    assert result.stats.expanded == 50
    with pytest.raises(BudgetExceeded):
        result.move_sequence()


def test_budget_reached_still_finds_queued_goal() -> None:
    # one expansion queues the solved board, popping it costs nothing
    board = board_from_rows([1, 2, 3], [4, 5, 6], [7, 0, 8])
    result = solve_by_astar(board, SearchConfig(max_expansions=1))

    assert result.status is SearchStatus.SOLVED
    assert result.stats.expanded == 1
    assert len(result.move_sequence()) == 1


def test_zero_budget_on_solved_board() -> None:
    result = solve_by_astar(Board.solved(3, 3), SearchConfig(max_expansions=0))
    assert result.status is SearchStatus.SOLVED
    assert result.move_sequence() == ()


def test_frontier_cap_still_finds_queued_goal() -> None:
    board = board_from_rows([1, 2, 3], [4, 5, 6], [7, 0, 8])
    result = solve_by_astar(board, SearchConfig(max_frontier=1))

    assert result.status is SearchStatus.SOLVED
    assert result.stats.peak_frontier > 1


def test_frontier_budget() -> None:
    board = board_from_rows([8, 6, 7], [2, 5, 4], [3, 0, 1])
    config = SearchConfig(max_frontier=100, detect_duplicates=False)
    result = solve_by_astar(board, config)

    assert result.status is SearchStatus.BUDGET_EXCEEDED
    assert result.stats.peak_frontier > 100
    with pytest.raises(SearchExhausted):
        result.move_sequence()


def test_cancellation() -> None:
    cancel = threading.Event()
    cancel.set()
    result = solve_by_astar(_unsolvable_2x2(), cancel=cancel)

    assert result.status is SearchStatus.CANCELLED
    assert result.stats.expanded == 0
    with pytest.raises(SearchCancelled):
        result.move_sequence()


def test_duplicates_are_counted() -> None:
    board = board_from_rows([4, 1, 2], [7, 0, 3], [8, 5, 6])
    deduped = solve_by_astar(board)
    plain = solve_by_astar(board, SearchConfig(detect_duplicates=False))

    assert deduped.stats.expanded <= plain.stats.expanded
    assert deduped.stats.generated >= deduped.stats.expanded
