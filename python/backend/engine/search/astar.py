"""A* search over sliding puzzle boards.

Nodes are expanded in order of ``f = g + h`` where ``g`` is the number of
moves made and ``h`` the Manhattan distance of the board.  The heuristic is
admissible and consistent for unit-cost slides, so the first solved node
popped from the frontier carries a shortest move sequence.

Boards that were already expanded (or are queued with a cheaper path) are
skipped.  With a consistent heuristic a board is always closed at its
optimal depth, so this does not affect optimality.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.search.frontier import Frontier
from backend.engine.search.node import PartialSolution
from backend.errors import BudgetExceeded, SearchCancelled, SearchExhausted
from backend.models.board import Board
from backend.models.move import Move

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    BUDGET_EXCEEDED = "budget_exceeded"
    CANCELLED = "cancelled"


_LIMIT_STATUSES = frozenset({SearchStatus.BUDGET_EXCEEDED, SearchStatus.CANCELLED})


@dataclass
class SearchConfig:
    """Limits and switches for a single search.

    ``None`` for a limit means unbounded.  ``detect_duplicates=False`` runs
    the plain A* loop that re-expands boards reached via different paths.
    """

    max_expansions: int | None = None
    max_frontier: int | None = None
    detect_duplicates: bool = True
    record_trace: bool = False
    log_interval: int = 10_000


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0
    # f-costs of the nodes in the order they were popped and expanded
    trace: list[int] = field(default_factory=list)


@dataclass
class SearchResult:
    status: SearchStatus
    solution: PartialSolution | None
    stats: SearchStats

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    def move_sequence(self) -> tuple[Move, ...]:
        """Return the winning moves, raising if the search failed."""
        if self.solution is not None:
            return self.solution.move_sequence()
        if self.status is SearchStatus.BUDGET_EXCEEDED:
            raise BudgetExceeded(
                f"Search budget used up after {self.stats.expanded} expansions."
            )
        if self.status is SearchStatus.CANCELLED:
            raise SearchCancelled(
                f"Search cancelled after {self.stats.expanded} expansions."
            )
        raise SearchExhausted(
            f"No solution reachable ({self.stats.expanded} nodes expanded)."
        )


def solve_by_astar(
    board: Board,
    config: SearchConfig | None = None,
    cancel: threading.Event | None = None,
) -> SearchResult:
    """Find a shortest solution for ``board``.

    Runs until a solved board is popped, the frontier is empty, a limit of
    ``config`` is reached, or ``cancel`` is set.  The outcome is reported in
    the returned :class:`SearchResult`; nothing is raised for an unsolvable
    board.
    """
    config = config or SearchConfig()
    stats = SearchStats()
    started = time.perf_counter()

    root = PartialSolution(board)
    frontier = Frontier()
    frontier.push(root)
    stats.peak_frontier = 1

    # canonical board -> smallest depth at which it was queued
    best_depth: dict[tuple[int, ...], int] = {board.key(): 0}
    closed: set[tuple[int, ...]] = set()

    logger.info(
        "Starting A* on %d×%d board (h=%d)", board.width, board.height, root.cost
    )

    def finish(status: SearchStatus, node: PartialSolution | None) -> SearchResult:
        stats.elapsed = time.perf_counter() - started
        log = logger.warning if status in _LIMIT_STATUSES else logger.info
        log(
            "A* %s: expanded=%d generated=%d duplicates=%d peak_frontier=%d "
            "in %.3fs",
            status.value,
            stats.expanded,
            stats.generated,
            stats.duplicates,
            stats.peak_frontier,
            stats.elapsed,
        )
        return SearchResult(status=status, solution=node, stats=stats)

    while frontier:
        if cancel is not None and cancel.is_set():
            return finish(SearchStatus.CANCELLED, None)
        queued = len(frontier)
        node = frontier.pop()

        if config.detect_duplicates:
            key = node.board.key()
            if key in closed or best_depth.get(key, node.depth) < node.depth:
                stats.duplicates += 1
                continue

        if config.record_trace:
            stats.trace.append(node.cost)

        if node.is_goal():
            return finish(SearchStatus.SOLVED, node)

        # limits apply to expansions only, a queued goal is still found
        if (
            config.max_expansions is not None
            and stats.expanded >= config.max_expansions
        ) or (config.max_frontier is not None and queued > config.max_frontier):
            return finish(SearchStatus.BUDGET_EXCEEDED, None)

        if config.detect_duplicates:
            closed.add(key)
        stats.expanded += 1
        if config.log_interval and stats.expanded % config.log_interval == 0:
            logger.debug(
                "expanded=%d frontier=%d f=%d g=%d",
                stats.expanded,
                len(frontier),
                node.cost,
                node.depth,
            )

        for move in node.valid_moves():
            child = node.copy()
            child.apply_move(move)
            stats.generated += 1
            if config.detect_duplicates:
                child_key = child.board.key()
                if child_key in closed or best_depth.get(
                    child_key, child.depth + 1
                ) <= child.depth:
                    stats.duplicates += 1
                    continue
                best_depth[child_key] = child.depth
            frontier.push(child)

        stats.peak_frontier = max(stats.peak_frontier, len(frontier))

    return finish(SearchStatus.EXHAUSTED, None)
