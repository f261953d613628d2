from backend.engine.search.astar import (
    SearchConfig,
    SearchResult,
    SearchStats,
    SearchStatus,
    solve_by_astar,
)
from backend.engine.search.frontier import Frontier
from backend.engine.search.node import PartialSolution
from backend.engine.search.solver import Solver

__all__ = [
    "Frontier",
    "PartialSolution",
    "SearchConfig",
    "SearchResult",
    "SearchStats",
    "SearchStatus",
    "Solver",
    "solve_by_astar",
]
