"""Priority queue of open search nodes."""

from __future__ import annotations

import heapq
import itertools

from backend.engine.search.node import PartialSolution


class Frontier:
    """Min-heap of nodes ordered by ``(f, h, insertion order)``.

    Among nodes of equal cost the one closer to the goal (lower ``h``, hence
    deeper) is popped first; remaining ties are resolved first-in first-out,
    so the pop order is fully reproducible.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, PartialSolution]] = []
        self._counter = itertools.count()

    def push(self, node: PartialSolution) -> None:
        heapq.heappush(
            self._heap, (node.cost, node.heuristic, next(self._counter), node)
        )

    def pop(self) -> PartialSolution:
        return heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
