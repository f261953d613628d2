"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (column, row) position. May lie outside any board."""

    col: int
    row: int

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.col + other.col, self.row + other.row)

    def __mul__(self, factor: int) -> Coordinate:
        return Coordinate(self.col * factor, self.row * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"


@cache
def grid_positions(width: int, height: int) -> tuple[Coordinate, ...]:
    """Return all positions of a ``width``×``height`` grid in row-major order.

    The table is built once per pair of dimensions and shared read-only
    between all boards of that size.
    """
    return tuple(Coordinate(c, r) for r in range(height) for c in range(width))
