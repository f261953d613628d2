"""Moves: a tile slides from a source field one step in a direction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.errors import InvalidDirection
from backend.models.coordinate import Coordinate


class Direction(StrEnum):
    """Direction in which the *tile* slides.

    Definition order is the order in which moves are generated.
    """

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def delta(self) -> Coordinate:
        return _DELTAS[self]


_DELTAS: dict[Direction, Coordinate] = {
    Direction.UP: Coordinate(0, -1),
    Direction.RIGHT: Coordinate(1, 0),
    Direction.DOWN: Coordinate(0, 1),
    Direction.LEFT: Coordinate(-1, 0),
}


@dataclass(frozen=True, slots=True)
class Move:
    """Slide of the tile on ``source`` one field towards ``direction``.

    Example::

        Move(Coordinate(1, 2), Direction.UP).target()  # Coordinate(1, 1)
    """

    source: Coordinate
    direction: Direction

    def __post_init__(self) -> None:
        if isinstance(self.direction, Direction):
            return
        try:
            direction = Direction(self.direction)
        except (ValueError, TypeError):
            raise InvalidDirection(
                f"Unknown direction {self.direction!r}; expected one of "
                f"{', '.join(d.value for d in Direction)}."
            ) from None
        object.__setattr__(self, "direction", direction)

    def target(self, step: int = 1) -> Coordinate:
        """Field reached after ``step`` steps (0 is the source, -1 behind it)."""
        return self.source + self.direction.delta * step

    def is_inverse_of(self, other: Move | None) -> bool:
        """True if ``other`` exactly undoes this move."""
        if other is None:
            return False
        return self.source == other.target() and other.source == self.target()

    def __str__(self) -> str:
        return f"{self.source}->{self.target()}"
