"""Board model for the sliding puzzle.

The board is a ``width``×``height`` grid of tokens.  Tokens ``1`` to
``width*height - 1`` are tiles, ``0`` is the blank.  Width and height may
differ.
"""

from __future__ import annotations

from collections.abc import Iterator

from backend.errors import InvalidBoard, InvalidToken, OutOfBounds
from backend.models.coordinate import Coordinate, grid_positions
from backend.models.move import Direction, Move

OFF_BOARD = -1  # returned for positions outside of the grid
BLANK = 0


class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a list of rows, copied from the ones passed in.
    ``blank`` always points at the field holding ``0``; it is maintained by
    :meth:`do_move` and cannot be set from outside.
    """

    __slots__ = ("width", "height", "tiles", "_blank")

    def __init__(self, width: int, height: int, tiles: list[list[int]]) -> None:
        if width <= 0 or height <= 0:
            raise InvalidBoard(f"Invalid board dimensions {width}×{height}.")
        if len(tiles) != height or any(len(row) != width for row in tiles):
            raise InvalidBoard(
                f"Tile rows do not match a {width}×{height} board."
            )
        self.width = width
        self.height = height
        self.tiles = [list(row) for row in tiles]
        self._blank = self._locate_blank()

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, width: int, height: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major token list.

        Unlike the constructor, the tokens are checked to be exactly
        ``0..width*height-1``.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if width <= 0 or height <= 0:
            raise InvalidBoard(f"Invalid board dimensions {width}×{height}.")
        n = width * height
        if len(flat) != n:
            raise InvalidBoard(
                f"Expected {n} tiles for a {width}×{height} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(n)):
            missing = sorted(set(range(n)) - set(flat))
            raise InvalidBoard(
                f"Tokens must be a permutation of 0..{n - 1} "
                f"(missing: {missing or 'none'})."
            )
        tiles = [list(flat[r * width : (r + 1) * width]) for r in range(height)]
        return cls(width, height, tiles)

    @classmethod
    def solved(cls, width: int, height: int) -> Board:
        """Return the goal board (tokens in order, blank bottom-right)."""
        n = width * height
        return cls.from_flat(width, height, list(range(1, n)) + [BLANK])

    def copy(self) -> Board:
        board = object.__new__(Board)
        board.width = self.width
        board.height = self.height
        board.tiles = [row[:] for row in self.tiles]
        board._blank = self._blank
        return board

    def _locate_blank(self) -> Coordinate:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == BLANK:
                    return Coordinate(c, r)
        raise InvalidBoard("Board has no blank field.")

    # -- field access ---------------------------------------------------------

    @property
    def blank(self) -> Coordinate:
        return self._blank

    @property
    def positions(self) -> tuple[Coordinate, ...]:
        return grid_positions(self.width, self.height)

    def on_board(self, pos: Coordinate) -> bool:
        return 0 <= pos.col < self.width and 0 <= pos.row < self.height

    def get_field(self, pos: Coordinate) -> int:
        """Return the token at ``pos``, or ``OFF_BOARD`` outside of the grid."""
        if not self.on_board(pos):
            return OFF_BOARD
        return self.tiles[pos.row][pos.col]

    def set_field(self, pos: Coordinate, token: int) -> None:
        """Put ``token`` on ``pos``.  Does not move ``blank``."""
        if not self.on_board(pos):
            raise OutOfBounds(
                f"{pos} is outside of the {self.width}×{self.height} board."
            )
        if token < 0 or token >= self.width * self.height:
            raise InvalidToken(
                f"Token {token} out of range 0..{self.width * self.height - 1}."
            )
        self.tiles[pos.row][pos.col] = token

    # -- moves ----------------------------------------------------------------

    def check_move(self, move: Move) -> bool:
        """True if the tile on the move's source can slide into the blank."""
        return (
            self.get_field(move.target(0)) > BLANK
            and self.get_field(move.target(1)) == BLANK
        )

    def do_move(self, move: Move) -> None:
        """Execute ``move``.  The move is not checked again."""
        source = move.target(0)
        self.set_field(move.target(1), self.get_field(source))
        self.set_field(source, BLANK)
        self._blank = source

    def valid_moves(self, excluding: Move | None = None) -> Iterator[Move]:
        """Yield every legal move, except the one that undoes ``excluding``."""
        for direction in Direction:
            source = Move(self._blank, direction).target(-1)
            move = Move(source, direction)
            if self.check_move(move) and not move.is_inverse_of(excluding):
                yield move

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = self.width * self.height - 1
        for index, pos in enumerate(self.positions[:last]):
            if self.tiles[pos.row][pos.col] != index + 1:
                return False
        return self._blank == self.positions[last]

    def is_tile_correct(self, col: int, row: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == BLANK:
            return row == self.height - 1 and col == self.width - 1
        return divmod(val - 1, self.width) == (row, col)

    def manhattan(self) -> int:
        """Sum of the taxicab distances of all tiles to their goal fields.

        The blank is not counted, so the value never overestimates the
        number of moves left.
        """
        distance = 0
        width = self.width
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v != BLANK:
                    goal_row, goal_col = divmod(v - 1, width)
                    distance += abs(goal_col - c) + abs(goal_row - r)
        return distance

    def key(self) -> tuple[int, ...]:
        """Flat row-major token tuple, hashable."""
        return tuple(v for row in self.tiles for v in row)

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.tiles == other.tiles
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({self.width}, {self.height}, {self.tiles!r})"

    def __str__(self) -> str:
        return "\n".join(
            "".join(f"{v:2d} " for v in row) for row in self.tiles
        ) + "\n"
