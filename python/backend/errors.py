"""Exception hierarchy shared by the models, the search engine and the loaders."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle backend."""


# -- contract violations ------------------------------------------------------


class InvalidDirection(PuzzleError, ValueError):
    """A move was built with something that is not a ``Direction``."""


class OutOfBounds(PuzzleError, IndexError):
    """A field outside the grid was written."""


class InvalidToken(PuzzleError, ValueError):
    """A token outside ``0..width*height-1`` was written."""


class InvalidBoard(PuzzleError, ValueError):
    """A board does not have the shape or the tokens of a sliding puzzle."""


class BoardFormatError(InvalidBoard):
    """A board file could not be parsed."""


class IllegalMove(PuzzleError, ValueError):
    """A replayed move does not slide a tile into the blank."""

    def __init__(self, index: int, move: object) -> None:
        super().__init__(f"Move {index + 1} ({move}) is not legal.")
        self.index = index
        self.move = move


# -- search outcomes ----------------------------------------------------------


class SearchExhausted(PuzzleError):
    """The frontier ran empty before a solved board was reached."""


class BudgetExceeded(SearchExhausted):
    """The search stopped because a node budget was used up."""


class SearchCancelled(SearchExhausted):
    """The search was cancelled from outside."""
