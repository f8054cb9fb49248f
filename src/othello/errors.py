"""
Exceptions raised by the Othello engine.
"""


class OthelloError(Exception):
    """Base class for all engine errors."""


class InvalidDimensionsError(OthelloError, ValueError):
    """A seeded grid is not exactly 8 rows of 8 columns."""


class InvalidCellValueError(OthelloError, ValueError):
    """A seeded grid holds a value that is not a Cell."""


class OutOfBoundsError(OthelloError, IndexError):
    """A row or column index falls outside the board."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Position ({row}, {col}) is outside the 8x8 board")
        self.row = row
        self.col = col


class IllegalMoveError(OthelloError, ValueError):
    """The target cell is not a legal move for the current player."""

    def __init__(self, row: int, col: int, player: str):
        super().__init__(f"Illegal move ({row}, {col}) for player {player}")
        self.row = row
        self.col = col
        self.player = player
