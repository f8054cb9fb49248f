"""
Shared constants for the Othello engine.
"""
from enum import IntEnum
from typing import List, Tuple


class Cell(IntEnum):
    """Occupancy of a single board cell. Values are what the grid stores."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opponent(self) -> 'Cell':
        """Return the other player. Only defined for BLACK and WHITE."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell.WHITE if self == Cell.BLACK else Cell.BLACK


class Phase(IntEnum):
    NOT_STARTED = 0
    IN_PROGRESS = 1
    FINISHED = 2


class Winner(IntEnum):
    DRAW = 0
    BLACK = 1
    WHITE = 2


# Board dimension
SIZE = 8

# N, S, E, W and the four diagonals as (row, col) steps
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

SYMBOLS = {Cell.EMPTY: '.', Cell.BLACK: 'B', Cell.WHITE: 'W'}
