"""
Derived game state.

Score, phase and winner are never stored independently of the grid: they are
recomputed from scratch by `derive_state` after every mutation and kept as a
single immutable snapshot.
"""
from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from .constants import Cell, Phase, Winner


class Score(NamedTuple):
    black: int
    white: int


@dataclass(frozen=True)
class BoardState:
    """Snapshot of everything derived from the grid."""
    score: Score
    phase: Phase
    winner: Optional[Winner] = None

    @property
    def game_over(self) -> bool:
        return self.phase == Phase.FINISHED


def count_pieces(grid: np.ndarray) -> Score:
    """Count Black and White cells. Any other value counts toward neither."""
    black = int(np.count_nonzero(grid == Cell.BLACK))
    white = int(np.count_nonzero(grid == Cell.WHITE))
    return Score(black, white)


def grid_is_full(grid: np.ndarray) -> bool:
    return not np.any(grid == Cell.EMPTY)


def decide_winner(score: Score) -> Winner:
    if score.black > score.white:
        return Winner.BLACK
    if score.white > score.black:
        return Winner.WHITE
    return Winner.DRAW


def derive_state(grid: np.ndarray, on_move: bool = False, deadlocked: bool = False) -> BoardState:
    """
    Derive score, phase and winner from a grid.

    Args:
        grid: 8x8 array of cell values
        on_move: True when called right after a move was applied
        deadlocked: True when neither player can move and the caller treats
            that as the end of the game

    Returns:
        A fresh BoardState
    """
    score = count_pieces(grid)

    if grid_is_full(grid) or deadlocked:
        return BoardState(score, Phase.FINISHED, decide_winner(score))
    if on_move:
        return BoardState(score, Phase.IN_PROGRESS)
    return BoardState(score, Phase.NOT_STARTED)
