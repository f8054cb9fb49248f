"""
Test script for derived game state.
"""
import numpy as np
import pytest

from othello import BoardState, Phase, Score, Winner, derive_state


def test_empty_grid_not_started():
    state = derive_state(np.zeros((8, 8), dtype=np.int64))
    assert state == BoardState(Score(0, 0), Phase.NOT_STARTED, None)
    assert not state.game_over


def test_after_move_in_progress():
    grid = np.zeros((8, 8), dtype=np.int64)
    grid[0, 0] = 1
    grid[0, 1] = 2
    grid[0, 2] = 9  # counts toward neither side
    state = derive_state(grid, on_move=True)
    assert state.phase == Phase.IN_PROGRESS
    assert state.score == Score(black=1, white=1)
    assert state.winner is None


def test_full_grid_white_wins():
    grid = np.full((8, 8), 2, dtype=np.int64)
    grid[0, :] = 1
    state = derive_state(grid)
    assert state.game_over
    assert state.winner == Winner.WHITE
    assert state.score == Score(8, 56)


def test_deadlock_finishes():
    grid = np.zeros((8, 8), dtype=np.int64)
    grid[0, 0] = 2
    state = derive_state(grid, on_move=True, deadlocked=True)
    assert state.phase == Phase.FINISHED
    assert state.winner == Winner.WHITE


def test_state_is_immutable():
    state = derive_state(np.zeros((8, 8), dtype=np.int64))
    with pytest.raises(AttributeError):
        state.phase = Phase.FINISHED
