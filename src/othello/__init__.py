"""
Othello engine package.
This package contains the rules engine for Othello/Reversi.
"""

from .board import Board
from .config import Config, EngineConfig, LoggingConfig, get_default_config
from .constants import Cell, Phase, Winner
from .errors import (
    OthelloError,
    InvalidDimensionsError,
    InvalidCellValueError,
    OutOfBoundsError,
    IllegalMoveError,
)
from .logger import setup_logger
from .state import BoardState, Score, derive_state

__all__ = [
    'Board', 'Config', 'EngineConfig', 'LoggingConfig', 'get_default_config',
    'Cell', 'Phase', 'Winner',
    'OthelloError', 'InvalidDimensionsError', 'InvalidCellValueError',
    'OutOfBoundsError', 'IllegalMoveError',
    'setup_logger', 'BoardState', 'Score', 'derive_state',
]
