"""
Board module for Othello.
Handles the board grid, move validation, capturing and the derived game state.
"""
import logging
from typing import List, Tuple, Optional, Sequence, Union

import numpy as np

from .config import EngineConfig
from .constants import Cell, Phase, Winner, SIZE, DIRECTIONS, SYMBOLS
from .errors import (
    IllegalMoveError,
    InvalidCellValueError,
    InvalidDimensionsError,
    OutOfBoundsError,
)
from .state import BoardState, Score, count_pieces, derive_state, grid_is_full

logger = logging.getLogger(__name__)

Grid = Union[np.ndarray, Sequence[Sequence[int]]]

INT64 = np.iinfo(np.int64)


class Board:
    """
    The Othello board engine.

    Owns an 8x8 numpy grid of cell values, the player to move, the list of
    board snapshots taken after each move, and the state derived from the
    grid (score, phase, winner). All mutation goes through `seed_position`
    and `make_move`.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """Initialize a new board in the standard opening position."""
        self.config = config or EngineConfig()
        self._board = np.zeros((SIZE, SIZE), dtype=np.int64)
        mid = SIZE // 2
        self._board[mid - 1, mid - 1] = Cell.WHITE
        self._board[mid - 1, mid] = Cell.BLACK
        self._board[mid, mid - 1] = Cell.BLACK
        self._board[mid, mid] = Cell.WHITE
        self._current_player = Cell.BLACK
        self._move_history: List[np.ndarray] = []
        self._move_applied = False
        self.check_board_state()

    @property
    def board(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    @property
    def current_player(self) -> Cell:
        return self._current_player

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def score(self) -> Score:
        return self._state.score

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def winner(self) -> Optional[Winner]:
        """Winner of a finished game, None while the game is not finished."""
        return self._state.winner

    @property
    def game_over(self) -> bool:
        return self._state.game_over

    @property
    def move_history(self) -> List[np.ndarray]:
        """Read-only grid snapshots, one per applied move, oldest first."""
        return list(self._move_history)

    def seed_position(self, grid: Grid, current_player: Optional[Cell] = None) -> None:
        """
        Replace the board with a copy of a custom position.

        The player to move and the move history are kept unless
        `current_player` is given. The phase goes back to NOT_STARTED
        unless the new board is already over.

        Args:
            grid: 8 rows of 8 cell values (nested sequences or a 2-D array)
            current_player: Optionally, whose turn it is on the new position

        Raises:
            InvalidDimensionsError: If grid is not exactly 8x8
            InvalidCellValueError: If a cell is not an integer, or strict
                validation is on and a cell is not EMPTY, BLACK or WHITE
            ValueError: If current_player is not BLACK or WHITE
        """
        self._check_dimensions(grid)
        new_board = self._to_grid(grid, strict=self.config.strict_cell_values)

        if current_player is not None and current_player not in (Cell.BLACK, Cell.WHITE):
            raise ValueError(f"current_player must be BLACK or WHITE, got {current_player!r}")

        self._board = new_board
        if current_player is not None:
            self._current_player = Cell(current_player)
        self._move_applied = False
        self.check_board_state()
        logger.debug("Seeded custom position, %s to move", self._current_player.name)

    @staticmethod
    def _to_grid(grid: Grid, strict: bool) -> np.ndarray:
        """Validate every cell and copy the grid into a fresh int64 array."""
        cells = np.array(grid, dtype=object)
        if cells.shape != (SIZE, SIZE):
            raise InvalidCellValueError("Every cell must hold a single value")

        allowed = [int(cell) for cell in Cell]
        for (row, col), value in np.ndenumerate(cells):
            # bool is an int subclass but never a cell value
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise InvalidCellValueError(
                    f"Cell value {value!r} at ({row}, {col}) is not an integer"
                )
            if strict and value not in allowed:
                raise InvalidCellValueError(f"Invalid cell value {value!r} at ({row}, {col})")
            if not INT64.min <= value <= INT64.max:
                raise InvalidCellValueError(f"Cell value {value!r} at ({row}, {col}) is out of range")

        return cells.astype(np.int64)

    @staticmethod
    def _check_dimensions(grid: Grid) -> None:
        try:
            valid = len(grid) == SIZE and all(len(row) == SIZE for row in grid)
        except TypeError as e:
            raise InvalidDimensionsError("Position must be an 8x8 grid") from e
        if not valid:
            raise InvalidDimensionsError("Position must be an 8x8 grid")

    @staticmethod
    def _check_bounds(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise OutOfBoundsError(row, col)

    def get_legal_moves(self) -> List[Tuple[int, int]]:
        """
        Get all legal moves for the current player.

        Returns:
            List of (row, col) tuples in row-major order
        """
        return [
            (row, col)
            for row in range(SIZE)
            for col in range(SIZE)
            if self.is_valid_move(row, col)
        ]

    def has_any_valid_move(self) -> bool:
        """Check if the current player has any legal move."""
        return self._has_move_for(self._current_player)

    def _has_move_for(self, player: Cell) -> bool:
        return any(
            self._is_legal_for(row, col, player)
            for row in range(SIZE)
            for col in range(SIZE)
        )

    def is_valid_move(self, row: int, col: int) -> bool:
        """
        Check if a move is legal for the current player.

        Raises:
            OutOfBoundsError: If row or col is outside [0, 7]
        """
        self._check_bounds(row, col)
        return self._is_legal_for(row, col, self._current_player)

    def _is_legal_for(self, row: int, col: int, player: Cell) -> bool:
        if self._board[row, col] != Cell.EMPTY:
            return False

        for dr, dc in DIRECTIONS:
            if self._captures_in_direction(row, col, dr, dc, player):
                return True
        return False

    def _captures_in_direction(self, row: int, col: int, dr: int, dc: int,
                               player: Cell) -> List[Tuple[int, int]]:
        """
        Cells `player` would capture walking from (row, col) in one direction.

        Any non-empty cell that is not the player's counts as an opponent
        cell. The run is only captured when it is closed by one of the
        player's pieces; otherwise the result is empty.
        """
        run = []
        r, c = row + dr, col + dc
        while 0 <= r < SIZE and 0 <= c < SIZE:
            value = self._board[r, c]
            if value == Cell.EMPTY:
                return []
            if value == player:
                return run
            run.append((r, c))
            r += dr
            c += dc
        return []

    def make_move(self, row: int, col: int) -> None:
        """
        Play a piece for the current player and capture every bracketed run.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Raises:
            OutOfBoundsError: If row or col is outside [0, 7]
            IllegalMoveError: If the move is not legal; the board is left untouched
        """
        if not self.is_valid_move(row, col):
            logger.debug("Rejected move (%d, %d) for %s", row, col, self._current_player.name)
            raise IllegalMoveError(row, col, self._current_player.name)

        player = self._current_player
        flipped = []
        for dr, dc in DIRECTIONS:
            flipped.extend(self._captures_in_direction(row, col, dr, dc, player))

        self._board[row, col] = player
        for r, c in flipped:
            self._board[r, c] = player
        logger.debug("%s played (%d, %d), flipped %d", player.name, row, col, len(flipped))

        snapshot = self._board.copy()
        snapshot.flags.writeable = False
        self._move_history.append(snapshot)
        self._move_applied = True

        self._current_player = player.opponent()
        self.check_board_state()

        # Pass the turn straight back if the opponent cannot reply
        if not self.has_any_valid_move():
            logger.debug("%s has no legal move and passes", self._current_player.name)
            self._current_player = player
            if not self.has_any_valid_move():
                logger.debug("Neither player can move")

        if self.game_over:
            logger.info("Game over: %s (black %d, white %d)",
                        self.winner.name, self.score.black, self.score.white)

    def check_board_state(self) -> BoardState:
        """
        Recompute score, phase and winner from the grid and store the snapshot.

        The phase is IN_PROGRESS once a move has been applied since the last
        seed. With `end_on_double_pass` set, a board where neither player can
        move counts as finished.

        Returns:
            The new BoardState
        """
        deadlocked = (
            self.config.end_on_double_pass
            and not self.is_board_full()
            and not self._has_move_for(Cell.BLACK)
            and not self._has_move_for(Cell.WHITE)
        )
        self._state = derive_state(self._board, on_move=self._move_applied, deadlocked=deadlocked)
        return self._state

    def is_board_full(self) -> bool:
        """Check if no empty cells remain."""
        return grid_is_full(self._board)

    def calculate_score(self) -> Score:
        """Count the Black and White pieces on the board."""
        return count_pieces(self._board)

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Writable copy of the 8x8 grid
        """
        return self._board.copy()

    def __str__(self) -> str:
        """Return a string representation of the board."""
        rows = []
        for i in range(SIZE):
            row = [SYMBOLS.get(self._board[i, j], '?') for j in range(SIZE)]
            rows.append(' '.join(row))

        status = ["\n".join(rows)]
        status.append(f"Current player: {self._current_player.name.capitalize()}")

        black, white = self.score
        status.append(f"Score - Black: {black}, White: {white}")

        if self.game_over:
            if self.winner == Winner.DRAW:
                status.append("Game over! It's a draw!")
            else:
                status.append(f"Game over! {self.winner.name.capitalize()} wins!")

        return "\n".join(status)
