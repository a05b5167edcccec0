"""
Game session for Minesweeper.

Holds the caller-side state around the board engine: the current grid
snapshot, the game status and first-click arming.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from . import board
from .board import RevealResult
from .cell import Cell
from .config import BoardConfig
from .grid import Coord, Grid
from .rng import create_seeded_rng


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    READY = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

@dataclass
class Game:
    """
    Minesweeper game session.

    Owns the current grid snapshot and replaces it after every move.
    Mines are placed on the first reveal so the first click is safe.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    _grid: Grid = field(init=False, repr=False)
    _status: GameStatus = field(init=False, default=GameStatus.READY)
    _armed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        """Create the empty grid after dataclass creation."""
        self._grid = Grid.create_empty(self.config.rows, self.config.cols)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On first reveal, places mines avoiding this cell. Marked cells
        are left alone and do not arm the board.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if any cell was revealed, False otherwise.
        """
        if self.is_over or not self._grid.in_bounds(row, col):
            return False
        if self._grid.cell(row, col).is_marked:
            return False

        if not self._armed:
            self._arm((row, col))

        return self._apply(board.reveal_cell(self._grid, row, col))

    def toggle_mark(self, row: int, col: int) -> bool:
        """
        Cycle the mark on a hidden cell.

        Returns:
            True if the mark changed, False otherwise.
        """
        if self.is_over or not self._grid.in_bounds(row, col):
            return False
        if self._grid.cell(row, col).is_revealed:
            return False

        # marking starts the game but mines wait for the first reveal
        if self._status == GameStatus.READY:
            self._status = GameStatus.RUNNING
        self._grid = board.toggle_mark(self._grid, row, col)
        return True

    def chord(self, row: int, col: int) -> bool:
        """
        Reveal all unflagged neighbors of a satisfied numbered cell.

        Returns:
            True if any cell was revealed, False otherwise.
        """
        if self._status != GameStatus.RUNNING:
            return False
        if not self._grid.in_bounds(row, col):
            return False
        return self._apply(board.chord(self._grid, row, col))

    def _arm(self, first_click: Coord) -> None:
        # mines go onto the current snapshot so earlier marks survive
        rng = create_seeded_rng(self.seed) if self.seed is not None else None
        self._grid = board.place_mines(
            self._grid, self.config.num_mines, first_click, rng
        )
        self._armed = True
        self._status = GameStatus.RUNNING

    def _apply(self, result: RevealResult) -> bool:
        """Adopt a reveal result and update the game status."""
        if result.hit_mine:
            self._grid = board.reveal_mines(result.grid)
            self._status = GameStatus.LOST
            return True

        self._grid = result.grid
        if board.check_win(self._grid, self.config.num_mines):
            self._status = GameStatus.WON
        return result.revealed_count > 0

    def reset(self, seed: Optional[int] = None) -> None:
        """Start a new game on the same configuration."""
        self.seed = seed
        self._grid = Grid.create_empty(self.config.rows, self.config.cols)
        self._status = GameStatus.READY
        self._armed = False

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def grid(self) -> Grid:
        """Current grid snapshot."""
        return self._grid

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_armed(self) -> bool:
        """Check if mines have been placed."""
        return self._armed

    @property
    def is_playing(self) -> bool:
        """Check if game accepts moves."""
        return not self.is_over

    @property
    def is_over(self) -> bool:
        return self._status in (GameStatus.WON, GameStatus.LOST)

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def mines_left(self) -> int:
        """Mines minus flags, never below zero."""
        return max(0, self.config.num_mines - board.count_flags(self._grid))

    @property
    def cells_revealed(self) -> int:
        return board.count_revealed(self._grid)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._grid.in_bounds(row, col):
            return None
        return self._grid.cell(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array of Cell.to_observation values.
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for cell in self._grid:
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Coord]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (row, col) positions that are hidden and unmarked.
        """
        return [(cell.row, cell.col) for cell in self._grid if cell.is_hidden]
