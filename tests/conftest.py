"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add project root (for main.py) and src to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from mine_engine import (
    BoardConfig,
    Cell,
    Game,
    Grid,
    calculate_numbers,
)


def build_grid(rows: int, cols: int, mines) -> Grid:
    """Create a grid with mines at the given positions and counts set."""
    grid = Grid.create_empty(rows, cols)
    for row, col in mines:
        grid.cells[row][col].is_mine = True
    return calculate_numbers(grid)


def revealed_positions(grid: Grid):
    """Set of (row, col) for every revealed cell."""
    return {(cell.row, cell.col) for cell in grid if cell.is_revealed}


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def empty_grid() -> Grid:
    """Create a 3x3 grid with no mines for cascade testing."""
    return build_grid(3, 3, [])


@pytest.fixture
def corner_mine_grid() -> Grid:
    """Create a 3x3 grid with a single mine at (0, 0)."""
    return build_grid(3, 3, [(0, 0)])


@pytest.fixture
def two_by_two_grid() -> Grid:
    """Create a 2x2 grid with a single mine at (0, 0)."""
    return build_grid(2, 2, [(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 9x9 game with 10 mines."""
    return Game()


@pytest.fixture
def seeded_game() -> Game:
    """Create a 5x5 game with 5 mines and a fixed layout seed."""
    return Game(BoardConfig(5, 5, 5), seed=123)


@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
