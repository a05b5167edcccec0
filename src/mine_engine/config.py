"""
Board configuration and difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict


# ============================================================================
# Constants
# ============================================================================

# Side length limits for custom boards
MIN_SIDE = 5
MAX_SIDE = 30


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 1:
            raise ValueError("Board needs at least one mine")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def get_difficulty(key: str) -> BoardConfig:
    """
    Look up a preset by name.

    Raises:
        KeyError: If the name is not a known preset.
    """
    try:
        return DIFFICULTIES[key]
    except KeyError:
        known = ", ".join(sorted(DIFFICULTIES))
        raise KeyError(f"Unknown difficulty '{key}' (known: {known})") from None


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def clamp_custom(rows: int, cols: int, mines: int) -> BoardConfig:
    """
    Build a custom configuration from arbitrary user input.

    Rows and columns are clamped to [MIN_SIDE, MAX_SIDE], then mines to
    [1, rows * cols - 1] of the clamped board.
    """
    rows = _clamp(rows, MIN_SIDE, MAX_SIDE)
    cols = _clamp(cols, MIN_SIDE, MAX_SIDE)
    return BoardConfig(rows, cols, _clamp(mines, 1, rows * cols - 1))
