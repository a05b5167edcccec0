"""
Minesweeper board engine.

Provides the grid model, mine placement, reveal/chord/mark rules and win
accounting, plus a game session and a Gymnasium environment on top.
"""
from .cell import Cell, CellState, MINE_SENTINEL
from .grid import Grid, Coord
from .rng import Mulberry32, RandomSource, create_seeded_rng
from .board import (
    RevealResult,
    place_mines,
    calculate_numbers,
    prepare_with_mines,
    reveal_cell,
    chord,
    toggle_mark,
    count_flags,
    count_revealed,
    check_win,
    reveal_mines,
)
from .config import (
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    get_difficulty,
    clamp_custom,
)
from .session import Game, GameStatus
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "MINE_SENTINEL",
    "Grid",
    "Coord",
    "Mulberry32",
    "RandomSource",
    "create_seeded_rng",
    "RevealResult",
    "place_mines",
    "calculate_numbers",
    "prepare_with_mines",
    "reveal_cell",
    "chord",
    "toggle_mark",
    "count_flags",
    "count_revealed",
    "check_win",
    "reveal_mines",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "get_difficulty",
    "clamp_custom",
    "Game",
    "GameStatus",
    "MinesweeperEnv",
]
