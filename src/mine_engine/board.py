"""
Board engine for Minesweeper.

Implements mine placement, adjacency counts, flood-fill reveal, chording,
the mark cycle and win/flag accounting as functions from one grid
snapshot to the next. Game status is tracked by the caller.
"""
import math
import random
from collections import deque
from dataclasses import dataclass
from typing import Optional

from .cell import MINE_SENTINEL, CellState
from .grid import Coord, Grid
from .rng import RandomSource, create_seeded_rng


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a reveal or chord.

    Attributes:
        grid: New grid snapshot.
        hit_mine: Whether a mine was revealed.
        revealed_count: Number of cells newly revealed.
    """

    grid: Grid
    hit_mine: bool = False
    revealed_count: int = 0


def _require_in_bounds(grid: Grid, row: int, col: int) -> None:
    if not grid.in_bounds(row, col):
        raise IndexError(
            f"Position ({row}, {col}) outside {grid.rows}x{grid.cols} grid"
        )


# ============================================================================
# Mine Placement and Adjacency
# ============================================================================

def place_mines(
    grid: Grid,
    mine_count: int,
    avoid: Optional[Coord] = None,
    rng: Optional[RandomSource] = None,
) -> Grid:
    """
    Place mines at random positions, keeping one cell mine-free.

    Uses a partial Fisher-Yates shuffle over the linear indices of all
    candidate cells, then recomputes adjacency counts.

    Args:
        grid: Grid to place mines on (not modified).
        mine_count: Number of mines to place.
        avoid: (row, col) position to keep mine-free, usually the first click.
        rng: Source of floats in [0, 1); defaults to random.random.

    Returns:
        New grid with mines and adjacency counts.

    Raises:
        ValueError: If mine_count is not in (0, rows * cols).
        IndexError: If avoid is outside the grid.
    """
    if avoid is not None:
        avoid = tuple(avoid)
        _require_in_bounds(grid, *avoid)

    max_mines = grid.size - 1
    if not 0 < mine_count <= max_mines:
        raise ValueError(
            f"Mine count must be between 1 and {max_mines}, got {mine_count}"
        )

    available = [
        index for index in range(grid.size)
        if divmod(index, grid.cols) != avoid
    ]

    random_float = rng or random.random
    for i in range(mine_count):
        j = i + math.floor(random_float() * (len(available) - i))
        available[i], available[j] = available[j], available[i]

    next_grid = grid.clone()
    for index in available[:mine_count]:
        row, col = divmod(index, grid.cols)
        next_grid.cells[row][col].is_mine = True
    return calculate_numbers(next_grid)


def calculate_numbers(grid: Grid) -> Grid:
    """Return a new grid with adjacency counts set on every cell."""
    next_grid = grid.clone()
    for cell in next_grid:
        if cell.is_mine:
            cell.adjacent_mines = MINE_SENTINEL
            continue
        cell.adjacent_mines = sum(
            1 for row, col in grid.neighbors(cell.row, cell.col)
            if grid.cells[row][col].is_mine
        )
    return next_grid


def prepare_with_mines(
    rows: int,
    cols: int,
    mine_count: int,
    first_click: Coord,
    seed: Optional[int] = None,
) -> Grid:
    """
    Create an armed grid in one call.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Number of mines to place.
        first_click: (row, col) that must be safe.
        seed: Seed for a reproducible layout; random when omitted.
    """
    rng = create_seeded_rng(seed) if seed is not None else None
    return place_mines(Grid.create_empty(rows, cols), mine_count, first_click, rng)


# ============================================================================
# Reveal and Chord
# ============================================================================

def reveal_cell(grid: Grid, row: int, col: int) -> RevealResult:
    """
    Reveal a cell, flood-filling outward from zero-count cells.

    Revealed or marked cells are left alone. A mine is revealed and
    marked exploded with no flood fill.

    Args:
        grid: Current snapshot (not modified).
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        RevealResult with the new snapshot.
    """
    _require_in_bounds(grid, row, col)
    next_grid = grid.clone()
    start = next_grid.cells[row][col]

    if not start.is_hidden:
        return RevealResult(next_grid)

    if start.is_mine:
        start.reveal()
        start.is_exploded = True
        return RevealResult(next_grid, hit_mine=True, revealed_count=1)

    return RevealResult(next_grid, revealed_count=_flood_fill(next_grid, row, col))


def _flood_fill(grid: Grid, row: int, col: int) -> int:
    """Breadth-first reveal in place; marked cells block the fill."""
    queue = deque([(row, col)])
    visited = {(row, col)}
    revealed = 0

    while queue:
        current_row, current_col = queue.popleft()
        cell = grid.cells[current_row][current_col]
        if not cell.reveal():
            continue
        revealed += 1

        if cell.adjacent_mines == 0:
            for neighbor in grid.neighbors(current_row, current_col):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

    return revealed


def chord(grid: Grid, row: int, col: int) -> RevealResult:
    """
    Chord action: reveal all unflagged neighbors if flag count matches.

    Neighbors are revealed one after another, each on the snapshot left
    by the previous one, so overlapping flood fills never double-count.

    Args:
        grid: Current snapshot (not modified).
        row: Row index of a revealed numbered cell.
        col: Column index of a revealed numbered cell.

    Returns:
        RevealResult accumulated over all neighbor reveals.
    """
    _require_in_bounds(grid, row, col)
    start = grid.cells[row][col]
    if not start.is_revealed or start.adjacent_mines <= 0:
        return RevealResult(grid.clone())

    neighbors = grid.neighbors(row, col)
    flag_count = _count_flagged(grid, neighbors)
    if flag_count != start.adjacent_mines:
        return RevealResult(grid.clone())

    next_grid = grid.clone()
    revealed = 0
    hit_mine = False
    for neighbor_row, neighbor_col in neighbors:
        neighbor = next_grid.cells[neighbor_row][neighbor_col]
        if neighbor.is_flagged or neighbor.is_revealed:
            continue
        result = reveal_cell(next_grid, neighbor_row, neighbor_col)
        next_grid = result.grid
        revealed += result.revealed_count
        hit_mine = hit_mine or result.hit_mine

    return RevealResult(next_grid, hit_mine=hit_mine, revealed_count=revealed)


def _count_flagged(grid: Grid, positions) -> int:
    return sum(1 for row, col in positions if grid.cells[row][col].is_flagged)


# ============================================================================
# Marks and Accounting
# ============================================================================

def toggle_mark(grid: Grid, row: int, col: int) -> Grid:
    """Cycle a hidden cell through flagged, question and unmarked."""
    _require_in_bounds(grid, row, col)
    next_grid = grid.clone()
    next_grid.cells[row][col].cycle_mark()
    return next_grid


def count_flags(grid: Grid) -> int:
    """Count flagged cells."""
    return sum(1 for cell in grid if cell.is_flagged)


def count_revealed(grid: Grid) -> int:
    """Count revealed cells."""
    return sum(1 for cell in grid if cell.is_revealed)


def check_win(grid: Grid, mine_count: int) -> bool:
    """Check if every non-mine cell is revealed. Flags are ignored."""
    return count_revealed(grid) == grid.size - mine_count


def reveal_mines(grid: Grid) -> Grid:
    """
    Show every mine after a loss.

    Hidden and question-marked mines are revealed; flagged mines keep
    their flag so correct flags stay visible.
    """
    next_grid = grid.clone()
    for cell in next_grid:
        if cell.is_mine and not cell.is_flagged:
            cell.state = CellState.REVEALED
    return next_grid
