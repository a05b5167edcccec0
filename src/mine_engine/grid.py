"""
Grid module for the Minesweeper board engine.

A grid is a rectangular snapshot of cells. Engine operations never
mutate a grid they receive; they clone it and return the new snapshot.
"""
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Tuple

from .cell import Cell


Coord = Tuple[int, int]


@dataclass
class Grid:
    """
    Rectangular snapshot of Minesweeper cells, indexed by (row, col).

    Attributes:
        cells: Row-major list of rows.
    """

    cells: List[List[Cell]] = field(default_factory=list)

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def create_empty(cls, rows: int, cols: int) -> "Grid":
        """
        Create a grid with no mines and every cell hidden and unmarked.

        Raises:
            ValueError: If either dimension is below 1.
        """
        if rows < 1 or cols < 1:
            raise ValueError("Grid dimensions must be positive")
        return cls([
            [Cell(row, col) for col in range(cols)]
            for row in range(rows)
        ])

    def clone(self) -> "Grid":
        """Deep value copy; the original snapshot is left untouched."""
        return Grid([[replace(cell) for cell in row] for row in self.cells])

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Coord]:
        """
        Get valid neighboring cell positions.

        Order is row-major over the (delta_row, delta_col) offsets, which
        keeps flood fill and chord results reproducible.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If position is outside the grid.
        """
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Position ({row}, {col}) outside {self.rows}x{self.cols} grid"
            )
        return self.cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row
