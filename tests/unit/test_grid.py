"""
Unit tests for the Grid model.
"""
import pytest
from mine_engine import Grid


class TestGridCreation:
    """Test empty grid construction."""

    def test_dimensions(self) -> None:
        """Grid should have requested rows and columns."""
        grid = Grid.create_empty(4, 7)
        assert grid.rows == 4
        assert grid.cols == 7
        assert grid.size == 28

    def test_cells_default(self) -> None:
        """All cells start hidden, unmarked and mine-free."""
        grid = Grid.create_empty(3, 3)
        for cell in grid:
            assert cell.is_hidden is True
            assert cell.is_mine is False
            assert cell.is_exploded is False
            assert cell.adjacent_mines == 0

    def test_cells_know_their_position(self) -> None:
        """Each cell's coordinates match its slot."""
        grid = Grid.create_empty(3, 4)
        for row in range(3):
            for col in range(4):
                cell = grid.cell(row, col)
                assert (cell.row, cell.col) == (row, col)

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3)])
    def test_non_positive_dimensions_raise(self, rows: int, cols: int) -> None:
        """Empty or negative dimensions are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            Grid.create_empty(rows, cols)

    def test_single_cell_grid(self) -> None:
        """A 1x1 grid is valid."""
        assert Grid.create_empty(1, 1).size == 1


class TestGridClone:
    """Test snapshot copying."""

    def test_clone_is_equal(self) -> None:
        """Clone has the same contents."""
        grid = Grid.create_empty(3, 3)
        assert grid.clone() == grid

    def test_clone_is_independent(self) -> None:
        """Changing the clone leaves the original alone."""
        grid = Grid.create_empty(3, 3)
        copy = grid.clone()
        copy.cell(1, 1).is_mine = True
        copy.cell(1, 1).reveal()
        assert grid.cell(1, 1).is_mine is False
        assert grid.cell(1, 1).is_hidden is True
        assert copy.cell(1, 1) is not grid.cell(1, 1)


class TestNeighbors:
    """Test neighbor enumeration."""

    def test_center_has_eight_in_row_major_order(self) -> None:
        """Interior cell lists its eight neighbors row by row."""
        grid = Grid.create_empty(3, 3)
        assert grid.neighbors(1, 1) == [
            (0, 0), (0, 1), (0, 2),
            (1, 0), (1, 2),
            (2, 0), (2, 1), (2, 2),
        ]

    def test_corner_is_clipped(self) -> None:
        """Corner cell has three neighbors, no wraparound."""
        grid = Grid.create_empty(3, 3)
        assert grid.neighbors(0, 0) == [(0, 1), (1, 0), (1, 1)]
        assert grid.neighbors(2, 2) == [(1, 1), (1, 2), (2, 1)]

    def test_edge_has_five(self) -> None:
        """Edge cell has five neighbors."""
        grid = Grid.create_empty(3, 3)
        assert len(grid.neighbors(0, 1)) == 5

    def test_single_cell_has_none(self) -> None:
        """A 1x1 grid has no neighbors."""
        assert Grid.create_empty(1, 1).neighbors(0, 0) == []

    def test_out_of_bounds_cell_access_raises(self) -> None:
        """Reading outside the grid raises IndexError."""
        grid = Grid.create_empty(3, 3)
        with pytest.raises(IndexError):
            grid.cell(3, 0)
        with pytest.raises(IndexError):
            grid.cell(0, -1)
