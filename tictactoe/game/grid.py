"""
grid.py - Square grid of cell markers

This module implements the Grid class which stores the marker placed on each
cell and converts between (row, column) positions and cell numbers. Cells are
numbered row-major starting at 0, so cell_number = row * size + column.
"""

import numpy as np
from typing import List

from tictactoe.debug import debug
from tictactoe.utils import EMPTY, MIN_GRID_SIZE


class Grid:
    """
    An N x N matrix of single-character markers.

    An empty cell holds the empty string. The grid does not know about players
    or turns; the Board decides whether a placement is allowed.
    """

    def __init__(self, size: int):
        if size < MIN_GRID_SIZE:
            raise ValueError(f"Grid size must be at least {MIN_GRID_SIZE}, got {size}")

        self._size = size
        self.reset()

    @property
    def size(self) -> int:
        return self._size

    @property
    def cell_count(self) -> int:
        return self._size * self._size

    def reset(self) -> None:
        """Clear every cell."""
        debug.trace(f"Resetting {self._size}x{self._size} grid", "grid")
        self._cells = np.full((self._size, self._size), EMPTY, dtype='<U1')

    def copy(self) -> 'Grid':
        new_grid = Grid(self._size)
        new_grid._cells = self._cells.copy()
        return new_grid

    def column_of(self, cell_number: int) -> int:
        return cell_number % self._size

    def row_of(self, cell_number: int) -> int:
        return cell_number // self._size

    def cell_number_of(self, row: int, column: int) -> int:
        return row * self._size + column

    def is_valid_position(self, row: int, column: int) -> bool:
        return 0 <= row < self._size and 0 <= column < self._size

    def is_valid_cell_number(self, cell_number: int) -> bool:
        return 0 <= cell_number < self.cell_count

    def marker_at(self, row: int, column: int) -> str:
        return str(self._cells[row, column])

    def is_empty(self, row: int, column: int) -> bool:
        return self._cells[row, column] == EMPTY

    def place(self, row: int, column: int, marker: str) -> None:
        """Write a marker without any rule checks."""
        self._cells[row, column] = marker

    def available_cells(self) -> List[int]:
        """
        Get the numbers of all unmarked cells.

        Returns:
            Cell numbers in ascending (row-major) order
        """
        return [int(cell) for cell in np.flatnonzero(self._cells == EMPTY)]

    def is_full(self) -> bool:
        return not np.any(self._cells == EMPTY)

    def as_array(self) -> np.ndarray:
        """Get a copy of the underlying marker array."""
        return self._cells.copy()

    def __iter__(self):
        """Iterate over (row, column, marker) in row-major order."""
        for row in range(self._size):
            for column in range(self._size):
                yield row, column, str(self._cells[row, column])
