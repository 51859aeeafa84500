"""
chains.py - Run detection around a cell

This module measures how a marker placed on a cell lines up with the same
marker around it. Runs are counted per direction and then summed per axis
(top + bottom, left + right, and the two diagonals) so a single line is never
counted twice from opposite ends, and zig-zags never count as connected.

Example: placing x between x1 and x2 gives a horizontal chain of 2,

    [ x1 ][ x ][ x2 ]

which is worth three connected cells once the cell itself is included.
"""

from typing import NamedTuple, Optional

from tictactoe.game.grid import Grid
from tictactoe.utils import Axis, DIRECTION_VECTORS, CONNECT_N


class ConnectedCell(NamedTuple):
    """Chain lengths around one cell for one marker."""
    row: int
    column: int
    vertical_chain: int
    horizontal_chain: int
    diagonal_left_chain: int
    diagonal_right_chain: int
    total_connected: int

    @property
    def chain_sum(self) -> int:
        """Sum of the four axis chains, used as a ranking tie-break."""
        return (self.vertical_chain + self.horizontal_chain
                + self.diagonal_left_chain + self.diagonal_right_chain)

    def has_chain(self) -> bool:
        """True when at least one neighbouring cell already matches."""
        return self.chain_sum > 0

    def cell_number(self, grid_size: int) -> int:
        return self.row * grid_size + self.column

    def same_position(self, other: 'ConnectedCell') -> bool:
        return self.row == other.row and self.column == other.column


def count_run(grid: Grid, row: int, column: int, delta_row: int, delta_column: int,
              target_marker: str, max_chain: Optional[int] = None) -> int:
    """
    Count consecutive target markers starting one step away from a cell.

    Args:
        grid: The grid to scan
        row: Row of the reference cell
        column: Column of the reference cell
        delta_row: Row step of the direction
        delta_column: Column step of the direction
        target_marker: Marker to match
        max_chain: Stop once this many matches are found (None for unbounded)

    Returns:
        Number of matching cells before a boundary or a different marker
    """
    chain = 0

    while True:
        row += delta_row
        column += delta_column

        if not grid.is_valid_position(row, column) or grid.marker_at(row, column) != target_marker:
            break

        chain += 1
        if max_chain is not None and chain >= max_chain:
            break

    return chain


def axis_chain(grid: Grid, row: int, column: int, axis: Axis,
               target_marker: str, max_chain: Optional[int] = None) -> int:
    """Sum the runs in both directions of an axis."""
    return sum(count_run(grid, row, column, *DIRECTION_VECTORS[direction], target_marker, max_chain)
               for direction in axis.value)


def find_connected_cell(grid: Grid, row: int, column: int, target_marker: str,
                        max_chain: Optional[int] = None) -> ConnectedCell:
    """
    Compute the chains around a cell as if it held the target marker.

    An axis only contributes to the total when its summed chain is at least 2,
    and then contributes chain + 1 to include the cell itself.

    Args:
        grid: The grid to scan
        row: Row of the cell
        column: Column of the cell
        target_marker: Marker placed (or hypothetically placed) on the cell
        max_chain: Per-direction scan limit (None for unbounded)

    Returns:
        The ConnectedCell for that position
    """
    chains = {axis: axis_chain(grid, row, column, axis, target_marker, max_chain) for axis in Axis}
    total = sum(chain + 1 for chain in chains.values() if chain >= CONNECT_N - 1)

    return ConnectedCell(
        row=row,
        column=column,
        vertical_chain=chains[Axis.VERTICAL],
        horizontal_chain=chains[Axis.HORIZONTAL],
        diagonal_left_chain=chains[Axis.DIAGONAL_LEFT],
        diagonal_right_chain=chains[Axis.DIAGONAL_RIGHT],
        total_connected=total,
    )


def is_highlighted(grid: Grid, row: int, column: int) -> bool:
    """True when the marker on a cell is part of a line of at least three."""
    marker = grid.marker_at(row, column)
    if not marker:
        return False

    return find_connected_cell(grid, row, column, marker, max_chain=CONNECT_N).total_connected >= CONNECT_N
