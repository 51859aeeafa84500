import pytest

from tictactoe.game.chains import count_run, find_connected_cell, is_highlighted
from tictactoe.game.grid import Grid

from tests.helpers import fill_grid


def test_count_run_stops_at_boundary_and_other_markers():
    grid = fill_grid(Grid(5), ["XXXOX"])

    assert count_run(grid, 0, 0, 0, 1, "X") == 2
    assert count_run(grid, 0, 0, 0, -1, "X") == 0
    assert count_run(grid, 0, 4, 0, -1, "X") == 0
    assert count_run(grid, 0, 4, 0, -1, "O") == 1


def test_count_run_respects_max_chain():
    grid = fill_grid(Grid(5), ["XXXXX"])

    assert count_run(grid, 0, 0, 0, 1, "X") == 4
    assert count_run(grid, 0, 0, 0, 1, "X", max_chain=2) == 2
    # The scan always looks at least one step
    assert count_run(grid, 0, 0, 0, 1, "X", max_chain=0) == 1


def test_isolated_marker_scores_nothing():
    grid = fill_grid(Grid(3), ["...",
                               ".X.",
                               "..."])
    cell = find_connected_cell(grid, 1, 1, "X")

    assert cell.total_connected == 0
    assert cell.chain_sum == 0
    assert not cell.has_chain()


def test_single_neighbour_is_a_chain_but_not_connected():
    grid = fill_grid(Grid(3), ["XX."])
    cell = find_connected_cell(grid, 0, 1, "X")

    assert cell.horizontal_chain == 1
    assert cell.total_connected == 0
    assert cell.has_chain()


def test_three_in_a_row_connects_three():
    grid = fill_grid(Grid(3), ["XXX"])

    for column in range(3):
        assert find_connected_cell(grid, 0, column, "X").total_connected == 3


def test_line_counted_once_from_the_middle():
    grid = fill_grid(Grid(5), [".....",
                               ".....",
                               "XX.XX"])
    cell = find_connected_cell(grid, 2, 2, "X")

    assert cell.horizontal_chain == 4
    assert cell.total_connected == 5


def test_axes_add_up_for_crossing_lines():
    grid = fill_grid(Grid(3), [".X.",
                               "X.X",
                               ".X."])
    cell = find_connected_cell(grid, 1, 1, "X")

    assert cell.vertical_chain == 2
    assert cell.horizontal_chain == 2
    assert cell.diagonal_left_chain == 0
    assert cell.diagonal_right_chain == 0
    assert cell.total_connected == 6
    assert cell.cell_number(3) == 4


def test_diagonals():
    grid = fill_grid(Grid(4), ["X..O",
                               ".XO.",
                               "....",
                               "O..X"])

    left = find_connected_cell(grid, 2, 2, "X")
    assert left.diagonal_left_chain == 3
    assert left.total_connected == 4

    right = find_connected_cell(grid, 2, 1, "O")
    assert right.diagonal_right_chain == 3
    assert right.total_connected == 4


def test_zig_zag_is_not_connected():
    grid = fill_grid(Grid(3), ["X.X",
                               "...",
                               "..."])
    # Two neighbours, but on two different axes
    cell = find_connected_cell(grid, 1, 1, "X")
    assert cell.chain_sum == 2
    assert cell.total_connected == 0


LAYOUT = ["XO.XX",
          "OXXO.",
          ".XOX.",
          "XX.OO",
          "O.XX."]


@pytest.mark.parametrize("row,column", [(r, c) for r in range(5) for c in range(5)])
def test_half_turn_rotation_keeps_axis_chains(row, column):
    grid = fill_grid(Grid(5), LAYOUT)
    rotated = fill_grid(Grid(5), [line[::-1] for line in reversed(LAYOUT)])

    for marker in "XO":
        original = find_connected_cell(grid, row, column, marker)
        turned = find_connected_cell(rotated, 4 - row, 4 - column, marker)

        assert turned.vertical_chain == original.vertical_chain
        assert turned.horizontal_chain == original.horizontal_chain
        assert turned.diagonal_left_chain == original.diagonal_left_chain
        assert turned.diagonal_right_chain == original.diagonal_right_chain
        assert turned.total_connected == original.total_connected


def test_highlight_only_for_lines_of_three():
    grid = fill_grid(Grid(4), ["XXX.",
                               "OO..",
                               "...."])

    assert all(is_highlighted(grid, 0, column) for column in range(3))
    assert not is_highlighted(grid, 1, 0)
    assert not is_highlighted(grid, 0, 3)
