"""
tictactoe.game - Core game mechanics

This package contains the grid, chain detection and the board with its turn
and scoring rules. The game flow lives in tictactoe.game.rules.
"""

from tictactoe.game.grid import Grid
from tictactoe.game.chains import ConnectedCell, count_run, find_connected_cell
from tictactoe.game.board import Board

# rules depends on the bot strategy, which depends on this package, so it is
# not imported here
__all__ = ['Grid', 'ConnectedCell', 'count_run', 'find_connected_cell', 'Board']
