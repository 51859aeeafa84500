"""
tictactoe - Multi-player console tic-tac-toe with Classic and Frenzy modes

This package provides the grid and chain detection engine, the turn and
scoring board for both game modes, a heuristic bot player, a gymnasium
environment, and the interactive console session.
"""

# Version number
__version__ = '0.1.0'
