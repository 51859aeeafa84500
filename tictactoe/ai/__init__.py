"""
tictactoe.ai - Bot decision making

This package provides the heuristic used by bot players to pick a cell.
"""

from tictactoe.ai.strategy import BotStrategy

__all__ = ['BotStrategy']
