"""
tictactoe.interfaces - User interfaces for the game

This package contains the console I/O wrapper and the interactive session.
"""

# Don't import anything here to avoid circular imports
__all__ = []
