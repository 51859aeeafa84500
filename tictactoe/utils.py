"""
utils.py - Constants and enumerations for the tic-tac-toe game

This module provides the shared constants, game mode definitions and direction
tables used throughout the game, bot and console implementation.
"""

from enum import Enum, auto
from typing import Dict, Tuple

# Game constants
MIN_GRID_SIZE = 3
MIN_PLAYERS = 2
CONNECT_N = 3  # Cells in a line needed to score
EMPTY = ""     # Marker of an unmarked cell


class TextColor:
    """ANSI color codes used when rendering the grid."""
    DEFAULT = "\033[0m"
    CYAN = "\033[96m"


class GameMode(Enum):
    """The two game variants. They differ only in completion rule and grid sizing."""
    CLASSIC = 1
    FRENZY = 2

    @property
    def title(self) -> str:
        return self.name.capitalize()

    @property
    def description(self) -> str:
        if self == GameMode.CLASSIC:
            return "Connect three characters to win the game.\n"
        return ("Connect three or more characters to earn points.\n"
                "The one with the most points wins.\n")

    def header(self) -> str:
        """Title, underline and description as shown above every screen."""
        return f"{self.title}\n{'-' * len(self.title)}\n{self.description}"

    def default_grid_size(self, num_players: int) -> int:
        """Classic grows with the player count; Frenzy starts from the minimum."""
        if self == GameMode.CLASSIC:
            return num_players + 1
        return MIN_GRID_SIZE


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    WIN = auto()
    DRAW = auto()


class Direction(Enum):
    """Single-step scan directions on the grid."""
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()


# Direction vectors (delta_row, delta_column) for each direction
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.TOP: (-1, 0),
    Direction.BOTTOM: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.TOP_LEFT: (-1, -1),
    Direction.TOP_RIGHT: (-1, 1),
    Direction.BOTTOM_LEFT: (1, -1),
    Direction.BOTTOM_RIGHT: (1, 1),
}


class Axis(Enum):
    """Lines through a cell, each made of two opposite directions."""
    VERTICAL = (Direction.TOP, Direction.BOTTOM)
    HORIZONTAL = (Direction.LEFT, Direction.RIGHT)
    DIAGONAL_LEFT = (Direction.TOP_LEFT, Direction.BOTTOM_RIGHT)
    DIAGONAL_RIGHT = (Direction.TOP_RIGHT, Direction.BOTTOM_LEFT)
