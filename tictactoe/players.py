"""
players.py - Player identity, score and cell selection

A player is either a human, whose cell choice comes from the console, or a
bot, whose choice is computed by the BotStrategy. Both kinds share the same
identity and score fields, so the board never needs to know which is which.
"""

from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np

from tictactoe.debug import debug

if TYPE_CHECKING:
    from tictactoe.game.board import Board

# Asks a human for a cell number on the given board
HumanSelector = Callable[['Board'], int]


class PlayerKind(Enum):
    HUMAN = "Player"
    BOT = "Bot"


class Player:
    """A seat at the table: number, marker and running score."""

    def __init__(self, number: int, marker: str, kind: PlayerKind = PlayerKind.HUMAN):
        if number < 1:
            raise ValueError(f"Player number must start at 1, got {number}")
        if len(marker) != 1 or marker.isspace():
            raise ValueError(f"Marker must be a single visible character, got {marker!r}")

        self._number = number
        self._marker = marker
        self._kind = kind
        self._score = 0
        self._last_score = 0

    @classmethod
    def human(cls, number: int, marker: str) -> 'Player':
        return cls(number, marker, PlayerKind.HUMAN)

    @classmethod
    def bot(cls, number: int, marker: str) -> 'Player':
        return cls(number, marker, PlayerKind.BOT)

    @property
    def number(self) -> int:
        return self._number

    @property
    def marker(self) -> str:
        return self._marker

    @property
    def kind(self) -> PlayerKind:
        return self._kind

    @property
    def is_bot(self) -> bool:
        return self._kind == PlayerKind.BOT

    @property
    def name(self) -> str:
        return self._kind.value

    @property
    def label(self) -> str:
        """Display label such as 'Bot-2 (O)'."""
        return f"{self.name}-{self._number} ({self._marker})"

    @property
    def score(self) -> int:
        return self._score

    @property
    def last_score(self) -> int:
        return self._last_score

    @property
    def score_gained(self) -> int:
        """Points earned by the most recent score update."""
        return self._score - self._last_score

    def set_score(self, score: int) -> None:
        self._last_score = self._score
        self._score = score

    def reset(self) -> None:
        """Zero the score for a rematch."""
        self._score = 0
        self._last_score = 0

    def select_cell(self, board: 'Board',
                    human_selector: Optional[HumanSelector] = None,
                    rng: Optional[np.random.Generator] = None) -> int:
        """
        Choose the cell this player marks next.

        Args:
            board: The board being played
            human_selector: Console callback used for human players
            rng: Random source for the bot's fallback move

        Returns:
            The selected cell number
        """
        if self.is_bot:
            from tictactoe.ai.strategy import BotStrategy
            return BotStrategy(rng).select_cell(board, self)

        if human_selector is None:
            raise RuntimeError(f"{self.label} has no console to select a cell with")

        cell_number = human_selector(board)
        debug.debug(f"{self.label} entered cell {cell_number}", "game")
        return cell_number

    def __repr__(self) -> str:
        return f"Player(number={self._number}, marker={self._marker!r}, kind={self._kind.name}, score={self._score})"
