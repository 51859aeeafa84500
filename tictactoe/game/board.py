"""
board.py - Turn, scoring and completion state for a game

This module implements the Board class which owns the grid, rotates turns
between players, scores every placement from the chains it creates, and
decides when a game is over and who won. The Classic and Frenzy modes share
all of this and differ only in the completion predicate and grid sizing.
"""

import numpy as np
from typing import Callable, Dict, List, Optional, Sequence

from tictactoe.debug import debug
from tictactoe.game.chains import ConnectedCell, find_connected_cell, is_highlighted
from tictactoe.game.grid import Grid
from tictactoe.players import Player
from tictactoe.utils import GameMode, GameResult, MIN_GRID_SIZE, MIN_PLAYERS, TextColor


def _classic_completed(board: 'Board') -> bool:
    # First player to connect ends the game
    return board.grid.is_full() or any(player.score > 0 for player in board.players)


def _frenzy_completed(board: 'Board') -> bool:
    return board.grid.is_full()


COMPLETION_PREDICATES: Dict[GameMode, Callable[['Board'], bool]] = {
    GameMode.CLASSIC: _classic_completed,
    GameMode.FRENZY: _frenzy_completed,
}


class Board:
    """
    Represents one game of the chosen mode.

    The player list is fixed at construction and turn order follows it. Only
    the players' scores change while the board is in use.
    """

    def __init__(self, players: Sequence[Player], mode: GameMode = GameMode.CLASSIC,
                 grid_size: Optional[int] = None):
        """
        Initialize a board.

        Args:
            players: Players in turn order, numbered 1..n
            mode: Game mode deciding the completion rule
            grid_size: Grid size (Frenzy only, Classic derives it from the player count)
        """
        self._validate_players(players)

        default_size = mode.default_grid_size(len(players))
        if mode == GameMode.CLASSIC and grid_size is not None and grid_size != default_size:
            raise ValueError(f"Classic grid size is fixed at {default_size} for {len(players)} players")
        if grid_size is None:
            grid_size = default_size
        if grid_size < MIN_GRID_SIZE:
            raise ValueError(f"Grid size must be at least {MIN_GRID_SIZE}, got {grid_size}")

        self._players: List[Player] = list(players)
        self._mode = mode
        self._grid = Grid(grid_size)
        self._player_turn: Optional[Player] = None

        debug.debug(f"Initialized {mode.title} board {grid_size}x{grid_size} "
                    f"with {len(self._players)} players", "board")

    @staticmethod
    def _validate_players(players: Sequence[Player]) -> None:
        if len(players) < MIN_PLAYERS:
            raise ValueError(f"At least {MIN_PLAYERS} players are required, got {len(players)}")

        markers = [player.marker for player in players]
        if len(set(markers)) != len(markers):
            raise ValueError(f"Player markers must be unique, got {markers}")

        for index, player in enumerate(players):
            if player.number != index + 1:
                raise ValueError(f"Player at seat {index} must be number {index + 1}, got {player.number}")

    @property
    def players(self) -> List[Player]:
        return self._players

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def grid_size(self) -> int:
        return self._grid.size

    @property
    def player_turn(self) -> Optional[Player]:
        return self._player_turn

    # Position helpers, delegated to the grid
    def column_by_cell_number(self, cell_number: int) -> int:
        return self._grid.column_of(cell_number)

    def row_by_cell_number(self, cell_number: int) -> int:
        return self._grid.row_of(cell_number)

    def cell_number_by_position(self, row: int, column: int) -> int:
        return self._grid.cell_number_of(row, column)

    def find_available_cell_numbers(self) -> List[int]:
        return self._grid.available_cells()

    def find_connected_cell(self, row: int, column: int, target_marker: str,
                            max_chain: Optional[int] = None) -> ConnectedCell:
        return find_connected_cell(self._grid, row, column, target_marker, max_chain)

    def is_cell_selectable(self, cell_number: int) -> bool:
        """Check a cell number is on the grid and still empty."""
        if not self._grid.is_valid_cell_number(cell_number):
            return False

        row = self._grid.row_of(cell_number)
        column = self._grid.column_of(cell_number)
        return self._grid.is_valid_position(row, column) and self._grid.is_empty(row, column)

    def is_completed(self) -> bool:
        return COMPLETION_PREDICATES[self._mode](self)

    def mark_cell_by_number(self, cell_number: int, marker: str) -> bool:
        """
        Place a marker for the current player and score it.

        Args:
            cell_number: Cell to mark
            marker: Marker to place

        Returns:
            True if the cell was marked, False if the move was rejected
        """
        if self._player_turn is None:
            debug.warning(f"Rejected mark on cell {cell_number}: no player turn set", "board")
            return False

        if not self.is_cell_selectable(cell_number):
            debug.warning(f"Rejected mark on cell {cell_number} by {self._player_turn.label}", "board")
            return False

        row = self._grid.row_of(cell_number)
        column = self._grid.column_of(cell_number)
        self._grid.place(row, column, marker)

        total_connected = self.find_connected_cell(row, column, marker).total_connected
        self._player_turn.set_score(self._player_turn.score + total_connected)

        debug.debug(f"{self._player_turn.label} marked cell {cell_number} (+{total_connected})", "board")
        if self.is_completed():
            debug.info(f"{self._mode.title} game completed: {self.result().name}", "board")
        return True

    def toggle_player_turn(self, rng: Optional[np.random.Generator] = None) -> Player:
        """
        Advance the turn to the next player.

        The first call after construction or reset picks a random player;
        later calls rotate through the player list in order.

        Args:
            rng: Random source for the first pick

        Returns:
            The player whose turn it is now
        """
        if self._player_turn is None:
            rng = rng if rng is not None else np.random.default_rng()
            index = int(rng.integers(len(self._players)))
        else:
            index = self._player_turn.number % len(self._players)

        self._player_turn = self._players[index]
        debug.debug(f"Switching to {self._player_turn.label}", "board")
        return self._player_turn

    def reset(self) -> None:
        """Clear the grid, the turn and all scores for a rematch."""
        debug.debug("Resetting board", "board")
        self._grid.reset()
        self._player_turn = None

        for player in self._players:
            player.reset()

    def winner(self) -> Optional[Player]:
        """
        Get the player with the strictly highest score.

        Returns:
            The winning player, or None when the top score is shared
        """
        top_player = None
        top_score = 0

        for player in self._players:
            if player.score > top_score:
                top_player = player
                top_score = player.score
            elif player.score == top_score:
                # Shared top score means nobody wins
                top_player = None

        return top_player

    def result(self) -> GameResult:
        if not self.is_completed():
            return GameResult.IN_PROGRESS
        return GameResult.WIN if self.winner() is not None else GameResult.DRAW

    # Text rendering
    def score_text(self) -> str:
        lines = ["Score: "]
        lines.extend(f"{player.label}: {player.score}" for player in self._players)
        return "\n".join(lines) + "\n"

    def grid_layout_text(self, color: bool = True) -> str:
        """
        Render the grid, showing cell numbers in empty cells.

        Args:
            color: Highlight markers that are part of a connected line

        Returns:
            Multi-line text of the grid
        """
        size = self._grid.size
        # Each cell is 2 wide, plus 2 spaces and a pipe
        separator = "-----" * size + "-\n"
        text = ""

        for row in range(size):
            text += separator + "| "
            for column in range(size):
                marker = self._grid.marker_at(row, column)
                shown = marker or str(self._grid.cell_number_of(row, column))

                if color and is_highlighted(self._grid, row, column):
                    text += f"{TextColor.CYAN}{shown:>2}{TextColor.DEFAULT} | "
                else:
                    text += f"{shown:>2} | "
            text += "\n"

        return text + separator

    def player_turn_text(self) -> str:
        if self._player_turn is None:
            raise RuntimeError("Player turn hasn't been set.")
        return f"{self._player_turn.label} turn...\n"

    def result_text(self) -> str:
        winner = self.winner()
        if winner is None:
            return "Game over! The game ends with draw.\n"
        return f"Game over! {winner.label} has won!\n"

    def render(self) -> str:
        return self.grid_layout_text(color=False)

    def __str__(self) -> str:
        return self.render()
