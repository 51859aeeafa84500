"""
cli.py - Interactive console session

This module provides the menus and prompts of the game: choosing a mode,
setting up players, reading human moves, showing the board after every move
and offering a rematch when a game is over. Invalid input is never an error
here; the prompt is shown again with a short message.
"""

import re
from enum import Enum, auto
from typing import Dict, List, Optional

import numpy as np

from tictactoe.debug import debug
from tictactoe.game.board import Board
from tictactoe.game.rules import MoveRecord, TicTacToeGame
from tictactoe.interfaces.console import Console
from tictactoe.players import Player
from tictactoe.utils import GameMode, MIN_GRID_SIZE, MIN_PLAYERS

MAIN_MENU = (
    "Tic-Tac-Toe\n"
    "-----------\n"
    "1. Classic\n"
    "2. Frenzy\n"
)

# ASCII digits only; int() would also take "1_0" and non-Latin digits
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class RetainedTextKey(Enum):
    """Text blocks redrawn at the top of every screen."""
    MAIN_MENU = auto()
    GAME_MODE_HEADER = auto()
    SELECTED_CELL_HISTORY = auto()


def parse_int(line: str) -> Optional[int]:
    """Parse a whole line as a decimal integer, None if it is anything else."""
    text = line.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


class GameSession:
    """The interactive game: menus, setup, turns and rematches."""

    def __init__(self, console: Optional[Console] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the session.

        Args:
            console: Terminal I/O (a stdin/stdout console if None)
            rng: Random source shared by turn picks and bots
        """
        self.console = console or Console()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.retained_text: Dict[RetainedTextKey, str] = {}
        self.game: Optional[TicTacToeGame] = None

    @property
    def board(self) -> Optional[Board]:
        return self.game.board if self.game else None

    def _text(self, key: RetainedTextKey) -> str:
        return self.retained_text.get(key, "")

    def _redraw(self, *blocks: str) -> None:
        self.console.clear_screen()
        self.console.render("".join(blocks))

    # Setup prompts
    def require_game_mode(self) -> TicTacToeGame:
        """
        Ask for a game mode and set up a new game for it.

        Returns:
            A started game, with the first turn already picked
        """
        self.retained_text[RetainedTextKey.MAIN_MENU] = MAIN_MENU
        self._redraw(MAIN_MENU, "\n")

        while True:
            choice = parse_int(self.console.prompt_line("Select game mode: "))
            self.console.render("\n")

            if choice in (mode.value for mode in GameMode):
                mode = GameMode(choice)
                break

            self._redraw(MAIN_MENU, "\n** Invalid game mode, please reselect!\n")

        debug.info(f"Selected {mode.title} mode", "cli")
        self.retained_text[RetainedTextKey.GAME_MODE_HEADER] = mode.header()

        grid_size = self.require_grid_size() if mode == GameMode.FRENZY else None
        players = self.require_players()

        self.game = TicTacToeGame(Board(players, mode, grid_size), self.require_cell_selection, self.rng)
        self.game.start()
        return self.game

    def require_grid_size(self) -> int:
        header = self._text(RetainedTextKey.GAME_MODE_HEADER)
        self._redraw(header, "\n")

        while True:
            grid_size = parse_int(self.console.prompt_line(f"Input grid size (min {MIN_GRID_SIZE}): "))
            self.console.render("\n")

            if grid_size is not None and grid_size >= MIN_GRID_SIZE:
                return grid_size

            self._redraw(header, "\n** Invalid grid size, please reinput!\n")

    def require_players(self) -> List[Player]:
        """
        Ask for the number of players, then a marker and type for each.

        Returns:
            Players numbered from 1 in setup order
        """
        header = self._text(RetainedTextKey.GAME_MODE_HEADER)
        self._redraw(header, "\n")

        while True:
            line = self.console.prompt_line(f"Input number of players (min {MIN_PLAYERS}): ")
            self._redraw(header)

            total_players = parse_int(line)
            if total_players is not None and total_players >= MIN_PLAYERS:
                break
            self.console.render("\n** Invalid number of players, please reinput!\n")

        players: List[Player] = []

        def ready_players_text() -> str:
            ready = "".join(f"{player.label} is ready!\n" for player in players)
            return f"{len(players)}/{total_players} Players are set.\n" + (f"\n{ready}" if ready else "")

        def setup_player_text() -> str:
            return f"\nSetting up player-{len(players) + 1}...\n"

        self.console.render("\n" + ready_players_text() + setup_player_text())

        while len(players) < total_players:
            marker = self._require_marker(players, header, ready_players_text, setup_player_text)
            is_bot = self._require_is_bot(marker, header, ready_players_text, setup_player_text)

            number = len(players) + 1
            players.append(Player.bot(number, marker) if is_bot else Player.human(number, marker))
            debug.debug(f"Set up {players[-1].label}", "cli")

            self._redraw(header, "\n", ready_players_text())
            if len(players) < total_players:
                self.console.render(setup_player_text())

        self.console.prompt_line("\nInput anything to start...")
        self.console.render("\n")
        return players

    def _require_marker(self, players, header, ready_players_text, setup_player_text) -> str:
        used_markers = {player.marker for player in players}

        while True:
            line = self.console.prompt_line("Marker: (1 char) ")
            self._redraw(header, "\n", ready_players_text(), setup_player_text())

            if len(line) == 1 and not line.isspace() and line not in used_markers:
                self.console.render(f"Marker: {line}\n")
                return line

            self.console.render("\n** Invalid marker, please reinput!\n")

    def _require_is_bot(self, marker, header, ready_players_text, setup_player_text) -> bool:
        while True:
            line = self.console.prompt_line("As a bot? (y/n): ").strip().lower()
            self._redraw(header, "\n", ready_players_text(), setup_player_text(), f"Marker: {marker}\n")

            if line in YES_ANSWERS:
                return True
            if line in NO_ANSWERS:
                return False

            self.console.render("\n** Invalid player option, please reselect!\n")

    # In-game prompts
    def _board_screen(self, board: Board) -> str:
        return (self._text(RetainedTextKey.GAME_MODE_HEADER) + "\n"
                + self._text(RetainedTextKey.SELECTED_CELL_HISTORY)
                + board.score_text() + "\n"
                + board.grid_layout_text() + "\n")

    def require_cell_selection(self, board: Board) -> int:
        """
        Ask the current human player for a cell until a free one is given.

        Args:
            board: The board being played

        Returns:
            A selectable cell number
        """
        self._redraw(self._board_screen(board), board.player_turn_text())

        while True:
            cell_number = parse_int(self.console.prompt_line("Select cell by number: "))
            self.console.render("\n")

            if cell_number is not None and board.is_cell_selectable(cell_number):
                return cell_number

            debug.debug(f"Rejected cell input {cell_number}", "cli")
            self._redraw(self._board_screen(board), board.player_turn_text(),
                         "\n** Invalid cell number, please reselect!\n")

    def require_rematch(self) -> bool:
        line = self.console.prompt_line("Rematch? (y/n) ")
        self.console.render("\n")
        return line.strip().lower() in YES_ANSWERS

    # Game loop
    def show_move(self, record: MoveRecord) -> None:
        """Append a move to the history and redraw the board."""
        debug.debug(record.text(), "cli")
        self.retained_text[RetainedTextKey.SELECTED_CELL_HISTORY] = self.game.history_text() + "\n"
        self._redraw(self._board_screen(self.game.board))

    def finish_game(self) -> bool:
        """
        Show the result and reset the board for the next game.

        Returns:
            True if the players want a rematch
        """
        self.console.render(self.board.result_text() + "\n")
        debug.info(f"Game finished: {self.board.result_text().strip()}", "cli")

        self.game.rematch()
        self.retained_text[RetainedTextKey.SELECTED_CELL_HISTORY] = ""

        if self.require_rematch():
            return True

        self.retained_text.clear()
        return False

    def play_round(self) -> None:
        """Play turns until the current game is completed."""
        while not self.game.is_game_over():
            self.show_move(self.game.play_turn())

    def run(self, max_games: Optional[int] = None) -> None:
        """
        Run the session loop.

        Args:
            max_games: Stop after this many completed games (None to run until input ends)
        """
        games_played = 0
        self.require_game_mode()

        while max_games is None or games_played < max_games:
            self.play_round()
            games_played += 1

            if not self.finish_game() and (max_games is None or games_played < max_games):
                self.require_game_mode()


def main():
    """Main entry point for the interactive game."""
    session = GameSession()
    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")


if __name__ == "__main__":
    main()
