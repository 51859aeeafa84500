"""
rules.py - Game flow and Gymnasium environment for tic-tac-toe

This module provides:
1. TicTacToeGame, which drives turns on a Board and keeps the move history
2. TicTacToeEnv, a gymnasium-compatible environment where one seat is the
   agent and every other seat is played by the bot strategy
"""

import numpy as np
import gymnasium as gym
from gymnasium import spaces
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from tictactoe.ai.strategy import BotStrategy
from tictactoe.debug import debug
from tictactoe.game.board import Board
from tictactoe.players import HumanSelector, Player
from tictactoe.utils import GameMode, GameResult, MIN_PLAYERS


class MoveRecord(NamedTuple):
    """One completed turn."""
    player: Player
    cell_number: int
    score_gained: int

    def text(self) -> str:
        text = f"{self.player.label} selected '{self.cell_number}'"
        if self.score_gained > 0:
            text += f", gained +{self.score_gained} points"
        return text


class TicTacToeGame:
    """
    High-level game manager.

    Asks the current player for a cell, marks it, and passes the turn on,
    until the board reports the game completed.
    """

    def __init__(self, board: Board, human_selector: Optional[HumanSelector] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize a game.

        Args:
            board: The board to play on
            human_selector: Console callback for human players
            rng: Random source for the first turn and bot fallback moves
        """
        debug.debug("Initializing TicTacToeGame", "game")
        self.board = board
        self.human_selector = human_selector
        self.rng = rng if rng is not None else np.random.default_rng()
        self.history: List[MoveRecord] = []

    def start(self) -> Player:
        """Pick the first player if no turn has been set yet."""
        if self.board.player_turn is None:
            return self.board.toggle_player_turn(self.rng)
        return self.board.player_turn

    def rematch(self) -> Player:
        """Reset scores, grid and history, then pick a new first player."""
        debug.debug("Starting rematch", "game")
        self.board.reset()
        self.history = []
        return self.start()

    def is_game_over(self) -> bool:
        return self.board.is_completed()

    def get_current_player(self) -> Optional[Player]:
        return self.board.player_turn

    def get_valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self.board.find_available_cell_numbers()

    def make_move(self, cell_number: int) -> Optional[MoveRecord]:
        """
        Mark a cell for the current player and pass the turn on.

        Args:
            cell_number: Cell to mark

        Returns:
            The record of the move, or None if the move was rejected
        """
        player = self.board.player_turn
        if player is None or self.is_game_over():
            debug.warning(f"Move {cell_number} rejected: game not in progress", "game")
            return None

        if not self.board.mark_cell_by_number(cell_number, player.marker):
            return None

        record = MoveRecord(player, cell_number, player.score_gained)
        self.history.append(record)
        self.board.toggle_player_turn(self.rng)
        return record

    def play_turn(self) -> MoveRecord:
        """
        Let the current player choose a cell and play it.

        Returns:
            The record of the move

        Raises:
            RuntimeError: If the game is over or has not been started
            ValueError: If the player selected a cell that cannot be marked
        """
        player = self.board.player_turn
        if player is None:
            raise RuntimeError("Game has not been started")
        if self.is_game_over():
            raise RuntimeError("Game is already completed")

        cell_number = player.select_cell(self.board, self.human_selector, self.rng)
        record = self.make_move(cell_number)
        if record is None:
            raise ValueError(f"{player.label} selected unavailable cell {cell_number}")
        return record

    def play_until_complete(self) -> GameResult:
        self.start()
        while not self.is_game_over():
            self.play_turn()
        return self.board.result()

    def history_text(self) -> str:
        """Lines describing every move so far."""
        return "".join(record.text() + "\n" for record in self.history)

    def render(self) -> str:
        return self.board.render()


class TicTacToeEnv(gym.Env):
    """
    Tic-tac-toe environment following the Gymnasium interface.

    The agent plays one seat. After each agent move the bot seats play until
    it is the agent's turn again or the game is completed.
    """

    metadata = {'render_modes': ['ansi', 'human'], 'render_fps': 4}

    def __init__(self, mode: GameMode = GameMode.FRENZY, num_players: int = 2,
                 grid_size: Optional[int] = None, agent_number: int = 1,
                 render_mode: Optional[str] = None):
        """
        Initialize the environment.

        Args:
            mode: Game mode
            num_players: Number of seats, including the agent
            grid_size: Grid size (Frenzy only)
            agent_number: Seat number controlled by the agent
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing TicTacToeEnv", "env")
        if num_players < MIN_PLAYERS:
            raise ValueError(f"At least {MIN_PLAYERS} players are required, got {num_players}")
        if not 1 <= agent_number <= num_players:
            raise ValueError(f"Agent number must be between 1 and {num_players}, got {agent_number}")

        markers = default_markers(num_players)
        players = [Player.human(number, marker) if number == agent_number else Player.bot(number, marker)
                   for number, marker in enumerate(markers, start=1)]

        self.board = Board(players, mode, grid_size)
        self.agent = players[agent_number - 1]
        self.render_mode = render_mode
        self.game = TicTacToeGame(self.board, rng=self.np_random)

        size = self.board.grid_size
        self.action_space = spaces.Discrete(size * size)
        # Each cell holds the number of the player who marked it, 0 if empty
        self.observation_space = spaces.Box(low=0, high=num_players, shape=(size, size), dtype=np.int8)

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.0
        self.reward_invalid_move = -0.5

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Args:
            seed: Random seed for reproducibility
            options: Additional options for reset

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.game.rng = self.np_random
        self.game.rematch()
        self._play_bots()

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Mark a cell for the agent and let the bots answer.

        Args:
            action: Cell number to mark

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if self.game.is_game_over() or self.board.player_turn is not self.agent:
            raise RuntimeError("step() called while it is not the agent's turn; call reset()")

        record = self.game.make_move(int(action))
        if record is None:
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = float(record.score_gained)
        self._play_bots()

        terminated = self.game.is_game_over()
        if terminated:
            winner = self.board.winner()
            if winner is self.agent:
                reward += self.reward_win
            elif winner is None:
                reward += self.reward_draw
            else:
                reward += self.reward_lose
            debug.info(f"Game over: {self.board.result_text().strip()}", "env")

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, False, self._get_info()

    def _play_bots(self) -> None:
        while not self.game.is_game_over() and self.board.player_turn is not self.agent:
            self.game.play_turn()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        text = self.board.score_text() + "\n" + self.board.grid_layout_text(color=False)
        if self.render_mode == "ansi":
            return text

        print(text)
        return None

    def _get_observation(self) -> np.ndarray:
        numbers = {player.marker: player.number for player in self.board.players}
        observation = np.zeros((self.board.grid_size, self.board.grid_size), dtype=np.int8)

        for row, column, marker in self.board.grid:
            if marker:
                observation[row, column] = numbers[marker]
        return observation

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.game.get_valid_moves()

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'scores': {player.number: player.score for player in self.board.players},
            'game_result': self.board.result().name,
            'moves_made': len(self.game.history),
        }


def default_markers(num_players: int) -> List[str]:
    """Markers X, O, then letters A..Z skipping those two."""
    markers = ["X", "O"] + [chr(code) for code in range(ord("A"), ord("Z") + 1) if chr(code) not in "XO"]
    if num_players > len(markers):
        raise ValueError(f"No default markers for {num_players} players")
    return markers[:num_players]
