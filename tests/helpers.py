"""Board and console builders shared by the test modules."""

import io
from typing import List, Sequence

import numpy as np

from tictactoe.game.board import Board
from tictactoe.game.grid import Grid
from tictactoe.interfaces.console import Console
from tictactoe.players import Player
from tictactoe.utils import GameMode


def fill_grid(grid: Grid, rows: Sequence[str]) -> Grid:
    """Place markers from row strings, '.' meaning empty."""
    for row, line in enumerate(rows):
        for column, marker in enumerate(line):
            if marker != ".":
                grid.place(row, column, marker)
    return grid


def make_board(rows: Sequence[str], players: List[Player], mode: GameMode = GameMode.FRENZY) -> Board:
    board = Board(players, mode, len(rows) if mode == GameMode.FRENZY else None)
    fill_grid(board.grid, rows)
    return board


def set_turn(board: Board, number: int) -> Player:
    """Rotate the turn until the given player number holds it."""
    board.toggle_player_turn(np.random.default_rng(0))
    for _ in range(len(board.players)):
        if board.player_turn.number == number:
            break
        board.toggle_player_turn()
    assert board.player_turn.number == number
    return board.player_turn


def scripted_console(lines: Sequence[str]) -> Console:
    """A console reading the given lines and writing to a string buffer."""
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    return Console(stdin=stdin, stdout=io.StringIO(), clear=False)
