"""
strategy.py - Cell selection heuristic for bot players

The bot ranks every open cell by how many connected cells its own marker would
make there, looks for the opponent most worth blocking, and then chooses
between finishing its own line, blocking, building toward a future line, or a
random cell when nothing on the board is worth anything.
"""

from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from tictactoe.debug import debug, DebugLevel
from tictactoe.game.chains import ConnectedCell
from tictactoe.utils import CONNECT_N

if TYPE_CHECKING:
    from tictactoe.game.board import Board
    from tictactoe.players import Player


class BotStrategy:
    """
    Deterministic ranking plus a random fallback.

    The random source is only used when no cell has any matching neighbour.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Initialize the strategy.

        Args:
            rng: Random source for the fallback move (a fresh one if None)
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def rank_available_cells(self, board: 'Board', marker: str,
                             cell_numbers: Sequence[int]) -> List[ConnectedCell]:
        """
        Rank cells by what placing a marker there would connect.

        Args:
            board: The board being played
            marker: Marker assumed to be placed on each cell
            cell_numbers: Open cells to rank

        Returns:
            Cells sorted by total connected, then by the sum of the four
            axis chains, both descending
        """
        cells = [
            board.find_connected_cell(board.row_by_cell_number(cell),
                                      board.column_by_cell_number(cell),
                                      marker)
            for cell in cell_numbers
        ]
        return sorted(cells, key=lambda cell: (cell.total_connected, cell.chain_sum), reverse=True)

    @staticmethod
    def compare_next_turn(bot_number: int, player1: 'Player', player2: 'Player') -> 'Player':
        """
        Pick which of two players moves sooner after the bot.

        With players { p1, p2, bot, p4, p5 }, comparing p2 and p4 gives p4,
        since p4 moves right after the bot and p2 moves last.

        Args:
            bot_number: Number of the bot doing the comparison
            player1: Currently preferred player
            player2: Challenger

        Returns:
            The player with the shorter turn distance
        """
        first, second = player1.number, player2.number

        if ((first < second < bot_number)
                or (second < bot_number < first)
                or (bot_number < first < second)
                # Numbers are unique so this should not happen, but if the
                # challenger is the bot itself keep the current player
                or bot_number == second):
            return player1

        return player2

    def find_player_to_block(self, board: 'Board', bot: 'Player',
                             cell_numbers: Sequence[int]) -> Tuple[Optional['Player'], List[ConnectedCell]]:
        """
        Find the opponent whose best cell is most dangerous.

        Opponents are scanned from the player right after the bot around to
        the player right before it. A higher best total always wins; on a tie
        the opponent who moves sooner is kept.

        Args:
            board: The board being played
            bot: The bot choosing a move
            cell_numbers: Open cells

        Returns:
            The opponent to block and their ranked cells
        """
        players = board.players
        total_players = len(players)
        bot_index = bot.number - 1

        player_to_block: Optional['Player'] = None
        player_to_block_cells: List[ConnectedCell] = []

        for offset in range(1, total_players):
            player = players[(bot_index + offset) % total_players]
            player_cells = self.rank_available_cells(board, player.marker, cell_numbers)

            if not player_to_block_cells:
                player_to_block, player_to_block_cells = player, player_cells
                continue

            best, current_best = player_cells[0].total_connected, player_to_block_cells[0].total_connected
            sooner = self.compare_next_turn(bot.number, player_to_block, player)

            if best > current_best or (best == current_best and sooner is player):
                player_to_block, player_to_block_cells = player, player_cells

        if player_to_block is not None:
            debug.trace(f"{bot.label} watching {player_to_block.label} "
                        f"(best {player_to_block_cells[0].total_connected})", "bot")
        return player_to_block, player_to_block_cells

    def select_cell(self, board: 'Board', bot: 'Player') -> int:
        """
        Choose the cell a bot marks.

        Args:
            board: The board being played
            bot: The bot choosing a move

        Returns:
            The selected cell number
        """
        available_cells = board.find_available_cell_numbers()
        if not available_cells:
            raise ValueError("Cannot select a cell: no cells are available")

        ranked_cells = self.rank_available_cells(board, bot.marker, available_cells)
        own_best = ranked_cells[0]
        _, block_cells = self.find_player_to_block(board, bot, available_cells)

        best_cell = own_best if own_best.total_connected >= CONNECT_N else None

        for player_cell in block_cells:
            # Nothing left worth blocking
            if player_cell.total_connected == 0:
                break

            # Opponent would connect more than we can, block now
            if player_cell.total_connected > own_best.total_connected:
                best_cell = player_cell
                break

            # Equal threat: prefer a cell that blocks and builds our own line,
            # otherwise block anyway
            is_best_cell_found = False
            for ranked_cell in ranked_cells:
                if (player_cell.total_connected == own_best.total_connected
                        and player_cell.total_connected == ranked_cell.total_connected):
                    best_cell = player_cell
                    if player_cell.same_position(ranked_cell):
                        is_best_cell_found = True
                    else:
                        continue
                break

            if is_best_cell_found:
                break

        if best_cell is not None:
            choice = best_cell.cell_number(board.grid_size)
            reason = "connect/block"
        elif own_best.has_chain():
            choice = own_best.cell_number(board.grid_size)
            reason = "build chain"
        else:
            choice = int(self.rng.choice(available_cells))
            reason = "random"

        if debug.is_enabled_for(DebugLevel.DEBUG, "bot"):
            debug.debug(f"{bot.label} selects cell {choice} ({reason})", "bot")
        return choice
