import numpy as np
import pytest

from tictactoe.ai.strategy import BotStrategy
from tictactoe.players import Player
from tictactoe.utils import GameMode

from tests.helpers import make_board


@pytest.fixture
def strategy():
    return BotStrategy(np.random.default_rng(99))


def test_blocks_opponent_about_to_connect(strategy, human_and_bot):
    board = make_board(["XX.",
                        "...",
                        "..."], human_and_bot, GameMode.CLASSIC)

    assert strategy.select_cell(board, human_and_bot[1]) == 2


def test_completes_own_line_when_opponent_has_nothing(strategy, human_and_bot):
    board = make_board(["X..",
                        "OO.",
                        "..X"], human_and_bot, GameMode.CLASSIC)

    assert strategy.select_cell(board, human_and_bot[1]) == 5


def test_prefers_cell_that_blocks_and_connects(strategy, human_and_bot):
    # X threatens cells 14 and 17; 17 also completes O's column
    board = make_board(["....X",
                        "..O.X",
                        "..O..",
                        "XX...",
                        "....."], human_and_bot)
    bot = human_and_bot[1]

    own = strategy.rank_available_cells(board, bot.marker, board.find_available_cell_numbers())
    assert [c.cell_number(5) for c in own[:2]] == [2, 17]

    _, threats = strategy.find_player_to_block(board, bot, board.find_available_cell_numbers())
    assert [c.cell_number(5) for c in threats[:2]] == [14, 17]

    assert strategy.select_cell(board, bot) == 17


def test_equal_threats_without_shared_cell_still_block(strategy, human_and_bot):
    # O can connect at 2, X at 22; no cell does both
    board = make_board(["OO...",
                        ".....",
                        ".....",
                        ".....",
                        "...XX"], human_and_bot)
    bot = human_and_bot[1]

    ranked = strategy.rank_available_cells(board, bot.marker, board.find_available_cell_numbers())
    assert ranked[0].cell_number(5) == 2
    assert ranked[0].total_connected == 3

    assert strategy.select_cell(board, bot) == 22


def test_builds_next_to_own_marker(strategy, human_and_bot):
    board = make_board(["...",
                        ".O.",
                        "..X"], human_and_bot, GameMode.CLASSIC)

    choice = strategy.select_cell(board, human_and_bot[1])
    assert choice == 0


def test_random_fallback_on_empty_board(human_and_bot):
    board = make_board(["...", "...", "..."], human_and_bot, GameMode.CLASSIC)
    bot = human_and_bot[1]

    first = BotStrategy(np.random.default_rng(3)).select_cell(board, bot)
    second = BotStrategy(np.random.default_rng(3)).select_cell(board, bot)

    assert first == second
    assert first in range(9)


def test_no_available_cells_is_an_error(strategy, human_and_bot):
    board = make_board(["XOX",
                        "XOO",
                        "OXX"], human_and_bot, GameMode.CLASSIC)

    with pytest.raises(ValueError):
        strategy.select_cell(board, human_and_bot[1])


def test_ranking_orders_by_total_then_chain_sum(strategy, human_and_bot):
    board = make_board([".O...",
                        ".O...",
                        ".....",
                        "...O.",
                        "....."], human_and_bot)

    ranked = strategy.rank_available_cells(board, "O", board.find_available_cell_numbers())

    assert ranked[0].cell_number(5) == 11
    assert ranked[0].total_connected == 3
    totals = [(c.total_connected, c.chain_sum) for c in ranked]
    assert totals == sorted(totals, reverse=True)


@pytest.fixture
def five_seats():
    return {n: Player.human(n, m) for n, m in enumerate("ABCDE", start=1)}


@pytest.mark.parametrize("first,second,expected", [
    (2, 4, 4),  # p4 moves right after the bot, p2 moves last
    (4, 5, 4),
    (1, 2, 1),
    (5, 1, 5),
    (1, 4, 4),
    (4, 2, 4),
    (2, 3, 2),  # challenger is the bot itself
])
def test_compare_next_turn_with_bot_in_seat_three(five_seats, first, second, expected):
    winner = BotStrategy.compare_next_turn(3, five_seats[first], five_seats[second])
    assert winner is five_seats[expected]


def test_equal_threats_block_the_player_moving_sooner(strategy):
    players = [Player.human(1, "X"), Player.bot(2, "B"), Player.human(3, "Z")]
    board = make_board(["XX..",
                        "....",
                        "....",
                        "ZZ.."], players, GameMode.CLASSIC)

    target, cells = strategy.find_player_to_block(board, players[1], board.find_available_cell_numbers())
    assert target is players[2]
    assert cells[0].cell_number(4) == 14

    assert strategy.select_cell(board, players[1]) == 14


def test_bigger_threat_wins_over_turn_order(strategy):
    players = [Player.human(1, "X"), Player.bot(2, "B"), Player.human(3, "Z")]
    board = make_board(["XX.X",
                        "....",
                        "....",
                        "ZZ.."], players, GameMode.CLASSIC)

    target, cells = strategy.find_player_to_block(board, players[1], board.find_available_cell_numbers())
    assert target is players[0]
    assert cells[0].cell_number(4) == 2
    assert cells[0].total_connected == 4


def test_no_threats_keeps_first_opponent_after_bot(strategy):
    players = [Player.human(1, "X"), Player.bot(2, "B"), Player.human(3, "Z")]
    board = make_board(["....", "....", "....", "...."], players, GameMode.CLASSIC)

    target, _ = strategy.find_player_to_block(board, players[1], board.find_available_cell_numbers())
    assert target is players[2]
