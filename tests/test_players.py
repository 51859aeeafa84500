import pytest

from tictactoe.game.board import Board
from tictactoe.players import Player, PlayerKind
from tictactoe.utils import GameMode

from tests.helpers import make_board


def test_labels_and_kinds():
    human = Player.human(1, "X")
    bot = Player.bot(2, "O")

    assert human.kind == PlayerKind.HUMAN and not human.is_bot
    assert bot.is_bot
    assert human.label == "Player-1 (X)"
    assert bot.label == "Bot-2 (O)"


@pytest.mark.parametrize("number,marker", [(0, "X"), (1, ""), (1, "XO"), (1, " ")])
def test_invalid_identity_rejected(number, marker):
    with pytest.raises(ValueError):
        Player(number, marker)


def test_score_tracking_and_reset():
    player = Player.human(1, "X")
    player.set_score(3)
    player.set_score(7)

    assert player.last_score == 3
    assert player.score == 7
    assert player.score_gained == 4

    player.reset()
    assert (player.score, player.last_score, player.score_gained) == (0, 0, 0)


def test_human_selection_goes_through_selector(two_humans):
    board = Board(two_humans, GameMode.CLASSIC)
    asked = []

    def selector(b):
        asked.append(b)
        return 4

    assert two_humans[0].select_cell(board, selector) == 4
    assert asked == [board]


def test_human_without_selector_is_an_error(two_humans):
    board = Board(two_humans, GameMode.CLASSIC)
    with pytest.raises(RuntimeError):
        two_humans[0].select_cell(board)


def test_bot_selection_needs_no_console(human_and_bot, rng):
    board = make_board(["XX.", "...", "..."], human_and_bot, GameMode.CLASSIC)
    assert human_and_bot[1].select_cell(board, rng=rng) == 2
