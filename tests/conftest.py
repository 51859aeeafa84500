import numpy as np
import pytest

from tictactoe.debug import debug
from tictactoe.players import Player


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def two_humans():
    return [Player.human(1, "X"), Player.human(2, "O")]


@pytest.fixture
def human_and_bot():
    return [Player.human(1, "X"), Player.bot(2, "O")]


@pytest.fixture(autouse=True)
def restore_debug():
    level = debug.level
    yield
    debug.configure(level=level, enabled=True, components=[])
