import pytest

from grid_tictactoe.board import Player
from grid_tictactoe.config import (
    BOARD_SIZES, DEFAULT_BOARD_SIZE, GameSetup, SetupError, random_starting_player,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_setup_strips_names():
    setup = GameSetup.create("  Ana ", "Luis\n", 4)
    assert setup == GameSetup("Ana", "Luis", 4)
    assert setup.name_of(Player.P1) == "Ana"
    assert setup.name_of(Player.P2) == "Luis"


def test_setup_defaults_to_3x3():
    assert GameSetup.create("a", "b").board_size == DEFAULT_BOARD_SIZE == 3


@pytest.mark.parametrize("p1, p2", [("", "b"), ("a", "   "), (None, "b")])
def test_setup_rejects_blank_names(p1, p2):
    with pytest.raises(SetupError):
        GameSetup.create(p1, p2, 3)


@pytest.mark.parametrize("n", [2, 6, 0])
def test_setup_rejects_unsupported_sizes(n):
    assert n not in BOARD_SIZES
    with pytest.raises(ValueError):
        GameSetup.create("a", "b", n)


def test_random_starting_player_is_a_coin_flip():
    assert random_starting_player(FixedRandom(0.1)) is Player.P1
    assert random_starting_player(FixedRandom(0.5)) is Player.P2
    assert random_starting_player(FixedRandom(0.99)) is Player.P2
