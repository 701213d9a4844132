import os

import pytest

from grid_tictactoe.board import Player, create
from grid_tictactoe.rules import apply_move

# widgets render without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def board3():
    return create(3, Player.P1)


@pytest.fixture
def play():
    """
    apply a sequence of (row, col) moves, alternating players
    """
    def _play(state, moves):
        for row, col in moves:
            apply_move(state, row, col)
        return state
    return _play
