import logging

import pytest

from grid_tictactoe.board import Cell, Player
from grid_tictactoe.config import GameSetup
from grid_tictactoe.rules import CellOccupied, GameAlreadyOver
from grid_tictactoe.session import CONTINUE, DRAW, INVALID, WIN, GameSession


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def session():
    return GameSession(GameSetup.create("Ana", "Luis", 3), rng=FixedRandom(0.9))


def win_for_p1(session):
    for move in [(0, 0), (1, 0), (0, 1), (1, 1)]:
        assert session.play(*move).status == CONTINUE
    return session.play(0, 2)


def test_first_round_starts_with_player_one(session):
    assert session.round_number == 1
    assert session.state.current_player is Player.P1
    assert session.status_text() == "Turn: Ana"


def test_play_reports_progress(session):
    res = session.play(1, 1)
    assert res.status == CONTINUE and res.player is Player.P1
    assert not res.is_terminal
    assert session.status_text() == "Turn: Luis"


def test_rejected_move_is_a_no_op(session, caplog):
    session.play(1, 1)
    with caplog.at_level(logging.DEBUG, logger="grid_tictactoe.session"):
        res = session.play(1, 1)
    assert res.status == INVALID
    assert isinstance(res.error, CellOccupied)
    assert session.state.current_player is Player.P2
    assert "ignored move" in caplog.text


def test_win_then_reject_further_moves(session):
    res = win_for_p1(session)
    assert res.status == WIN and res.is_terminal
    assert session.status_text() == "Winner: Ana"
    assert session.winning_line() == [(0, 0), (0, 1), (0, 2)]
    late = session.play(2, 2)
    assert late.status == INVALID
    assert isinstance(late.error, GameAlreadyOver)
    assert session.state.grid[2][2] is Cell.EMPTY


def test_draw(session):
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0)]
    for move in moves:
        session.play(*move)
    res = session.play(2, 2)
    assert res.status == DRAW
    assert session.status_text() == "Draw!"


def test_next_round_after_win_uses_random_opener(session):
    win_for_p1(session)
    assert session.start_next_round(1)
    assert session.round_number == 2
    assert session.state.starting_player is Player.P2
    assert session.state.current_player is Player.P2
    assert not session.state.outcome.is_over
    assert session.state.empty_cells() == [(r, c) for r in range(3) for c in range(3)]


def test_next_round_ignored_while_round_in_progress(session):
    session.play(0, 0)
    assert not session.start_next_round(1)
    assert session.round_number == 1
    assert session.state.grid[0][0] is Cell.X


def test_stale_timer_after_manual_reset_is_ignored(session):
    win_for_p1(session)
    session.reset()
    assert session.round_number == 2
    assert session.state.current_player is Player.P1
    session.play(1, 1)
    assert not session.start_next_round(1)
    assert session.state.grid[1][1] is Cell.X


def test_reset_keeps_board_size():
    session = GameSession(GameSetup.create("a", "b", 5))
    session.play(4, 4)
    session.reset()
    assert session.state.size == 5
    assert all(cell is Cell.EMPTY for row in session.state.grid for cell in row)
