"""
Round controller sitting between the window and the rules.

Owns the one live board, turns clicks into results the window can show,
and exposes both ways a new round begins: the Reset button (P1 opens) and
the delayed automatic reset after a finished round (random opener).
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from . import rules
from .board import BoardState, Player, Status, create
from .config import GameSetup, random_starting_player

logger = logging.getLogger(__name__)

INVALID = "invalid"
CONTINUE = "continue"
WIN = "win"
DRAW = "draw"


@dataclass(frozen=True)
class MoveResult:
    status: str                                 # invalid, continue, win or draw
    player: Optional[Player] = None             # who moved
    error: Optional[rules.MoveError] = None     # set when invalid

    @property
    def is_terminal(self) -> bool:
        return self.status in (WIN, DRAW)


class GameSession:
    """
    one interactive game: fixed names and board size, many rounds
    """

    def __init__(self, setup: GameSetup, rng: Optional[random.Random] = None):
        self.setup = setup
        self._rng = rng or random.Random()
        self.round_number = 0
        self.state: BoardState = None
        self._new_round(Player.P1)

    def _new_round(self, starting_player: Player):
        self.state = create(self.setup.board_size, starting_player)
        self.round_number += 1
        logger.info("round %d on %dx%d, %s starts", self.round_number,
                    self.setup.board_size, self.setup.board_size,
                    self.name_of(starting_player))

    def name_of(self, player: Player) -> str:
        return self.setup.name_of(player)

    def play(self, row: int, col: int) -> MoveResult:
        """
        apply a move for whoever is to play; rejected moves are no-ops
        """
        player = self.state.current_player
        try:
            rules.apply_move(self.state, row, col)
        except rules.MoveError as e:
            logger.debug("ignored move: %s", e)
            return MoveResult(INVALID, player, e)
        logger.debug("%s played (%d, %d)", self.name_of(player), row, col)
        status = self.state.outcome.status
        if status is Status.WIN:
            logger.info("round %d won by %s", self.round_number, self.name_of(player))
            return MoveResult(WIN, player)
        if status is Status.DRAW:
            logger.info("round %d drawn", self.round_number)
            return MoveResult(DRAW, player)
        return MoveResult(CONTINUE, player)

    def reset(self):
        """
        manual reset: fresh board, P1 opens
        """
        self._new_round(Player.P1)

    def start_next_round(self, round_number: int) -> bool:
        """
        timer callback after a finished round

        ignored unless round_number is still the live round and it is over,
        so a timer outliving a manual reset does nothing
        """
        if round_number != self.round_number or not self.state.outcome.is_over:
            logger.debug("stale reset for round %d ignored", round_number)
            return False
        self._new_round(random_starting_player(self._rng))
        return True

    def winning_line(self):
        return rules.winning_line(self.state.grid, self.state.size)

    def status_text(self) -> str:
        result = self.state.outcome
        if result.status is Status.WIN:
            return f"Winner: {self.name_of(result.winner)}"
        if result.status is Status.DRAW:
            return "Draw!"
        return f"Turn: {self.name_of(self.state.current_player)}"
