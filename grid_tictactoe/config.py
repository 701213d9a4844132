import random
from dataclasses import dataclass

from .board import Player

# -----------------------------------------------------------------------------
# GAME CONSTANTS
# -----------------------------------------------------------------------------

BOARD_SIZES = (3, 4, 5)
DEFAULT_BOARD_SIZE = 3
RESET_DELAY_MS = 1000   # pause on a finished board before the next round


class SetupError(ValueError):
    """
    bad names or board size entered before play
    """


@dataclass(frozen=True)
class GameSetup:
    """
    everything chosen once before the first round
    """
    player1_name: str
    player2_name: str
    board_size: int = DEFAULT_BOARD_SIZE

    @classmethod
    def create(cls, player1_name, player2_name, board_size=DEFAULT_BOARD_SIZE):
        # names are free-form but must not be blank
        p1 = (player1_name or "").strip()
        p2 = (player2_name or "").strip()
        if not p1 or not p2:
            raise SetupError("both player names are required")
        if board_size not in BOARD_SIZES:
            sizes = ", ".join(str(s) for s in BOARD_SIZES)
            raise SetupError(f"board size must be one of {sizes}, got {board_size}")
        return cls(p1, p2, board_size)

    def name_of(self, player: Player) -> str:
        return self.player1_name if player is Player.P1 else self.player2_name


def random_starting_player(rng=random) -> Player:
    """
    coin flip for who opens the next round
    """
    return Player.P1 if rng.random() < 0.5 else Player.P2
