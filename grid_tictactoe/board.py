from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

MIN_BOARD_SIZE = 3


class Player(Enum):
    """
    the two players, valued by the mark they place
    """
    P1 = "X"
    P2 = "O"

    def opposite(self) -> "Player":
        return Player.P2 if self is Player.P1 else Player.P1

    @property
    def symbol(self) -> str:
        return self.value


class Cell(Enum):
    """
    board cell: empty or marked by one player
    """
    EMPTY = ""
    X = "X"
    O = "O"

    @classmethod
    def mark(cls, player: Player) -> "Cell":
        return cls(player.value)

    @property
    def player(self) -> Optional[Player]:
        # None for empty cells
        return None if self is Cell.EMPTY else Player(self.value)

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    round result: in progress, won by a player, or drawn
    """
    status: Status
    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls(Status.WIN, player)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def __str__(self):
        if self.status is Status.WIN:
            return f"win({self.winner.symbol})"
        return self.status.value


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)

Grid = List[List[Cell]]


@dataclass
class BoardState:
    """
    grid, turn and outcome of one round

    only rules.apply_move writes to it; a finished round is replaced
    wholesale by a fresh board, never rolled back
    """
    size: int
    starting_player: Player
    grid: Optional[Grid] = None
    current_player: Optional[Player] = None
    outcome: Outcome = IN_PROGRESS

    def __post_init__(self):
        if self.size < MIN_BOARD_SIZE:
            raise ValueError(f"board size must be at least {MIN_BOARD_SIZE}, got {self.size}")
        if self.grid is None:
            self.grid = [[Cell.EMPTY for _ in range(self.size)]
                         for _ in range(self.size)]  # empty cells
        if self.current_player is None:
            self.current_player = self.starting_player

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [(r, c) for r in range(self.size) for c in range(self.size)
                if self.grid[r][c].is_empty]

    def mark_count(self, player: Player) -> int:
        target = Cell.mark(player)
        return sum(cell is target for row in self.grid for cell in row)

    def rows(self) -> List[str]:
        # text snapshot, '.' for empty
        return ["".join(cell.value or "." for cell in row) for row in self.grid]


def create(size: int, starting_player: Player = Player.P1) -> BoardState:
    """
    fresh all-empty board, starting_player to move
    """
    return BoardState(size=size, starting_player=starting_player)


# read accessors for the presentation layer

def cell_at(state: BoardState, row: int, col: int) -> Cell:
    return state.grid[row][col]


def current_player(state: BoardState) -> Player:
    return state.current_player


def outcome(state: BoardState) -> Outcome:
    return state.outcome


def size(state: BoardState) -> int:
    return state.size
