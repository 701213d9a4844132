"""
Move application and win/draw detection.

Win length is fixed at three in a row on every board size. The scan slides
a three-cell window along rows, columns and both diagonal directions.
"""

from typing import List, Optional, Tuple

from .board import DRAW, BoardState, Cell, Grid, Outcome

WIN_LENGTH = 3

Line = List[Tuple[int, int]]


class MoveError(Exception):
    """
    a rejected move; the board is left untouched
    """
    reason = "invalid move"

    def __init__(self, row: int, col: int):
        super().__init__(f"{self.reason} at ({row}, {col})")
        self.row = row
        self.col = col


class GameAlreadyOver(MoveError):
    reason = "game already over"


class OutOfBounds(MoveError):
    reason = "cell out of bounds"


class CellOccupied(MoveError):
    reason = "cell already occupied"


def validate_move(state: BoardState, row: int, col: int) -> Optional[MoveError]:
    """
    first failed precondition for a move, or None if it is legal

    order matters: finished game, then bounds, then occupancy
    """
    if state.outcome.is_over:
        return GameAlreadyOver(row, col)
    if not state.in_bounds(row, col):
        return OutOfBounds(row, col)
    if not state.grid[row][col].is_empty:
        return CellOccupied(row, col)
    return None


def apply_move(state: BoardState, row: int, col: int) -> BoardState:
    """
    mark (row, col) for the player to move, then settle outcome and turn

    raises MoveError before touching the board, so a rejected move never
    leaves a partial update behind. the winner keeps the turn.
    """
    error = validate_move(state, row, col)
    if error is not None:
        raise error
    player = state.current_player
    state.grid[row][col] = Cell.mark(player)
    if check_winner(state.grid, state.size):
        state.outcome = Outcome.win(player)
    elif is_board_full(state.grid):
        state.outcome = DRAW
    else:
        state.current_player = player.opposite()
    return state


def legal_moves(state: BoardState) -> List[Tuple[int, int]]:
    if state.outcome.is_over:
        return []
    return state.empty_cells()


def _candidate_lines(size: int):
    # every three-cell window, rows and columns first, then diagonals
    last = size - WIN_LENGTH
    for i in range(size):
        for j in range(last + 1):
            yield [(i, j), (i, j + 1), (i, j + 2)]
    for i in range(size):
        for j in range(last + 1):
            yield [(j, i), (j + 1, i), (j + 2, i)]
    for i in range(last + 1):
        for j in range(last + 1):
            yield [(i, j), (i + 1, j + 1), (i + 2, j + 2)]
            yield [(i, size - j - 1), (i + 1, size - j - 2), (i + 2, size - j - 3)]


def _is_filled_line(grid: Grid, line: Line) -> bool:
    (r0, c0), (r1, c1), (r2, c2) = line
    first = grid[r0][c0]
    return not first.is_empty and first is grid[r1][c1] is grid[r2][c2]


def winning_line(grid: Grid, size: int) -> Optional[Line]:
    """
    first three-in-a-row found by the scan, or None
    """
    for line in _candidate_lines(size):
        if _is_filled_line(grid, line):
            return line
    return None


def check_winner(grid: Grid, size: int) -> bool:
    """
    true if any player holds three in a row anywhere on the board
    """
    return winning_line(grid, size) is not None


def is_board_full(grid: Grid) -> bool:
    return all(not cell.is_empty for row in grid for cell in row)
