from __future__ import annotations

from typing import List

from .board import DIRECTIONS, SIZE, Board, Cell, Coord, in_bounds, opponent
from .logs import MoveLog


def is_valid_move(board: Board, x: int, y: int, who: Cell) -> bool:
    """True if `who` may place a disc at (x, y).

    Out-of-bounds and occupied cells are rejected before any scan. A move
    is legal when at least one direction holds a run of opponent discs
    closed by one of the mover's own.
    """
    if not in_bounds(x, y):
        return False
    cells = board.cells
    if cells[x][y] != Cell.EMPTY:
        return False
    opp = opponent(who)
    for dx, dy in DIRECTIONS:
        i, j = x + dx, y + dy
        if not (in_bounds(i, j) and cells[i][j] == opp):
            continue
        i += dx
        j += dy
        while in_bounds(i, j) and cells[i][j] == opp:
            i += dx
            j += dy
        if in_bounds(i, j) and cells[i][j] == who:
            return True
    return False


def legal_moves(board: Board, who: Cell) -> List[Coord]:
    """Legal moves for `who` in row-major order, without touching any log."""
    return [(i, j) for i in range(SIZE) for j in range(SIZE) if is_valid_move(board, i, j, who)]


def enumerate_moves(board: Board, move_log: MoveLog, who: Cell) -> List[Coord]:
    """Push every legal move for `who` onto the move log as one block.

    Must be paired with exactly one `discard_moves` call, in nested order.
    """
    found = legal_moves(board, who)
    move_log.push_block(found)
    return found


def discard_moves(move_log: MoveLog) -> None:
    move_log.pop_block()
