from __future__ import annotations

from typing import List, Tuple

from .board import DIRECTIONS, Board, Cell, Coord, in_bounds, opponent
from .errors import IllegalMoveError
from .logs import FlipLog


def apply_move(board: Board, flip_log: FlipLog, x: int, y: int, who: Cell) -> List[Coord]:
    """Place a disc for `who` at (x, y) and flip every captured run.

    Pushes one flip-log block: the placed coordinate first, then the flips
    in direction order, nearest to farthest within a direction. Returns the
    block. The move must be legal; an occupied target or a placement that
    flips nothing raises IllegalMoveError and leaves the board untouched.
    """
    if not in_bounds(x, y):
        raise IllegalMoveError(f"move out of bounds: ({x}, {y})")
    cells = board.cells
    if cells[x][y] != Cell.EMPTY:
        raise IllegalMoveError(f"cell ({x}, {y}) is occupied")
    opp = opponent(who)

    changed: List[Coord] = [(x, y)]
    for dx, dy in DIRECTIONS:
        i, j = x + dx, y + dy
        run: List[Coord] = []
        while in_bounds(i, j) and cells[i][j] == opp:
            run.append((i, j))
            i += dx
            j += dy
        if run and in_bounds(i, j) and cells[i][j] == who:
            changed.extend(run)

    if len(changed) == 1:
        raise IllegalMoveError(f"move ({x}, {y}) flips nothing for {who.name}")

    flip_log.push_block(changed, who)
    for i, j in changed:
        cells[i][j] = who
    return changed


def undo_move(board: Board, flip_log: FlipLog) -> Tuple[Cell, Coord]:
    """Revert the most recent applied move; returns its mover and coordinate."""
    who, changed = flip_log.pop_block()
    cells = board.cells
    x, y = changed[0]
    cells[x][y] = Cell.EMPTY
    restored = opponent(who)
    for i, j in changed[1:]:
        cells[i][j] = restored
    return who, (x, y)
