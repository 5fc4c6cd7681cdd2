from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple

SIZE = 8

# (dx, dy) in scan order: dx outer, dy inner, (0, 0) skipped
DIRECTIONS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy
)

Coord = Tuple[int, int]


class Cell(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2


BLACK = Cell.BLACK
WHITE = Cell.WHITE
EMPTY = Cell.EMPTY


def opponent(who: Cell) -> Cell:
    if who == Cell.BLACK:
        return Cell.WHITE
    if who == Cell.WHITE:
        return Cell.BLACK
    raise ValueError(f"not a player: {who!r}")


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


class Board:
    """8x8 grid of cells addressed as (row, col).

    Holds storage only; discs are placed and flipped by the executor.
    """

    def __init__(self) -> None:
        self.cells: List[List[Cell]] = [[Cell.EMPTY] * SIZE for _ in range(SIZE)]
        self.setup()

    def setup(self) -> None:
        for row in self.cells:
            for j in range(SIZE):
                row[j] = Cell.EMPTY
        self.cells[3][3] = self.cells[4][4] = Cell.WHITE
        self.cells[3][4] = self.cells[4][3] = Cell.BLACK

    def cell_at(self, x: int, y: int) -> Cell:
        if not in_bounds(x, y):
            raise IndexError(f"cell out of bounds: ({x}, {y})")
        return self.cells[x][y]

    def count_empty(self) -> int:
        return sum(row.count(Cell.EMPTY) for row in self.cells)

    def disc_counts(self) -> Tuple[int, int]:
        black = sum(row.count(Cell.BLACK) for row in self.cells)
        white = sum(row.count(Cell.WHITE) for row in self.cells)
        return black, white

    def snapshot(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.cells)
