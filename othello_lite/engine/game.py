from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from .board import Board, Cell, Coord
from .executor import apply_move, undo_move
from .logs import FlipLog, MoveLog
from .movegen import discard_moves, enumerate_moves, is_valid_move
from .search import Searcher


class Game:
    """One game session: the board and both change logs.

    Every operation mutates this session only, so independent games can
    live side by side. A session is not reentrant: applies must be undone
    and enumerations discarded in strict LIFO order.
    """

    def __init__(self, searcher: Optional[Searcher] = None) -> None:
        self.board = Board()
        self.move_log = MoveLog()
        self.flip_log = FlipLog()
        self.searcher = searcher if searcher is not None else Searcher()

    def new_game(self) -> None:
        self.board.setup()
        self.move_log.clear()
        self.flip_log.clear()

    def cell_at(self, x: int, y: int) -> Cell:
        return self.board.cell_at(x, y)

    def count_empty(self) -> int:
        return self.board.count_empty()

    def disc_counts(self) -> Tuple[int, int]:
        return self.board.disc_counts()

    def is_valid_move(self, x: int, y: int, who: Cell) -> bool:
        return is_valid_move(self.board, x, y, who)

    def enumerate_moves(self, who: Cell) -> List[Coord]:
        return enumerate_moves(self.board, self.move_log, who)

    def discard_moves(self) -> None:
        discard_moves(self.move_log)

    def apply_move(self, x: int, y: int, who: Cell) -> List[Coord]:
        return apply_move(self.board, self.flip_log, x, y, who)

    def undo_move(self) -> Tuple[Cell, Coord]:
        return undo_move(self.board, self.flip_log)

    def has_moves(self, who: Cell) -> bool:
        with self.enumerated(who) as moves:
            return bool(moves)

    def moves_played(self) -> int:
        return len(self.flip_log.blocks)

    @contextmanager
    def applied(self, x: int, y: int, who: Cell) -> Iterator[List[Coord]]:
        """Apply a move for the duration of the block, then undo it."""
        changed = self.apply_move(x, y, who)
        try:
            yield changed
        finally:
            self.undo_move()

    @contextmanager
    def enumerated(self, who: Cell) -> Iterator[List[Coord]]:
        """List the legal moves for the duration of the block, then discard them."""
        moves = self.enumerate_moves(who)
        try:
            yield moves
        finally:
            self.discard_moves()

    def suggest_move(self, who: Cell, max_depth: int) -> Optional[Coord]:
        return self.searcher.suggest_move(self, who, max_depth)
