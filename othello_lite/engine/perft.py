from __future__ import annotations

from typing import Iterable

from .board import BLACK, Cell, opponent
from .game import Game
from .notation import notation_to_coord


def perft(game: Game, who: Cell, depth: int) -> int:
    """Count leaf positions `depth` plies ahead, applying and undoing in place.

    A side without moves passes; the line ends when neither side can move.
    """
    if depth == 0:
        return 1
    total = 0
    with game.enumerated(who) as moves:
        if not moves:
            if not game.has_moves(opponent(who)):
                return 1
            return perft(game, opponent(who), depth - 1)
        for x, y in moves:
            with game.applied(x, y, who):
                total += perft(game, opponent(who), depth - 1)
    return total


def play_moves(game: Game, moves: Iterable[str], who: Cell = BLACK) -> Cell:
    """Play a notation sequence from `who`, passing where a side has no move.

    Returns the side to move afterwards.
    """
    for mv in moves:
        if not game.has_moves(who):
            who = opponent(who)
        x, y = notation_to_coord(mv)
        game.apply_move(x, y, who)
        who = opponent(who)
    return who
