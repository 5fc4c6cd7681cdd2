from __future__ import annotations

import random

from othello_lite.engine.board import BLACK, EMPTY, WHITE, opponent
from othello_lite.engine.errors import IllegalMoveError
from othello_lite.engine.game import Game
from othello_lite.engine.movegen import legal_moves


def random_play(game: Game, who, rng: random.Random):
    moves = legal_moves(game.board, who)
    if not moves:
        return opponent(who)
    x, y = rng.choice(moves)
    game.apply_move(x, y, who)
    return opponent(who)


def test_validator_agrees_with_executor_on_random_positions():
    rng = random.Random(0xC0FFEE)
    g = Game()
    who = BLACK
    for _ in range(200):
        if g.count_empty() == 0 or (not legal_moves(g.board, BLACK) and not legal_moves(g.board, WHITE)):
            g.new_game()
            who = BLACK
        for side in (BLACK, WHITE):
            with g.enumerated(side) as listed:
                assert listed == legal_moves(g.board, side)
                before = g.board.snapshot()
                for x in range(8):
                    for y in range(8):
                        if g.cell_at(x, y) != EMPTY:
                            continue
                        try:
                            with g.applied(x, y, side):
                                pass
                            playable = True
                        except IllegalMoveError:
                            playable = False
                        assert playable == ((x, y) in listed)
                        assert g.board.snapshot() == before
        who = random_play(g, who, rng)
    assert g.move_log.blocks == []
