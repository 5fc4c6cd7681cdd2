from __future__ import annotations

import argparse
from time import perf_counter
from typing import List, Optional

from othello_lite.engine.board import BLACK
from othello_lite.engine.game import Game
from othello_lite.engine.notation import coord_to_notation, string_to_moves
from othello_lite.engine.perft import perft, play_moves


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="othello-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--position", type=str, default=None, help="move sequence like c4e3f6")
    args = p.parse_args(argv)

    game = Game()
    who = BLACK
    if args.position:
        try:
            moves = [coord_to_notation(x, y) for x, y in string_to_moves(args.position)]
            who = play_moves(game, moves)
        except ValueError as e:
            p.error(f"bad --position: {e}")
    t0 = perf_counter()
    n = perft(game, who, args.depth)
    dt = perf_counter() - t0
    print(f"perft(d={args.depth})={n} in {dt:.3f}s")


if __name__ == "__main__":
    main()
