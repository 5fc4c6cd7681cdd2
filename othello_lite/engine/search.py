from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING, Optional

from .board import Cell, Coord, opponent
from .weights import weight_at

if TYPE_CHECKING:
    from .game import Game

log = logging.getLogger(__name__)

# Below this many empties the configured depth is ignored and the search
# runs to ENDGAME_DEPTH, unless the caller asked for depth 0.
ENDGAME_EMPTIES = 11
ENDGAME_DEPTH = 10


class Searcher:
    """Depth-limited worst-case search over the positional weight table.

    Every candidate is applied to the session board in place, its replies
    are explored recursively, and everything is undone before the next
    candidate. No state survives between calls apart from the RNG used for
    tie-breaks and the node counter of the last search.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.nodes = 0

    def score_move(self, game: Game, x: int, y: int, who: Cell, depth: int, add: bool) -> int:
        """Weight of playing (x, y) plus the worst continuation within `depth` plies.

        `add` says whether weights count for (True) or against (False) the
        side being evaluated; it flips every ply. The continuation starts at
        0 and only goes down, so a side without replies contributes nothing.
        """
        self.nodes += 1
        with game.applied(x, y, who) as changed:
            if add:
                weight = sum(weight_at(i, j) for i, j in changed)
            else:
                weight = -sum(weight_at(i, j) for i, j in changed)
            worst = 0
            if depth > 0 and game.count_empty():
                replier = opponent(who)
                with game.enumerated(replier) as replies:
                    for i, j in replies:
                        score = self.score_move(game, i, j, replier, depth - 1, not add)
                        if score < worst:
                            worst = score
        return weight + worst

    def suggest_move(self, game: Game, who: Cell, max_depth: int) -> Optional[Coord]:
        """Best move for `who`, or None when the board is full or `who` cannot move.

        Depth 0 scores only the immediate flips (used for hints). Each later
        candidate that ties the best so far replaces it on a coin flip, so
        ties are not sampled uniformly.
        """
        empties = game.count_empty()
        if empties == 0:
            return None
        if empties < ENDGAME_EMPTIES and max_depth:
            max_depth = ENDGAME_DEPTH
        self.nodes = 0
        start = time.perf_counter()
        with game.enumerated(who) as candidates:
            if not candidates:
                return None
            best = candidates[0]
            best_score = self.score_move(game, best[0], best[1], who, max_depth, True)
            for x, y in candidates[1:]:
                score = self.score_move(game, x, y, who, max_depth, True)
                if score > best_score or (score == best_score and self.rng.randrange(2)):
                    best_score = score
                    best = (x, y)
        log.debug(
            "suggest %s depth=%d empties=%d candidates=%d best=%s score=%d nodes=%d in %.1fms",
            who.name, max_depth, empties, len(candidates), best, best_score,
            self.nodes, (time.perf_counter() - start) * 1000,
        )
        return best
