from __future__ import annotations

from typing import Tuple

# Positional heuristic from Gnothello. Corners are worth most, the X-squares
# diagonal to a corner least; symmetric under all board reflections.
POSITION_WEIGHTS: Tuple[Tuple[int, ...], ...] = (
    (512, 4, 128, 256, 256, 128, 4, 512),
    (4, 2, 8, 16, 16, 8, 2, 4),
    (128, 8, 64, 32, 32, 64, 8, 128),
    (256, 16, 32, 2, 2, 32, 16, 256),
    (256, 16, 32, 2, 2, 32, 16, 256),
    (128, 8, 64, 32, 32, 64, 8, 128),
    (4, 2, 8, 16, 16, 8, 2, 4),
    (512, 4, 128, 256, 256, 128, 4, 512),
)


def weight_at(x: int, y: int) -> int:
    return POSITION_WEIGHTS[x][y]
