from __future__ import annotations

from typing import Dict

from ..engine.board import SIZE, Board, Cell
from ..engine.notation import COLS, ROWS

GLYPHS: Dict[Cell, str] = {
    Cell.BLACK: "*X*",
    Cell.WHITE: " O ",
    Cell.EMPTY: "   ",
}

RULE = "  " + "+".join(["---"] * SIZE)


def render_board(board: Board) -> str:
    """ASCII grid with digit columns on top and letter rows down the side."""
    lines = ["", "   " + "   ".join(COLS)]
    for i in range(SIZE):
        cells = "|".join(GLYPHS[board.cells[i][j]] for j in range(SIZE))
        lines.append(f"{ROWS[i]} {cells}")
        if i < SIZE - 1:
            lines.append(RULE)
    lines.append("")
    return "\n".join(lines)
