"""
Coordinate notation for Othello moves.

Rows 0-7 are written as letters A-H and columns 0-7 as digits 1-8, so the
cell at row 2, column 3 is 'C4'.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

ROWS = "ABCDEFGH"
COLS = "12345678"


def coord_to_notation(x: int, y: int) -> str:
    """Convert (row, col) to notation (e.g., (2, 3) -> 'C4')."""
    if not (0 <= x < 8 and 0 <= y < 8):
        raise ValueError(f"Invalid coordinate: ({x}, {y})")
    return f"{ROWS[x]}{COLS[y]}"


def notation_to_coord(notation: str) -> Tuple[int, int]:
    """Convert notation (e.g., 'c4') to (row, col). Case-insensitive."""
    text = notation.strip()
    if len(text) != 2:
        raise ValueError(f"Invalid notation format: {notation}")
    row_char = text[0].upper()
    col_char = text[1]
    x = ROWS.find(row_char)
    y = COLS.find(col_char)
    if x < 0 or y < 0:
        raise ValueError(f"Invalid notation: {notation}")
    return x, y


def moves_to_string(moves: Iterable[Tuple[int, int]], sep: str = " ") -> str:
    return sep.join(coord_to_notation(x, y) for x, y in moves)


def string_to_moves(moves_str: str) -> List[Tuple[int, int]]:
    """Parse a compact move string like 'c4e3f6' into coordinates."""
    text = "".join(moves_str.split())
    if len(text) % 2:
        raise ValueError(f"Incomplete notation: {moves_str}")
    return [notation_to_coord(text[i:i + 2]) for i in range(0, len(text), 2)]
