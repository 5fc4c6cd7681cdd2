"""
Tests for the coordinate notation system.
"""

import pytest
from othello_lite.engine.notation import (
    coord_to_notation,
    moves_to_string,
    notation_to_coord,
    string_to_moves,
)


class TestCoordinateNotation:
    """Test coordinate notation conversion functions."""

    def test_coord_to_notation(self):
        assert coord_to_notation(0, 0) == "A1"
        assert coord_to_notation(0, 7) == "A8"
        assert coord_to_notation(7, 0) == "H1"
        assert coord_to_notation(7, 7) == "H8"
        # Opening moves for Black
        assert coord_to_notation(2, 3) == "C4"
        assert coord_to_notation(3, 2) == "D3"
        assert coord_to_notation(4, 5) == "E6"
        assert coord_to_notation(5, 4) == "F5"

    def test_notation_to_coord(self):
        assert notation_to_coord("A1") == (0, 0)
        assert notation_to_coord("H8") == (7, 7)
        assert notation_to_coord("c4") == (2, 3)
        assert notation_to_coord(" f5 ") == (5, 4)

    def test_invalid_coordinates(self):
        with pytest.raises(ValueError):
            coord_to_notation(8, 0)
        with pytest.raises(ValueError):
            coord_to_notation(0, -1)

    def test_invalid_notation(self):
        for bad in ("", "A", "A9", "I1", "A0", "11", "C44"):
            with pytest.raises(ValueError):
                notation_to_coord(bad)


class TestMoveStrings:
    def test_moves_to_string(self):
        assert moves_to_string([]) == ""
        assert moves_to_string([(2, 3), (3, 2)]) == "C4 D3"
        assert moves_to_string([(2, 3), (3, 2)], sep="") == "C4D3"

    def test_string_to_moves(self):
        assert string_to_moves("") == []
        assert string_to_moves("c4c3 d3") == [(2, 3), (2, 2), (3, 2)]
        with pytest.raises(ValueError):
            string_to_moves("c4c")
