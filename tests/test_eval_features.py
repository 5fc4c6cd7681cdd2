from othello_lite.engine.weights import POSITION_WEIGHTS, weight_at


def test_table_is_8x8():
    assert len(POSITION_WEIGHTS) == 8
    assert all(len(row) == 8 for row in POSITION_WEIGHTS)


def test_weights_symmetric_under_reflections():
    w = POSITION_WEIGHTS
    for i in range(8):
        for j in range(8):
            assert w[i][j] == w[7 - i][j]  # horizontal axis
            assert w[i][j] == w[i][7 - j]  # vertical axis
            assert w[i][j] == w[j][i]  # main diagonal
            assert w[i][j] == w[7 - j][7 - i]  # anti-diagonal


def test_corners_highest_x_squares_lowest():
    corners = [(0, 0), (0, 7), (7, 0), (7, 7)]
    x_squares = [(1, 1), (1, 6), (6, 1), (6, 6)]
    top = max(max(row) for row in POSITION_WEIGHTS)
    bottom = min(min(row) for row in POSITION_WEIGHTS)
    assert all(weight_at(x, y) == top == 512 for x, y in corners)
    assert all(weight_at(x, y) == bottom == 2 for x, y in x_squares)


def test_edges_beat_cells_next_to_edges():
    # Edge squares against their inner neighbours
    for j in range(2, 6):
        assert weight_at(0, j) > weight_at(1, j)
        assert weight_at(j, 0) > weight_at(j, 1)
