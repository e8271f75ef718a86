import pytest

from mixbag.board import (
    BoardState,
    best_move,
    decode_board,
    find_move,
    move_weight,
    opponent,
    playable_squares,
    player_color,
)


def _pack(rows, last=(0xFF, 0xFF)):
    packed = bytearray()
    for row in rows:
        for half in (row[:4], row[4:]):
            value = 0
            for cell in half:
                value = (value << 2) | cell
            packed.append(value)
    return bytes([last[0], last[1], 8, 8]) + bytes(packed)


def _empty():
    return [[0] * 8 for _ in range(8)]


def _opening():
    rows = _empty()
    rows[3][3], rows[3][4] = 2, 1
    rows[4][3], rows[4][4] = 1, 2
    return rows


def test_decode_round_trip_cells():
    rows = _opening()
    rows[0][0] = 3
    rows[7][7] = 1
    board = decode_board(_pack(rows))
    assert board.cells == tuple(tuple(r) for r in rows)
    assert board.width == 8 and board.height == 8


def test_decode_no_last_move():
    board = decode_board(_pack(_opening()))
    assert board.last_x is None
    assert board.last_y is None


def test_decode_last_move_values():
    board = decode_board(_pack(_opening(), last=(2, 5)))
    assert (board.last_x, board.last_y) == (2, 5)


def test_decode_wrong_length():
    with pytest.raises(ValueError):
        decode_board(_pack(_opening())[:-1])


def test_decode_returns_board_state_with_eight_rows():
    board = decode_board(_pack(_empty()))
    assert isinstance(board, BoardState)
    assert len(board.cells) == 8
    assert all(len(row) == 8 for row in board.cells)


def test_opponent():
    assert opponent(1) == 2
    assert opponent(2) == 1


def test_player_color():
    assert player_color(b"\x01") == 1
    assert player_color(b"\x02") == 2


@pytest.mark.parametrize("body", [b"", b"\x03", b"\x00"])
def test_player_color_unknown(body):
    with pytest.raises(ValueError):
        player_color(body)


def test_opening_moves_for_black():
    board = decode_board(_pack(_opening()))
    assert set(playable_squares(board, 1)) == {(2, 3), (3, 2), (4, 5), (5, 4)}


def test_playable_squares_are_empty_and_row_major():
    board = decode_board(_pack(_opening()))
    for color in (1, 2):
        squares = playable_squares(board, color)
        assert list(squares) == sorted(squares)
        assert all(board.cells[r][c] == 0 for r, c in squares)


def test_diagonal_capture():
    rows = _empty()
    rows[2][2] = 1
    rows[3][3] = 2
    assert (4, 4) in playable_squares(rows, 1)


def test_no_capture_without_closing_piece():
    rows = _empty()
    rows[0][1] = 2
    assert playable_squares(rows, 1) == ()


def test_capture_blocked_by_empty_square():
    rows = _empty()
    rows[5][1] = 2
    rows[5][3] = 1
    assert (5, 0) not in playable_squares(rows, 1)


@pytest.mark.parametrize("square", [(0, 0), (0, 7), (7, 0), (7, 7)])
def test_corner_weight(square):
    assert move_weight(*square) == 1000


def test_non_corner_weights_are_lower():
    for row in range(8):
        for col in range(8):
            if (row, col) in {(0, 0), (0, 7), (7, 0), (7, 7)}:
                continue
            assert 1 <= move_weight(row, col) < 1000


@pytest.mark.parametrize("square", [(-1, 0), (0, 8), (8, 3)])
def test_move_weight_off_board(square):
    with pytest.raises(ValueError):
        move_weight(*square)


def test_best_move_empty():
    assert best_move([]) == (-1, -1)


def test_best_move_prefers_corner():
    assert best_move([(3, 3), (7, 7), (2, 4)]) == (7, 7)


def test_best_move_returns_col_row():
    assert best_move([(0, 7)]) == (7, 0)


def test_find_move_is_playable():
    body = _pack(_opening())
    x, y = find_move(body, 1)
    assert (y, x) in playable_squares(decode_board(body), 1)


def test_find_move_none_available():
    assert find_move(_pack(_empty()), 1) == (-1, -1)


def test_find_move_takes_corner():
    rows = _empty()
    rows[2][2] = 1
    rows[1][1] = 2
    rows[3][4] = 2
    rows[3][5] = 1
    x, y = find_move(_pack(rows), 1)
    assert (x, y) == (0, 0)
    assert (3, 3) in playable_squares(rows, 1)