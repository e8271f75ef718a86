import pytest

from mixbag.linear import find_adjacent_move, unpack_cells

HEADER = bytes([0xFF, 0xFF, 8, 8])


def _pack(cells):
    out = bytearray()
    for start in range(0, len(cells), 4):
        a, b, c, d = cells[start:start + 4]
        out.append((a << 6) | (b << 4) | (c << 2) | d)
    return bytes(out)


def _grid(width, height, pieces):
    cells = [0] * (width * height)
    for (x, y), value in pieces.items():
        cells[y * width + x] = value
    return cells


def _assert_capture(cells, width, color, start, move):
    sx, sy = start
    mx, my = move
    assert cells[my * width + mx] == 0
    between = ((sx + mx) // 2, (sy + my) // 2)
    assert cells[between[1] * width + between[0]] not in (0, color)


def test_unpack_sample_bytes():
    cells = unpack_cells(HEADER + bytes([0x90, 0x24, 0x18, 0x00]))
    assert cells[:4] == (2, 1, 0, 0)
    assert cells[4:8] == (0, 2, 1, 0)
    assert cells[8:12] == (0, 1, 2, 0)
    assert cells[12:] == (0, 0, 0, 0)


def test_unpack_round_trip():
    cells = tuple((i * 7 + 3) % 4 for i in range(64))
    assert unpack_cells(HEADER + _pack(cells)) == cells


def test_unpack_length_is_four_per_byte():
    body = HEADER + bytes(range(16))
    assert len(unpack_cells(body)) == 4 * 16


def test_unpack_rejects_header_only():
    with pytest.raises(ValueError):
        unpack_cells(HEADER)


def test_unpack_rejects_empty():
    with pytest.raises(ValueError):
        unpack_cells(b"")


def test_finds_move_to_the_right():
    cells = _grid(8, 8, {(0, 0): 1, (1, 0): 2})
    move = find_adjacent_move(cells, 1, 8, 8)
    assert move == (2, 0)
    _assert_capture(cells, 8, 1, (0, 0), move)


def test_finds_move_downwards():
    cells = _grid(8, 8, {(3, 1): 1, (3, 2): 2})
    move = find_adjacent_move(cells, 1, 8, 8)
    assert move == (3, 3)
    _assert_capture(cells, 8, 1, (3, 1), move)


def test_finds_move_upwards_near_bottom():
    cells = _grid(8, 8, {(5, 7): 1, (5, 6): 2})
    move = find_adjacent_move(cells, 1, 8, 8)
    assert move is not None
    _assert_capture(cells, 8, 1, (5, 7), move)
    assert move[0] == 5


def test_no_move_on_empty_board():
    assert find_adjacent_move([0] * 64, 1, 8, 8) is None


def test_right_search_does_not_wrap_rows():
    cells = _grid(8, 8, {(6, 0): 1, (7, 0): 2})
    assert find_adjacent_move(cells, 1, 8, 8) is None


def test_left_search_does_not_wrap_rows():
    cells = _grid(8, 8, {(0, 1): 2, (1, 1): 1})
    assert find_adjacent_move(cells, 1, 8, 8) is None


def test_own_pieces_are_not_taken_as_opponent():
    cells = _grid(8, 8, {(0, 0): 1, (1, 0): 1})
    assert find_adjacent_move(cells, 1, 8, 8) is None


def test_last_cell_is_not_a_starting_piece():
    cells = [0, 2, 1]
    assert find_adjacent_move(cells, 1, 3, 1) is None


def test_rejects_non_positive_width():
    with pytest.raises(ValueError):
        find_adjacent_move([1, 2, 0, 0], 1, 0, 1)