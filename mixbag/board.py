"""Reversi board decoding and move choice for the player client.

A board body is: last move x, last move y, board width, board height, then
two bytes per row of an 8x8 board, each byte holding four 2-bit cells with
the leftmost cell in the high bits.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .protocol import BLACK_PLAYER, WHITE_PLAYER

BOARD_SIZE = 8
HEADER_SIZE = 4
BODY_SIZE = HEADER_SIZE + BOARD_SIZE * 2
NO_MOVE_BYTE = 0xFF
EMPTY = 0
CORNER_WEIGHT = 1000
NO_MOVE = (-1, -1)

_DIRECTIONS = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
)
_CORNERS = frozenset({(0, 0), (0, 7), (7, 0), (7, 7)})
_POOR_SQUARES = frozenset({(1, 6), (6, 6)})

Grid = Sequence[Sequence[int]]


@dataclass(frozen=True)
class BoardState:
    """A decoded board; ``cells[row][col]`` is 0 for empty, else a colour."""

    last_x: int | None
    last_y: int | None
    width: int
    height: int
    cells: tuple[tuple[int, ...], ...]


def opponent(color: int) -> int:
    """The other player's colour: white for black, black for anything else."""
    return WHITE_PLAYER if color == BLACK_PLAYER else BLACK_PLAYER


def _unpack_byte(value: int) -> tuple[int, ...]:
    return tuple((value >> shift) & 0b11 for shift in (6, 4, 2, 0))


def decode_board(body: bytes) -> BoardState:
    """Decode the body of a next-turn message."""
    raw = bytes(body)
    if len(raw) != BODY_SIZE:
        raise ValueError(f"board body must be {BODY_SIZE} bytes, got {len(raw)}")
    last_x, last_y, width, height = raw[:HEADER_SIZE]
    packed = raw[HEADER_SIZE:]
    cells = tuple(
        _unpack_byte(left) + _unpack_byte(right)
        for left, right in zip(packed[0::2], packed[1::2])
    )
    return BoardState(
        last_x=None if last_x == NO_MOVE_BYTE else last_x,
        last_y=None if last_y == NO_MOVE_BYTE else last_y,
        width=width,
        height=height,
        cells=cells,
    )


def player_color(body: bytes) -> int:
    """The colour assigned by a player-ok message."""
    if not body:
        raise ValueError("empty colour message")
    color = body[0]
    if color not in (BLACK_PLAYER, WHITE_PLAYER):
        raise ValueError(f"unknown colour 0x{color:02x}")
    return color


def _captures(cells: Grid, row: int, col: int, d_row: int, d_col: int, color: int) -> bool:
    rows = len(cells)

    def inside(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < len(cells[r])

    r, c = row + d_row, col + d_col
    if not inside(r, c) or cells[r][c] != opponent(color):
        return False
    while inside(r, c):
        value = cells[r][c]
        if value == EMPTY:
            return False
        if value == color:
            return True
        r += d_row
        c += d_col
    return False


def playable_squares(board: BoardState | Grid, color: int) -> tuple[tuple[int, int], ...]:
    """Empty squares, as (row, col) in row-major order, where ``color`` captures."""
    cells = board.cells if isinstance(board, BoardState) else board
    return tuple(
        (row, col)
        for row, line in enumerate(cells)
        for col, value in enumerate(line)
        if value == EMPTY
        and any(_captures(cells, row, col, dr, dc, color) for dr, dc in _DIRECTIONS)
    )


def move_weight(row: int, col: int) -> int:
    """How desirable a move at (row, col) is; corners are worth most."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"square ({row}, {col}) is off the board")
    distance = abs(4 - row) + abs(4 - col)
    if (row, col) in _CORNERS:
        return CORNER_WEIGHT
    if row in (0, BOARD_SIZE - 1) or col in (0, BOARD_SIZE - 1):
        return distance * 2 + 3
    if (row, col) in _POOR_SQUARES:
        return 1
    if distance > 5:
        return 2
    return distance + 3


def best_move(playable: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Pick the heaviest square, the last in row-major order on ties.

    Returns (x, y), that is (col, row), or (-1, -1) when nothing is playable.
    """
    squares = list(playable)
    if not squares:
        return NO_MOVE
    row, col = max(squares, key=lambda square: (move_weight(*square), square))
    return col, row


def find_move(body: bytes, color: int) -> tuple[int, int]:
    """Choose the (x, y) move to play for a next-turn message body."""
    return best_move(playable_squares(decode_board(body), color))