"""Move search on a board read as one flat run of cells.

The board body of a next-turn message is unpacked into a flat sequence of
2-bit cells, read row by row, with ``width`` cells to a row. The search
looks for a piece of the player's colour next to an opponent's piece that
is followed by an empty square. It tries right, then left, then two rows
down or two rows up.
"""

from __future__ import annotations

from collections.abc import Sequence

from .board import EMPTY, HEADER_SIZE, opponent


def unpack_cells(body: bytes) -> tuple[int, ...]:
    """Unpack every byte after the 4-byte header into four 2-bit cells, high bits first."""
    raw = bytes(body)
    if len(raw) <= HEADER_SIZE:
        raise ValueError(f"board body needs more than {HEADER_SIZE} bytes, got {len(raw)}")
    return tuple(
        (value >> shift) & 0b11
        for value in raw[HEADER_SIZE:]
        for shift in (6, 4, 2, 0)
    )


def _cell(cells: Sequence[int], index: int) -> int | None:
    if 0 <= index < len(cells):
        return cells[index]
    return None


def _pair_matches(cells: Sequence[int], first: int, second: int, other: int) -> bool:
    return _cell(cells, first) == other and _cell(cells, second) == EMPTY


def find_adjacent_move(
    cells: Sequence[int], color: int, width: int, height: int
) -> tuple[int, int] | None:
    """Return the (x, y) of the first simple capturing move, or None.

    ``color`` is the cell value of the player's pieces. Cells are scanned in
    order; the last cell is never taken as a starting piece.
    """
    if width <= 0:
        raise ValueError(f"board width must be positive, got {width}")
    other = opponent(color)

    for index, value in enumerate(cells[:-1]):
        if value != color:
            continue
        y, x = divmod(index, width)

        if x <= width - 3 and _pair_matches(cells, index + 1, index + 2, other):
            return x + 2, y
        if x >= 2 and _pair_matches(cells, index - 1, index - 2, other):
            return x - 2, y
        if y < height - 3:
            if _pair_matches(cells, index + width, index + 2 * width, other):
                return x, y + 2
        elif y > 2:
            if _pair_matches(cells, index - width, index - 2 * width, other):
                return x, y - 2
    return None