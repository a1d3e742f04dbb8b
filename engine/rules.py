"""Board geometry helpers for N x N tic-tac-toe."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Tuple

BOARD_SIZE = 3

Position = Tuple[int, int]
Line = Tuple[Position, ...]


def in_bounds(pos: Position, size: int = BOARD_SIZE) -> bool:
    """Return whether a position is inside an N x N board."""
    row, col = pos
    return 0 <= row < size and 0 <= col < size


def iter_positions(size: int = BOARD_SIZE) -> Iterable[Position]:
    """Yield all board positions in row-major order."""
    for row in range(size):
        for col in range(size):
            yield (row, col)


def pos_to_index(pos: Position, size: int = BOARD_SIZE) -> int:
    return pos[0] * size + pos[1]


def index_to_pos(index: int, size: int = BOARD_SIZE) -> Position:
    return (index // size, index % size)


@lru_cache(maxsize=None)
def winning_lines(size: int = BOARD_SIZE) -> Tuple[Line, ...]:
    """
    Return every line that wins when fully held by one side.

    Order is rows, then columns, then the main diagonal and the anti-diagonal.
    """
    rows = [tuple((row, col) for col in range(size)) for row in range(size)]
    cols = [tuple((row, col) for row in range(size)) for col in range(size)]
    diag_down = tuple((i, i) for i in range(size))
    diag_up = tuple((size - 1 - i, i) for i in range(size))
    return tuple(rows + cols + [diag_down, diag_up])
