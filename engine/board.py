"""Immutable tic-tac-toe board, outcome evaluation, and state encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

from engine.errors import IllegalMoveError, InvalidBoardError
from engine.pieces import Outcome, Side, cell_symbol, parse_symbol
from engine.rules import BOARD_SIZE, Position, in_bounds, iter_positions, pos_to_index, winning_lines

Cell = Optional[Side]

_NO_THREATS: FrozenSet[Position] = frozenset()


@dataclass(frozen=True)
class Move:
    """A piece placement."""

    side: Side
    pos: Position


def _evaluate(cells: Sequence[Cell], size: int) -> Tuple[Outcome, Dict[Side, FrozenSet[Position]]]:
    """Scan every line once and derive the outcome and both threat sets."""
    threats: Dict[Side, Set[Position]] = {Side.X: set(), Side.O: set()}
    for line in winning_lines(size):
        last_side: Cell = None
        count = 0
        empties = 0
        missing: Optional[Position] = None
        for pos in line:
            cell = cells[pos_to_index(pos, size)]
            if cell is None:
                empties += 1
                missing = pos
            elif cell is last_side:
                count += 1
            else:
                last_side = cell
                count = 1
        if count == size and last_side is not None:
            return Outcome.wins(last_side), {Side.X: _NO_THREATS, Side.O: _NO_THREATS}
        if empties == 1 and count == size - 1 and last_side is not None and missing is not None:
            threats[last_side].add(missing)

    if None not in cells:
        return Outcome.DRAW, {Side.X: _NO_THREATS, Side.O: _NO_THREATS}
    return Outcome.UNFINISHED, {side: frozenset(found) for side, found in threats.items()}


class Board:
    """
    N x N tic-tac-toe position.

    Boards never change after construction: ``place`` returns a new board, so
    any number of search branches can share an ancestor safely. Outcome and
    threats are computed once in ``__init__``.
    """

    __slots__ = ("size", "_cells", "_outcome", "_threats", "_x_count", "_o_count")

    def __init__(self, cells: Iterable[Cell], size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise InvalidBoardError(f"Board size must be positive, got {size}")
        cell_tuple = tuple(cells)
        if len(cell_tuple) != size * size:
            raise InvalidBoardError(f"Board must have exactly {size * size} cells, got {len(cell_tuple)}")
        for cell in cell_tuple:
            if cell is not None and not isinstance(cell, Side):
                raise InvalidBoardError(f"Invalid cell value: {cell!r}")

        x_count = cell_tuple.count(Side.X)
        o_count = cell_tuple.count(Side.O)
        if x_count - o_count not in (0, 1):
            raise InvalidBoardError(
                f"Impossible piece counts: X={x_count} O={o_count} (X moves first and sides alternate)"
            )

        self.size = size
        self._cells: Tuple[Cell, ...] = cell_tuple
        self._x_count = x_count
        self._o_count = o_count
        self._outcome, self._threats = _evaluate(cell_tuple, size)

    @classmethod
    def from_symbols(cls, symbols: Sequence[str], size: int = BOARD_SIZE) -> "Board":
        """
        Build a board from row-major symbols.

        ``X`` and ``O`` are pieces, ``_`` or a space is an empty cell.
        """
        if symbols is None:
            raise InvalidBoardError("Input symbols cannot be None")
        if len(symbols) != size * size:
            raise InvalidBoardError(f"Input symbols must have a length of {size * size}, got {len(symbols)}")
        return cls((parse_symbol(symbol) for symbol in symbols), size=size)

    @classmethod
    def empty(cls, size: int = BOARD_SIZE) -> "Board":
        return cls([None] * (size * size), size=size)

    def _check_position(self, row: int, col: int) -> None:
        if not in_bounds((row, col), self.size):
            raise IndexError(f"({row}, {col}) is out of bounds for the {self.size}x{self.size} board")

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell content at a position."""
        self._check_position(row, col)
        return self._cells[row * self.size + col]

    def iter_positions(self) -> Iterable[Position]:
        return iter_positions(self.size)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._cells

    @property
    def ply_count(self) -> int:
        return self._x_count + self._o_count

    def piece_count(self, side: Side) -> int:
        return self._x_count if side is Side.X else self._o_count

    def outcome(self) -> Outcome:
        return self._outcome

    def is_finished(self) -> bool:
        return self._outcome.is_finished

    def side_to_move(self) -> Optional[Side]:
        """Side whose turn it is, or None once the game is over."""
        if self._outcome.is_finished:
            return None
        return Side.X if self._x_count == self._o_count else Side.O

    def threats(self, side: Side) -> FrozenSet[Position]:
        """Empty cells that would complete a line for ``side``."""
        return self._threats[side]

    def empty_cells(self) -> List[Position]:
        """All empty positions in row-major order."""
        return [pos for pos, cell in zip(self.iter_positions(), self._cells) if cell is None]

    def legal_moves(self) -> List[Move]:
        side = self.side_to_move()
        if side is None:
            return []
        return [Move(side=side, pos=pos) for pos in self.empty_cells()]

    def place(self, row: int, col: int, side: Side) -> "Board":
        """Return the board after ``side`` plays at (row, col)."""
        self._check_position(row, col)
        if self._outcome.is_finished:
            raise IllegalMoveError(f"Game is already over ({self._outcome.message})")
        to_move = self.side_to_move()
        if side is not to_move:
            raise IllegalMoveError(f"It is {to_move.symbol}'s turn, not {side.symbol}'s")
        index = row * self.size + col
        if self._cells[index] is not None:
            raise IllegalMoveError(f"Cell ({row}, {col}) is occupied")
        cells = list(self._cells)
        cells[index] = side
        return Board(cells, size=self.size)

    def apply_move(self, move: Move) -> "Board":
        row, col = move.pos
        return self.place(row, col, move.side)

    def to_symbols(self, empty_symbol: str = " ") -> str:
        """Row-major symbol string, the inverse of ``from_symbols``."""
        return "".join(cell_symbol(cell, empty_symbol) for cell in self._cells)

    def render_ascii(self, empty_symbol: str = " ") -> str:
        """Return a simple human-readable board representation."""
        border = "-" * (self.size * 2 + 3)
        lines: List[str] = [border]
        for row in range(self.size):
            row_cells = [cell_symbol(self.cell(row, col), empty_symbol) for col in range(self.size)]
            lines.append("| " + " ".join(row_cells) + " |")
        lines.append(border)
        return "\n".join(lines)

    def encode_state(self) -> np.ndarray:
        """Encode the position as (side-to-move, X, O) planes."""
        encoded = np.zeros((3, self.size, self.size), dtype=np.float32)
        encoded[0, :, :] = 1.0 if self.side_to_move() is Side.X else 0.0
        for (row, col), cell in zip(self.iter_positions(), self._cells):
            if cell is Side.X:
                encoded[1, row, col] = 1.0
            elif cell is Side.O:
                encoded[2, row, col] = 1.0
        return encoded

    def empty_mask(self) -> np.ndarray:
        """Boolean mask over the flattened cells, True where a piece may go."""
        return np.array([cell is None for cell in self._cells], dtype=np.bool_)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __hash__(self) -> int:
        return hash((self.size, self._cells))

    def __repr__(self) -> str:
        return f"Board({self.to_symbols('_')!r})"

    def __str__(self) -> str:
        return self.render_ascii()
