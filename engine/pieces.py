"""Sides, cell symbols and game outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from engine.errors import InvalidBoardError


class Side(str, Enum):
    """Player side. X always moves first."""

    X = "X"
    O = "O"

    def opponent(self) -> "Side":
        return Side.O if self is Side.X else Side.X

    @property
    def symbol(self) -> str:
        return self.value


SYMBOL_TO_CELL: Dict[str, Optional[Side]] = {
    "X": Side.X,
    "O": Side.O,
    "_": None,
    " ": None,
}


def parse_symbol(symbol: str) -> Optional[Side]:
    """Map one board symbol to a cell value (None for an empty cell)."""
    try:
        return SYMBOL_TO_CELL[symbol]
    except KeyError:
        raise InvalidBoardError(f'"{symbol}" is not a valid cell symbol') from None


def cell_symbol(cell: Optional[Side], empty_symbol: str = " ") -> str:
    return empty_symbol if cell is None else cell.symbol


class Outcome(str, Enum):
    """State of a game as derived from the board contents."""

    UNFINISHED = "unfinished"
    DRAW = "draw"
    X_WINS = "x_wins"
    O_WINS = "o_wins"

    @classmethod
    def wins(cls, side: Side) -> "Outcome":
        return cls.X_WINS if side is Side.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Side]:
        if self is Outcome.X_WINS:
            return Side.X
        if self is Outcome.O_WINS:
            return Side.O
        return None

    @property
    def is_finished(self) -> bool:
        return self is not Outcome.UNFINISHED

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self]


OUTCOME_MESSAGES: Dict[Outcome, str] = {
    Outcome.UNFINISHED: "Game not finished",
    Outcome.DRAW: "Draw",
    Outcome.X_WINS: "X wins",
    Outcome.O_WINS: "O wins",
}
