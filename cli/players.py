"""Player kinds and the single move-selection dispatch used by the shell."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from ai.minimax_ai import MinimaxAI
from engine.board import Board
from engine.rules import Position, in_bounds

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


class PlayerKind(str, Enum):
    """Who supplies moves for one side."""

    USER = "user"
    HARD = "hard"


def parse_player_kind(text: str) -> PlayerKind:
    """Map a menu word such as ``user`` or ``HARD`` to a player kind."""
    try:
        return PlayerKind(text.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown player type: {text!r}") from None


def prompt_human_move(
    board: Board,
    read_line: ReadLine = input,
    write: Write = print,
    one_based: bool = True,
) -> Position:
    """Ask for "row col" until the answer names an empty cell on the board."""
    offset = 1 if one_based else 0
    low, high = offset, board.size - 1 + offset
    while True:
        parts = read_line("Enter the coordinates: ").split()
        if len(parts) != 2 or not all(part.lstrip("-").isdigit() for part in parts):
            write("You should enter numbers!")
            continue
        try:
            row, col = int(parts[0]) - offset, int(parts[1]) - offset
        except ValueError:
            write("You should enter numbers!")
            continue
        if not in_bounds((row, col), board.size):
            write(f"Coordinates should be from {low} to {high}!")
            continue
        if board.cell(row, col) is not None:
            write("This cell is occupied! Choose another one!")
            continue
        return (row, col)


def select_move(
    kind: PlayerKind,
    board: Board,
    ai: Optional[MinimaxAI] = None,
    read_line: ReadLine = input,
    write: Write = print,
    one_based: bool = True,
) -> Position:
    """Return the next position for the side to move, chosen by ``kind``."""
    if kind is PlayerKind.USER:
        return prompt_human_move(board, read_line=read_line, write=write, one_based=one_based)
    if kind is PlayerKind.HARD:
        write(f'Making move level "{kind.value}"')
        return (ai or MinimaxAI()).choose_move(board)
    raise ValueError(f"Unsupported player type: {kind}")
