"""Exhaustive minimax with alpha-beta pruning for tic-tac-toe."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ai.base_ai import BaseAI
from engine.board import Board
from engine.errors import NoMoveError
from engine.pieces import Outcome, Side
from engine.rules import Position

LOGGER = logging.getLogger(__name__)

# Scores are from X's point of view: X maximises, O minimises.
TERMINAL_VALUES: Dict[Outcome, int] = {
    Outcome.X_WINS: 1,
    Outcome.O_WINS: -1,
    Outcome.DRAW: 0,
    Outcome.UNFINISHED: 0,
}


def terminal_value(outcome: Outcome) -> int:
    """Game-theoretic value of a finished position for X."""
    return TERMINAL_VALUES[outcome]


@dataclass(frozen=True)
class SearchResult:
    """Root search result."""

    move: Position
    value: float
    nodes: int
    cutoffs: int


class MinimaxAI(BaseAI):
    """Perfect player: searches the whole game tree from the current position."""

    name = "hard"

    def __init__(self) -> None:
        self._nodes = 0
        self._cutoffs = 0

    def choose_move(self, board: Board) -> Position:
        return self.search(board).move

    def search(self, board: Board) -> SearchResult:
        """Run alpha-beta from ``board`` and return the best move for the side to move."""
        side = board.side_to_move()
        if side is None:
            raise NoMoveError(f"No move available: {board.outcome().message}")

        self._nodes = 0
        self._cutoffs = 0
        value, move = self._alphabeta(board, -math.inf, math.inf)
        if move is None:
            raise NoMoveError("Search found no candidate move")

        LOGGER.debug(
            "Minimax %s selected %s value=%s nodes=%d cutoffs=%d board=%r",
            side.symbol,
            move,
            value,
            self._nodes,
            self._cutoffs,
            board,
        )
        return SearchResult(move=move, value=value, nodes=self._nodes, cutoffs=self._cutoffs)

    def _alphabeta(self, board: Board, alpha: float, beta: float) -> Tuple[float, Optional[Position]]:
        self._nodes += 1
        outcome = board.outcome()
        if outcome.is_finished:
            return terminal_value(outcome), None

        side = board.side_to_move()
        maximizing = side is Side.X
        best_move: Optional[Position] = None

        for row, col in board.empty_cells():
            child = board.place(row, col, side)
            value, _ = self._alphabeta(child, alpha, beta)
            # Strict comparisons keep the earliest move among equal values.
            if maximizing and value > alpha:
                alpha = value
                best_move = (row, col)
            elif not maximizing and value < beta:
                beta = value
                best_move = (row, col)
            if beta <= alpha:
                self._cutoffs += 1
                break

        return (alpha if maximizing else beta), best_move


def best_move(board: Board) -> Position:
    """Optimal position for the side to move on ``board``."""
    return MinimaxAI().choose_move(board)
