"""Self-play runner for AI-vs-AI tic-tac-toe games."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from ai.base_ai import BaseAI
from engine.board import Board, Move
from engine.pieces import Outcome, Side

LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[[Board, Move], None]


@dataclass
class SelfPlayConfig:
    """Self-play settings."""

    log_every: int = 1
    start_symbols: Optional[str] = None


@dataclass
class GameRecord:
    """Everything that happened in one game."""

    moves: List[Move] = field(default_factory=list)
    positions: List[np.ndarray] = field(default_factory=list)
    legal_masks: List[np.ndarray] = field(default_factory=list)
    outcome: Outcome = Outcome.UNFINISHED
    plies: int = 0


class SelfPlayRunner:
    """Runs AI-vs-AI games to completion and collects records."""

    def __init__(self, config: SelfPlayConfig | None = None) -> None:
        self.config = config or SelfPlayConfig()

    def _start_board(self) -> Board:
        if self.config.start_symbols is None:
            return Board.empty()
        return Board.from_symbols(self.config.start_symbols)

    def play_game(
        self,
        x_ai: BaseAI,
        o_ai: BaseAI,
        board: Optional[Board] = None,
        on_move: Optional[MoveCallback] = None,
    ) -> GameRecord:
        """Play one game, calling ``on_move`` with the new board after every move."""
        board = board if board is not None else self._start_board()
        record = GameRecord()

        while not board.is_finished():
            side = board.side_to_move()
            actor = x_ai if side is Side.X else o_ai
            row, col = actor.choose_move(board)
            move = Move(side=side, pos=(row, col))
            record.positions.append(board.encode_state())
            record.legal_masks.append(board.empty_mask())
            board = board.apply_move(move)
            record.moves.append(move)
            if on_move is not None:
                on_move(board, move)

        record.outcome = board.outcome()
        record.plies = len(record.moves)
        return record

    def run_games(
        self,
        x_ai: BaseAI,
        o_ai: BaseAI,
        n_games: int,
        on_move: Optional[MoveCallback] = None,
    ) -> List[GameRecord]:
        records: List[GameRecord] = []
        for game_index in range(n_games):
            record = self.play_game(x_ai, o_ai, on_move=on_move)
            records.append(record)
            if (game_index + 1) % max(1, self.config.log_every) == 0:
                LOGGER.info(
                    "Self-play game %d/%d | outcome=%s plies=%d",
                    game_index + 1,
                    n_games,
                    record.outcome.message,
                    record.plies,
                )
        return records

    @staticmethod
    def summarize(records: Sequence[GameRecord]) -> Dict[str, int]:
        summary = {"x_wins": 0, "o_wins": 0, "draws": 0}
        for record in records:
            if record.outcome is Outcome.DRAW:
                summary["draws"] += 1
            elif record.outcome is Outcome.X_WINS:
                summary["x_wins"] += 1
            elif record.outcome is Outcome.O_WINS:
                summary["o_wins"] += 1
        return summary
