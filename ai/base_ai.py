"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import Board
from engine.rules import Position


class BaseAI(ABC):
    """Abstract move-selection contract."""

    name: str = "ai"

    @abstractmethod
    def choose_move(self, board: Board) -> Position:
        """Choose a legal position for the side to move."""
        raise NotImplementedError
