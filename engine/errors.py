"""Exceptions raised by the tic-tac-toe engine."""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for engine errors."""


class InvalidBoardError(TicTacToeError, ValueError):
    """Board input is malformed: wrong length, unknown symbol or impossible piece counts."""


class IllegalMoveError(TicTacToeError):
    """A well-formed move that the rules do not allow in the current position."""


class NoMoveError(IllegalMoveError):
    """Search was requested on a board with no side to move."""
