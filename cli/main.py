"""CLI entrypoint for playing tic-tac-toe against the minimax AI."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ai.minimax_ai import MinimaxAI
from cli.config import ShellConfig
from cli.players import PlayerKind, ReadLine, Write, parse_player_kind, select_move
from engine.board import Board
from engine.errors import IllegalMoveError, InvalidBoardError
from engine.pieces import Outcome, Side

LOGGER = logging.getLogger("tictactoe.cli")

BAD_PARAMETERS = "Bad parameters!"


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/game_config.json",
        help="Path to shell config JSON",
    )
    parser.add_argument(
        "--board",
        type=str,
        default=None,
        help="Starting position as 9 row-major symbols (X, O, _)",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Python logging level")
    return parser.parse_args(argv)


def run_game(
    x_kind: PlayerKind,
    o_kind: PlayerKind,
    board: Optional[Board] = None,
    read_line: ReadLine = input,
    write: Write = print,
    config: Optional[ShellConfig] = None,
) -> Outcome:
    """Play one game to the end and return its outcome."""
    config = config or ShellConfig()
    board = board if board is not None else Board.empty(config.board_size)
    ai = MinimaxAI()
    write(board.render_ascii(config.empty_symbol))

    while not board.is_finished():
        side = board.side_to_move()
        kind = x_kind if side is Side.X else o_kind
        row, col = select_move(
            kind,
            board,
            ai=ai,
            read_line=read_line,
            write=write,
            one_based=config.one_based_input,
        )
        try:
            board = board.place(row, col, side)
        except IllegalMoveError as exc:
            write(str(exc))
            continue
        LOGGER.debug("%s (%s) played %s", side.symbol, kind.value, (row, col))
        write(board.render_ascii(config.empty_symbol))

    outcome = board.outcome()
    write(outcome.message)
    return outcome


def run_menu(
    read_line: ReadLine = input,
    write: Write = print,
    config: Optional[ShellConfig] = None,
    start_board: Optional[Board] = None,
) -> None:
    """Read ``start <p1> <p2>`` / ``exit`` commands until told to stop."""
    config = config or ShellConfig()
    while True:
        try:
            command = read_line("Input command: ").strip()
        except EOFError:
            break
        parts = command.split()
        if len(parts) == 1 and parts[0].lower() == "exit":
            break
        if len(parts) != 3 or parts[0].lower() != "start":
            write(BAD_PARAMETERS)
            continue
        try:
            x_kind = parse_player_kind(parts[1])
            o_kind = parse_player_kind(parts[2])
        except ValueError:
            write(BAD_PARAMETERS)
            continue
        LOGGER.info("Starting game X=%s O=%s", x_kind.value, o_kind.value)
        try:
            run_game(x_kind, o_kind, board=start_board, read_line=read_line, write=write, config=config)
        except EOFError:
            break


def run_cli(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    config = ShellConfig.load(args.config)
    level = args.log_level or config.log_level
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))

    start_board = None
    if args.board is not None:
        try:
            start_board = Board.from_symbols(args.board, size=config.board_size)
        except InvalidBoardError as exc:
            print(f"Invalid board: {exc}")
            return
    run_menu(config=config, start_board=start_board)


if __name__ == "__main__":
    run_cli()
