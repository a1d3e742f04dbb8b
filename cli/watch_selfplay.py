"""Console spectator mode for minimax-vs-minimax games."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Dict, Optional

from ai.minimax_ai import MinimaxAI
from ai.self_play import SelfPlayConfig, SelfPlayRunner
from cli.config import ShellConfig
from cli.players import Write
from engine.board import Board, Move
from engine.errors import InvalidBoardError

LOGGER = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Watch the minimax AI play itself.")
    parser.add_argument("--config", type=str, default="configs/game_config.json", help="Path to shell config JSON")
    parser.add_argument("--games", type=_positive_int, default=None, help="Number of games to watch")
    parser.add_argument("--delay", type=float, default=None, help="Seconds to pause after each move")
    parser.add_argument("--board", type=str, default=None, help="Starting position as 9 row-major symbols")
    parser.add_argument("--log-level", type=str, default=None, help="Python logging level")
    return parser.parse_args(argv)


def watch(
    games: int,
    delay_seconds: float = 0.0,
    start_symbols: Optional[str] = None,
    log_every: int = 1,
    empty_symbol: str = " ",
    write: Write = print,
) -> Dict[str, int]:
    """Play ``games`` self-play games, printing every position, and return the summary."""
    if games < 1:
        raise ValueError(f"games must be at least 1, got {games}")
    runner = SelfPlayRunner(SelfPlayConfig(log_every=log_every, start_symbols=start_symbols))
    ai = MinimaxAI()

    def show(board: Board, move: Move) -> None:
        row, col = move.pos
        write(f"{move.side.symbol} -> ({row + 1}, {col + 1})")
        write(board.render_ascii(empty_symbol))
        if board.is_finished():
            write(board.outcome().message)
        if delay_seconds > 0:
            time.sleep(delay_seconds)

    records = runner.run_games(ai, ai, games, on_move=show)

    summary = runner.summarize(records)
    write(f"X wins: {summary['x_wins']} | O wins: {summary['o_wins']} | Draws: {summary['draws']}")
    LOGGER.info("Spectator summary %s", summary)
    return summary


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    config = ShellConfig.load(args.config)
    level = args.log_level or config.log_level
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))

    if args.board is not None:
        try:
            Board.from_symbols(args.board, size=config.board_size)
        except InvalidBoardError as exc:
            print(f"Invalid board: {exc}")
            return

    watch(
        games=args.games if args.games is not None else config.spectator_games,
        delay_seconds=args.delay if args.delay is not None else config.spectator_delay_seconds,
        start_symbols=args.board,
        log_every=config.log_every_games,
        empty_symbol=config.empty_symbol,
    )


if __name__ == "__main__":
    main()
